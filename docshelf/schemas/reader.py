"""
Reader Schemas

Response models for the public reader: containers with their navigation
trees, and single documents with breadcrumbs, table of contents and
previous/next links.

Collection payload shape:
=========================
    {
      "id": "...", "title": "Getting Started", "slug": "getting-started", ...
      "categories": [
        {"id": "...", "title": "Basics", "slug": "basics", "order": 0,
         "pages": [{"title": "Installation", "children": [...]}, ...]}
      ],
      "pages": [...]        ← uncategorized page tree
    }
"""

from pydantic import BaseModel, Field

from docshelf.schemas.collection import CollectionResponse
from docshelf.schemas.knowledge_base import (
    ArticleNode,
    ArticleResponse,
    KnowledgeBaseResponse,
)
from docshelf.schemas.page import PageNode, PageResponse


class HeadingResponse(BaseModel):
    """One entry of the "on this page" list."""

    id: str
    text: str
    level: int


class Breadcrumb(BaseModel):
    """One ancestor of the current document, outermost first."""

    title: str
    slug: str


class NavLink(BaseModel):
    """Previous/next document in reading order."""

    id: str
    title: str
    slug: str


# =============================================================================
# COLLECTIONS
# =============================================================================


class CategoryContent(BaseModel):
    """A category with its published page tree."""

    id: str
    title: str
    slug: str
    order: int
    pages: list[PageNode] = Field(default_factory=list)


class CollectionContentResponse(CollectionResponse):
    """A collection with its categories and uncategorized pages."""

    categories: list[CategoryContent] = Field(default_factory=list)
    pages: list[PageNode] = Field(
        default_factory=list,
        description="Published pages that belong to no category",
    )


class PageDetailResponse(BaseModel):
    """A published page with its navigation context."""

    page: PageResponse
    collection: CollectionResponse
    category: CategoryContent | None = None
    breadcrumbs: list[Breadcrumb] = Field(default_factory=list)
    headings: list[HeadingResponse] = Field(default_factory=list)
    previous: NavLink | None = None
    next: NavLink | None = None


# =============================================================================
# KNOWLEDGE BASES
# =============================================================================


class KnowledgeBaseCategoryContent(BaseModel):
    """A knowledge-base category with its published article tree."""

    id: str
    name: str
    slug: str
    description: str | None = None
    order: int
    articles: list[ArticleNode] = Field(default_factory=list)


class KnowledgeBaseContentResponse(KnowledgeBaseResponse):
    """A knowledge base with its categories."""

    categories: list[KnowledgeBaseCategoryContent] = Field(default_factory=list)


class ArticleDetailResponse(BaseModel):
    """A published article with its navigation context."""

    article: ArticleResponse
    knowledge_base: KnowledgeBaseResponse
    category: KnowledgeBaseCategoryContent
    breadcrumbs: list[Breadcrumb] = Field(default_factory=list)
    headings: list[HeadingResponse] = Field(default_factory=list)
    previous: NavLink | None = None
    next: NavLink | None = None
