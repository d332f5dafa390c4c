"""
Model → Schema Converters

ORM rows carry UUIDs; responses carry string ids. These helpers are the
single place that maps one to the other, shared by reader and admin
services.

Tree conversion walks TreeNode children recursively. Trees come out of
build_tree(), which never emits a node twice, so the walk always ends.
"""

from typing import Optional
from uuid import UUID

from docshelf.config.constants import ContentType
from docshelf.core.hierarchy import TreeNode, build_tree, scope_items
from docshelf.models import (
    AdminUser,
    Article,
    Category,
    Collection,
    KnowledgeBase,
    KnowledgeBaseCategory,
    Page,
)
from docshelf.schemas.auth import AdminDetails
from docshelf.schemas.collection import CategoryResponse, CollectionResponse
from docshelf.schemas.knowledge_base import (
    ArticleNode,
    ArticleResponse,
    KnowledgeBaseCategoryResponse,
    KnowledgeBaseResponse,
)
from docshelf.schemas.page import PageNode, PageResponse
from docshelf.schemas.reader import (
    CategoryContent,
    CollectionContentResponse,
    KnowledgeBaseCategoryContent,
    KnowledgeBaseContentResponse,
)


def _str_id(value: Optional[UUID]) -> Optional[str]:
    return str(value) if value else None


# =============================================================================
# COLLECTION VARIANT
# =============================================================================


def to_collection_response(collection: Collection) -> CollectionResponse:
    return CollectionResponse(
        id=str(collection.id),
        title=collection.title,
        slug=collection.slug,
        description=collection.description,
        icon=collection.icon,
        order=collection.order,
        created_at=collection.created_at,
        updated_at=collection.updated_at,
    )


def to_category_response(category: Category) -> CategoryResponse:
    return CategoryResponse(
        id=str(category.id),
        collection_id=str(category.collection_id),
        title=category.title,
        slug=category.slug,
        order=category.order,
        created_at=category.created_at,
        updated_at=category.updated_at,
    )


def to_page_response(page: Page) -> PageResponse:
    return PageResponse(
        id=str(page.id),
        collection_id=str(page.collection_id),
        category_id=_str_id(page.category_id),
        parent_id=_str_id(page.parent_id),
        title=page.title,
        slug=page.slug,
        content=page.content,
        content_type=ContentType(page.content_type),
        order=page.order,
        published=page.published,
        created_at=page.created_at,
        updated_at=page.updated_at,
    )


def to_page_nodes(forest: list[TreeNode[Page]]) -> list[PageNode]:
    """Convert a page forest into navigation nodes."""
    return [
        PageNode(
            id=str(node.item.id),
            title=node.item.title,
            slug=node.item.slug,
            category_id=_str_id(node.item.category_id),
            parent_id=_str_id(node.item.parent_id),
            order=node.order,
            published=node.item.published,
            children=to_page_nodes(node.children),
        )
        for node in forest
    ]


def to_category_content(category: Category, pages: list[Page]) -> CategoryContent:
    """A category with the tree of the pages given that belong to it."""
    return CategoryContent(
        id=str(category.id),
        title=category.title,
        slug=category.slug,
        order=category.order,
        pages=to_page_nodes(build_tree(scope_items(pages, category_id=category.id))),
    )


def to_collection_content(
    collection: Collection,
    categories: list[Category],
    pages: list[Page],
) -> CollectionContentResponse:
    """Arrange a collection's pages into per-category trees.

    Callers decide which pages take part: the reader passes published pages
    only, the admin tree passes every page.
    """
    return CollectionContentResponse(
        **to_collection_response(collection).model_dump(),
        categories=[to_category_content(category, pages) for category in categories],
        pages=to_page_nodes(build_tree(scope_items(pages, category_id=None))),
    )


# =============================================================================
# KNOWLEDGE-BASE VARIANT
# =============================================================================


def to_knowledge_base_response(knowledge_base: KnowledgeBase) -> KnowledgeBaseResponse:
    return KnowledgeBaseResponse(
        id=str(knowledge_base.id),
        name=knowledge_base.name,
        slug=knowledge_base.slug,
        description=knowledge_base.description,
        icon=knowledge_base.icon,
        order=knowledge_base.order,
        created_at=knowledge_base.created_at,
        updated_at=knowledge_base.updated_at,
    )


def to_kb_category_response(
    category: KnowledgeBaseCategory,
) -> KnowledgeBaseCategoryResponse:
    return KnowledgeBaseCategoryResponse(
        id=str(category.id),
        knowledge_base_id=str(category.knowledge_base_id),
        name=category.name,
        slug=category.slug,
        description=category.description,
        order=category.order,
        created_at=category.created_at,
        updated_at=category.updated_at,
    )


def to_article_response(article: Article) -> ArticleResponse:
    return ArticleResponse(
        id=str(article.id),
        category_id=str(article.category_id),
        parent_id=_str_id(article.parent_id),
        title=article.title,
        slug=article.slug,
        content=article.content,
        order=article.order,
        published=article.published,
        created_at=article.created_at,
        updated_at=article.updated_at,
    )


def to_article_nodes(forest: list[TreeNode[Article]]) -> list[ArticleNode]:
    """Convert an article forest into navigation nodes."""
    return [
        ArticleNode(
            id=str(node.item.id),
            title=node.item.title,
            slug=node.item.slug,
            parent_id=_str_id(node.item.parent_id),
            order=node.order,
            published=node.item.published,
            children=to_article_nodes(node.children),
        )
        for node in forest
    ]


def to_kb_category_content(
    category: KnowledgeBaseCategory,
    articles: list[Article],
) -> KnowledgeBaseCategoryContent:
    """A knowledge-base category with the tree of the articles given."""
    return KnowledgeBaseCategoryContent(
        id=str(category.id),
        name=category.name,
        slug=category.slug,
        description=category.description,
        order=category.order,
        articles=to_article_nodes(
            build_tree(scope_items(articles, category_id=category.id))
        ),
    )


def to_knowledge_base_content(
    knowledge_base: KnowledgeBase,
    categories: list[KnowledgeBaseCategory],
    articles: list[Article],
) -> KnowledgeBaseContentResponse:
    """Arrange a knowledge base's articles into per-category trees."""
    return KnowledgeBaseContentResponse(
        **to_knowledge_base_response(knowledge_base).model_dump(),
        categories=[to_kb_category_content(c, articles) for c in categories],
    )


# =============================================================================
# ADMINS
# =============================================================================


def to_admin_details(admin: AdminUser) -> AdminDetails:
    return AdminDetails.model_validate(admin)
