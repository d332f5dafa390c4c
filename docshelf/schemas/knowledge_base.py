"""
Knowledge Base Schemas

Request/response models for knowledge bases, their categories and
articles.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from docshelf.config.constants import SLUG_MAX_LENGTH
from docshelf.schemas.common import BaseSchema


# =============================================================================
# KNOWLEDGE BASES
# =============================================================================


class KnowledgeBaseCreate(BaseModel):
    """Schema for creating a knowledge base."""

    name: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=SLUG_MAX_LENGTH)
    description: str | None = Field(None, max_length=2000)
    icon: str | None = Field(None, max_length=100)
    order: int = 0


class KnowledgeBaseUpdate(BaseModel):
    """Schema for updating a knowledge base."""

    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=SLUG_MAX_LENGTH)
    description: str | None = Field(None, max_length=2000)
    icon: str | None = Field(None, max_length=100)
    order: int | None = None


class KnowledgeBaseResponse(BaseSchema):
    """Schema for knowledge base response."""

    id: str
    name: str
    slug: str
    description: str | None
    icon: str | None
    order: int
    created_at: datetime
    updated_at: datetime


# =============================================================================
# KNOWLEDGE BASE CATEGORIES
# =============================================================================


class KnowledgeBaseCategoryCreate(BaseModel):
    """Schema for creating a knowledge-base category."""

    knowledge_base_id: UUID
    name: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=SLUG_MAX_LENGTH)
    description: str | None = Field(None, max_length=2000)
    order: int = 0


class KnowledgeBaseCategoryUpdate(BaseModel):
    """Schema for updating a knowledge-base category."""

    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=SLUG_MAX_LENGTH)
    description: str | None = Field(None, max_length=2000)
    order: int | None = None


class KnowledgeBaseCategoryResponse(BaseSchema):
    """Schema for knowledge-base category response."""

    id: str
    knowledge_base_id: str
    name: str
    slug: str
    description: str | None
    order: int
    created_at: datetime
    updated_at: datetime


# =============================================================================
# ARTICLES
# =============================================================================


class ArticleCreate(BaseModel):
    """Schema for creating an article."""

    category_id: UUID
    parent_id: UUID | None = None
    title: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=SLUG_MAX_LENGTH)
    content: str = ""
    order: int = 0
    published: bool = False


class ArticleUpdate(BaseModel):
    """Schema for updating an article. Send parent_id as null to un-nest."""

    category_id: UUID | None = None
    parent_id: UUID | None = None
    title: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=SLUG_MAX_LENGTH)
    content: str | None = None
    order: int | None = None
    published: bool | None = None


class ArticleResponse(BaseSchema):
    """Schema for article response."""

    id: str
    category_id: str
    parent_id: str | None
    title: str
    slug: str
    content: str
    order: int
    published: bool
    created_at: datetime
    updated_at: datetime


class ArticleNode(BaseModel):
    """An article in a navigation tree, without its body."""

    id: str
    title: str
    slug: str
    parent_id: str | None = None
    order: int
    published: bool
    children: list["ArticleNode"] = Field(default_factory=list)


ArticleNode.model_rebuild()
