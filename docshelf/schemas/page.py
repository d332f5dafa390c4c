"""
Page Schemas

Request/response models for page endpoints, including the recursive
navigation node used by reader and admin trees.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from docshelf.config.constants import SLUG_MAX_LENGTH, ContentType
from docshelf.schemas.common import BaseSchema


class PageCreate(BaseModel):
    """Schema for creating a page.

    parent_id is not checked against existing pages; a page whose parent
    cannot be found is left out of the navigation tree.
    """

    collection_id: UUID
    category_id: UUID | None = None
    parent_id: UUID | None = None
    title: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=SLUG_MAX_LENGTH)
    content: str = ""
    content_type: ContentType = ContentType.MARKDOWN
    order: int = 0
    published: bool = False


class PageUpdate(BaseModel):
    """Schema for updating a page.

    Send category_id or parent_id as null to move the page to the
    uncategorized bucket or to the top level.
    """

    collection_id: UUID | None = None
    category_id: UUID | None = None
    parent_id: UUID | None = None
    title: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=SLUG_MAX_LENGTH)
    content: str | None = None
    content_type: ContentType | None = None
    order: int | None = None
    published: bool | None = None


class PageImportRequest(BaseModel):
    """Markdown document to import as a new, unpublished page."""

    collection_id: UUID
    category_id: UUID | None = None
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., description="Markdown source")


class PageResponse(BaseSchema):
    """Schema for page response."""

    id: str
    collection_id: str
    category_id: str | None
    parent_id: str | None
    title: str
    slug: str
    content: str
    content_type: ContentType
    order: int
    published: bool
    created_at: datetime
    updated_at: datetime


class PageNode(BaseModel):
    """A page in a navigation tree, without its body."""

    id: str
    title: str
    slug: str
    category_id: str | None = None
    parent_id: str | None = None
    order: int
    published: bool
    children: list["PageNode"] = Field(default_factory=list)


PageNode.model_rebuild()
