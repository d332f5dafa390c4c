"""
Collection Schemas

Request/response models for collection and category endpoints.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from docshelf.config.constants import DEFAULT_COLLECTION_ICON, SLUG_MAX_LENGTH
from docshelf.schemas.common import BaseSchema


# =============================================================================
# COLLECTIONS
# =============================================================================


class CollectionBase(BaseModel):
    """Base collection fields."""

    title: str = Field(..., min_length=1, max_length=255, description="Collection title")
    description: str | None = Field(None, max_length=2000)
    icon: str | None = Field(DEFAULT_COLLECTION_ICON, max_length=100)
    order: int = Field(default=0, description="Position on the home page")


class CollectionCreate(CollectionBase):
    """Schema for creating a collection.

    The slug is derived from the title when omitted.
    """

    slug: str | None = Field(None, min_length=1, max_length=SLUG_MAX_LENGTH)


class CollectionUpdate(BaseModel):
    """Schema for updating a collection. Only provided fields change."""

    title: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=SLUG_MAX_LENGTH)
    description: str | None = Field(None, max_length=2000)
    icon: str | None = Field(None, max_length=100)
    order: int | None = None


class CollectionResponse(BaseSchema):
    """Schema for collection response."""

    id: str
    title: str
    slug: str
    description: str | None
    icon: str | None
    order: int
    created_at: datetime
    updated_at: datetime


# =============================================================================
# CATEGORIES
# =============================================================================


class CategoryCreate(BaseModel):
    """Schema for creating a collection category."""

    collection_id: UUID
    title: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=SLUG_MAX_LENGTH)
    order: int = 0


class CategoryUpdate(BaseModel):
    """Schema for updating a category."""

    title: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=SLUG_MAX_LENGTH)
    order: int | None = None


class CategoryResponse(BaseSchema):
    """Schema for category response."""

    id: str
    collection_id: str
    title: str
    slug: str
    order: int
    created_at: datetime
    updated_at: datetime
