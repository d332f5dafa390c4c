"""
Collection Model

A Collection is the top-level container of the documentation reader
(for example "Projects" or "PICO BOT"):

    Collection
       ├── Categories (sidebar sections, ordered)
       │      └── Pages (category_id set)
       └── Pages (uncategorized when category_id is NULL)

SAMPLE COLLECTION RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id          │ 550e8400-e29b-41d4-a716-446655440000                           │
│ title       │ "Getting Started"                                              │
│ slug        │ "getting-started"                                              │
│ description │ "Install, configure and run the platform"                      │
│ icon        │ "FileText"                                                     │
│ order       │ 0                                                              │
│ created_at  │ 2024-01-01T00:00:00Z                                           │
│ updated_at  │ 2024-01-15T10:30:00Z                                           │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from docshelf.config.constants import DEFAULT_COLLECTION_ICON
from docshelf.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from docshelf.models.category import Category
    from docshelf.models.page import Page


class Collection(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """
    Collection model, the container of categories and pages.

    Attributes:
        id: Unique identifier (UUID v4)
        title: Display title
        slug: Globally unique URL identifier
        description: Optional summary shown on the home page
        icon: Icon name used by the reader
        order: Position on the home page, ascending
    """

    __tablename__ = "collections"

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    slug: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
        doc="URL-safe unique identifier for the collection",
    )

    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    icon: Mapped[str | None] = mapped_column(
        String(100),
        default=DEFAULT_COLLECTION_ICON,
        nullable=True,
    )

    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # ==========================================================================
    # RELATIONSHIPS
    # ==========================================================================

    # Rows are removed by ON DELETE CASCADE, never loaded for deletion
    categories: Mapped[list["Category"]] = relationship(
        "Category",
        back_populates="collection",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    pages: Mapped[list["Page"]] = relationship(
        "Page",
        back_populates="collection",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Collection(id={self.id}, slug={self.slug})>"
