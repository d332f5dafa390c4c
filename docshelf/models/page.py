"""
Page Model

A documentation page. Pages nest through parent_id, which is a plain
column without a foreign key: a parent may be deleted or moved to another
collection and the child keeps pointing at it. Such pages simply drop out
of the reader navigation (see docshelf.core.hierarchy).

SAMPLE PAGE RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id            │ 7c9e6679-7425-40de-944b-e07fc1f90ae7                         │
│ collection_id │ 550e8400-e29b-41d4-a716-446655440000                         │
│ category_id   │ 9b2d1f3e-...  (NULL = uncategorized)                         │
│ parent_id     │ NULL          (top level)                                    │
│ title         │ "Installation"                                               │
│ slug          │ "installation"                                               │
│ content       │ "# Installation\n\nRun `pip install docshelf`..."            │
│ content_type  │ "markdown"                                                   │
│ order         │ 1                                                            │
│ published     │ true                                                         │
└──────────────────────────────────────────────────────────────────────────────┘
"""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import (
    Boolean,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from docshelf.config.constants import ContentType
from docshelf.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from docshelf.models.category import Category
    from docshelf.models.collection import Collection


class Page(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Page model, the content item of the collection reader."""

    __tablename__ = "pages"

    collection_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("collections.id", ondelete="CASCADE"),
        nullable=False,
    )

    category_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
    )

    parent_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        nullable=True,
        doc="Parent page; not enforced by a foreign key",
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), nullable=False)
    content: Mapped[str] = mapped_column(Text, default="", nullable=False)

    content_type: Mapped[str] = mapped_column(
        String(20),
        default=ContentType.MARKDOWN.value,
        nullable=False,
    )

    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    collection: Mapped["Collection"] = relationship(
        "Collection",
        back_populates="pages",
    )

    category: Mapped["Category | None"] = relationship(
        "Category",
        back_populates="pages",
    )

    __table_args__ = (
        UniqueConstraint("collection_id", "slug", name="uq_pages_collection_slug"),
        Index("pages_collection_idx", "collection_id"),
        Index("pages_category_idx", "category_id"),
        Index("pages_parent_idx", "parent_id"),
        Index("pages_slug_idx", "slug"),
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Page(id={self.id}, slug={self.slug})>"
