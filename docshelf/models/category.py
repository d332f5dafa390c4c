"""
Category Model

A sidebar section inside a collection. Pages point at a category through
category_id; deleting a category leaves its pages uncategorized.
"""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from docshelf.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from docshelf.models.collection import Collection
    from docshelf.models.page import Page


class Category(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Category model grouping pages within a collection."""

    __tablename__ = "categories"

    collection_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("collections.id", ondelete="CASCADE"),
        nullable=False,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), nullable=False)
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    collection: Mapped["Collection"] = relationship(
        "Collection",
        back_populates="categories",
    )

    # Pages survive; the database sets their category_id to NULL
    pages: Mapped[list["Page"]] = relationship(
        "Page",
        back_populates="category",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("categories_collection_idx", "collection_id"),
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Category(id={self.id}, slug={self.slug})>"
