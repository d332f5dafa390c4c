"""
Knowledge Base Models

The knowledge-base variant of the reader:

    KnowledgeBase
       └── KnowledgeBaseCategory (ordered)
              └── Article (nested through parent_id)

Every article belongs to exactly one category. Display order is stored in
the order_index column and exposed as ``order`` so articles and pages share
one hierarchy builder.
"""

import uuid

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

from docshelf.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class KnowledgeBase(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Knowledge base, the container of categories and articles."""

    __tablename__ = "knowledge_bases"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    icon: Mapped[str | None] = mapped_column(String(100), nullable=True)
    order: Mapped[int] = mapped_column("order_index", Integer, default=0, nullable=False)

    categories: Mapped[list["KnowledgeBaseCategory"]] = relationship(
        "KnowledgeBaseCategory",
        back_populates="knowledge_base",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<KnowledgeBase(id={self.id}, slug={self.slug})>"


class KnowledgeBaseCategory(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Category inside a knowledge base."""

    __tablename__ = "kb_categories"

    knowledge_base_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("knowledge_bases.id", ondelete="CASCADE"),
        nullable=False,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    order: Mapped[int] = mapped_column("order_index", Integer, default=0, nullable=False)

    knowledge_base: Mapped["KnowledgeBase"] = relationship(
        "KnowledgeBase",
        back_populates="categories",
    )

    articles: Mapped[list["Article"]] = relationship(
        "Article",
        back_populates="category",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("kb_categories_knowledge_base_idx", "knowledge_base_id"),
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<KnowledgeBaseCategory(id={self.id}, slug={self.slug})>"


class Article(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Article, the content item of the knowledge-base reader."""

    __tablename__ = "articles"

    category_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("kb_categories.id", ondelete="CASCADE"),
        nullable=False,
    )

    # Not enforced by a foreign key, see Page.parent_id
    parent_id: Mapped[uuid.UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), nullable=False)
    content: Mapped[str] = mapped_column(Text, default="", nullable=False)
    published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    order: Mapped[int] = mapped_column("order_index", Integer, default=0, nullable=False)

    category: Mapped["KnowledgeBaseCategory"] = relationship(
        "KnowledgeBaseCategory",
        back_populates="articles",
    )

    __table_args__ = (
        UniqueConstraint("category_id", "slug", name="uq_articles_category_slug"),
        Index("articles_category_idx", "category_id"),
        Index("articles_parent_idx", "parent_id"),
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Article(id={self.id}, slug={self.slug})>"
