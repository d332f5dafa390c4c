"""
Knowledge Base Repositories

Database operations for the knowledge-base variant: knowledge bases, their
categories and articles.

Articles are owned by categories, so every "articles of a knowledge base"
query joins through kb_categories.
"""

from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.db.repositories._search import ESCAPE_CHAR, like_pattern
from docshelf.db.repositories.base import BaseRepository
from docshelf.models.knowledge_base import Article, KnowledgeBase, KnowledgeBaseCategory


class KnowledgeBaseRepository(BaseRepository[KnowledgeBase]):
    """Repository for KnowledgeBase database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(KnowledgeBase, session)

    async def get_by_slug(self, slug: str) -> KnowledgeBase | None:
        """Get a knowledge base by its URL slug."""
        result = await self.session.execute(
            select(KnowledgeBase).where(KnowledgeBase.slug == slug)
        )
        return result.scalar_one_or_none()

    async def list_ordered(
        self,
        offset: int = 0,
        limit: int | None = 100,
    ) -> list[KnowledgeBase]:
        """List knowledge bases ordered by order_index, then name."""
        result = await self.session.execute(
            select(KnowledgeBase)
            .order_by(KnowledgeBase.order, KnowledgeBase.name, KnowledgeBase.id)
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())


class KnowledgeBaseCategoryRepository(BaseRepository[KnowledgeBaseCategory]):
    """Repository for knowledge-base category database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(KnowledgeBaseCategory, session)

    async def list_for_knowledge_base(
        self, knowledge_base_id: UUID
    ) -> list[KnowledgeBaseCategory]:
        """List the categories of a knowledge base in display order."""
        result = await self.session.execute(
            select(KnowledgeBaseCategory)
            .where(KnowledgeBaseCategory.knowledge_base_id == knowledge_base_id)
            .order_by(
                KnowledgeBaseCategory.order,
                KnowledgeBaseCategory.name,
                KnowledgeBaseCategory.id,
            )
        )
        return list(result.scalars().all())


class ArticleRepository(BaseRepository[Article]):
    """Repository for Article database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Article, session)

    async def list_for_knowledge_base(self, knowledge_base_id: UUID) -> list[Article]:
        """
        Get all articles of a knowledge base as a flat list.

        SQL Generated:
            SELECT articles.* FROM articles
            JOIN kb_categories ON kb_categories.id = articles.category_id
            WHERE kb_categories.knowledge_base_id = '...'
            ORDER BY articles.order_index, articles.created_at, articles.id
        """
        result = await self.session.execute(
            select(Article)
            .join(KnowledgeBaseCategory, KnowledgeBaseCategory.id == Article.category_id)
            .where(KnowledgeBaseCategory.knowledge_base_id == knowledge_base_id)
            .order_by(Article.order, Article.created_at, Article.id)
        )
        return list(result.scalars().all())

    async def get_by_slug(self, knowledge_base_id: UUID, slug: str) -> Article | None:
        """
        Get an article by slug anywhere in a knowledge base.

        Slugs are unique per category, so the first match in category order
        wins when two categories reuse a slug.
        """
        result = await self.session.execute(
            select(Article)
            .join(KnowledgeBaseCategory, KnowledgeBaseCategory.id == Article.category_id)
            .where(
                KnowledgeBaseCategory.knowledge_base_id == knowledge_base_id,
                Article.slug == slug,
            )
            .order_by(
                KnowledgeBaseCategory.order,
                KnowledgeBaseCategory.name,
                KnowledgeBaseCategory.id,
                Article.order,
                Article.created_at,
                Article.id,
            )
            .limit(1)
        )
        return result.scalars().first()

    async def search(
        self, term: str, limit: int = 20
    ) -> list[tuple[Article, KnowledgeBase]]:
        """
        Find published articles whose title or content contains term.

        Args:
            term: Search term
            limit: Maximum number of hits

        Returns:
            (article, knowledge_base) pairs
        """
        pattern = like_pattern(term)
        result = await self.session.execute(
            select(Article, KnowledgeBase)
            .join(KnowledgeBaseCategory, KnowledgeBaseCategory.id == Article.category_id)
            .join(KnowledgeBase, KnowledgeBase.id == KnowledgeBaseCategory.knowledge_base_id)
            .where(
                Article.published.is_(True),
                or_(
                    Article.title.ilike(pattern, escape=ESCAPE_CHAR),
                    Article.content.ilike(pattern, escape=ESCAPE_CHAR),
                ),
            )
            .order_by(KnowledgeBase.order, Article.order, Article.title)
            .limit(limit)
        )
        return [(article, knowledge_base) for article, knowledge_base in result.all()]
