"""
Collection Repository

Database operations for collections and their categories.

Common Operations:
==================
- CollectionRepository.get_by_slug()          → Reader lookup ("/getting-started")
- CollectionRepository.list_ordered()         → Home page listing
- CategoryRepository.list_for_collection()    → Sidebar sections of one collection
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.db.repositories.base import BaseRepository
from docshelf.models.category import Category
from docshelf.models.collection import Collection


class CollectionRepository(BaseRepository[Collection]):
    """Repository for Collection database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Collection, session)

    async def get_by_slug(self, slug: str) -> Collection | None:
        """
        Get collection by its URL slug.

        Args:
            slug: URL slug (e.g., "getting-started")

        Returns:
            Collection if found, None otherwise
        """
        result = await self.session.execute(
            select(Collection).where(Collection.slug == slug)
        )
        return result.scalar_one_or_none()

    async def list_ordered(
        self,
        offset: int = 0,
        limit: int | None = 100,
    ) -> list[Collection]:
        """
        List collections in display order.

        SQL Generated:
            SELECT * FROM collections
            ORDER BY "order", title, id
            OFFSET 0 LIMIT 100

        limit=None returns every collection.
        """
        result = await self.session.execute(
            select(Collection)
            .order_by(Collection.order, Collection.title, Collection.id)
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())


class CategoryRepository(BaseRepository[Category]):
    """Repository for collection Category database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Category, session)

    async def list_for_collection(self, collection_id: UUID) -> list[Category]:
        """
        List the categories of a collection in display order.

        Args:
            collection_id: Owning collection

        Returns:
            Categories ordered by order, then title
        """
        result = await self.session.execute(
            select(Category)
            .where(Category.collection_id == collection_id)
            .order_by(Category.order, Category.title, Category.id)
        )
        return list(result.scalars().all())

