"""
Page Repository

Database operations specific to the Page model.

Common Operations:
==================
- list_for_collection()  → Every page of a collection, flat (feeds build_tree)
- get_by_slug()          → Reader lookup ("/getting-started/installation")
- search()               → Published pages whose title or content match a term

The repository never filters on category or nests pages; navigation is
assembled in memory by docshelf.core.hierarchy.
"""

from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.db.repositories._search import ESCAPE_CHAR, like_pattern
from docshelf.db.repositories.base import BaseRepository
from docshelf.models.collection import Collection
from docshelf.models.page import Page


class PageRepository(BaseRepository[Page]):
    """Repository for Page database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Page, session)

    async def list_for_collection(self, collection_id: UUID) -> list[Page]:
        """
        Get all pages of a collection as a flat list.

        Args:
            collection_id: Owning collection

        Returns:
            Pages in display order, ties broken by creation (published
            and unpublished)

        SQL Generated:
            SELECT * FROM pages WHERE collection_id = '...'
            ORDER BY "order", created_at, id
        """
        result = await self.session.execute(
            select(Page)
            .where(Page.collection_id == collection_id)
            .order_by(Page.order, Page.created_at, Page.id)
        )
        return list(result.scalars().all())

    async def get_by_slug(self, collection_id: UUID, slug: str) -> Page | None:
        """
        Get a page by slug within a collection.

        Args:
            collection_id: Owning collection
            slug: Page slug

        Returns:
            Page if found, None otherwise
        """
        result = await self.session.execute(
            select(Page).where(Page.collection_id == collection_id, Page.slug == slug)
        )
        return result.scalar_one_or_none()

    async def search(self, term: str, limit: int = 20) -> list[tuple[Page, Collection]]:
        """
        Find published pages whose title or content contains term.

        Matching is case-insensitive substring matching.

        Args:
            term: Search term
            limit: Maximum number of hits

        Returns:
            (page, collection) pairs

        SQL Generated:
            SELECT pages.*, collections.* FROM pages
            JOIN collections ON collections.id = pages.collection_id
            WHERE pages.published = true
              AND (pages.title ILIKE '%term%' OR pages.content ILIKE '%term%')
            LIMIT 20
        """
        pattern = like_pattern(term)
        result = await self.session.execute(
            select(Page, Collection)
            .join(Collection, Collection.id == Page.collection_id)
            .where(
                Page.published.is_(True),
                or_(
                    Page.title.ilike(pattern, escape=ESCAPE_CHAR),
                    Page.content.ilike(pattern, escape=ESCAPE_CHAR),
                ),
            )
            .order_by(Collection.order, Page.order, Page.title)
            .limit(limit)
        )
        return [(page, collection) for page, collection in result.all()]
