"""
Base Repository

Generic CRUD shared by every content repository.

Everything in docshelf (collections, categories, pages, knowledge bases,
articles) is shown in display order, so ``list()`` sorts by ``order`` and
then by creation time and id. Equality filters are plain keyword arguments:

    await PageRepository(db).list(collection_id=c.id, category_id=None)
    # WHERE collection_id = :c AND category_id IS NULL ORDER BY "order", created_at, id

Writes only flush(); the request-level get_db() dependency commits.
"""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import Select, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.models.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """CRUD for one model class, bound to one session."""

    def __init__(self, model: type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    def _filtered(self, query: Select, filters: dict[str, Any]) -> Select:
        for field, value in filters.items():
            query = query.where(getattr(self.model, field) == value)
        return query

    # =========================================================================
    # READS
    # =========================================================================

    async def get(self, entity_id: UUID) -> ModelType | None:
        # A query, not session.get(), so rows removed by ON DELETE CASCADE
        # are not served from the identity map
        return await self.session.scalar(select(self.model).where(self.model.id == entity_id))

    async def exists(self, entity_id: UUID) -> bool:
        return bool(await self.session.scalar(select(exists().where(self.model.id == entity_id))))

    async def list(self, *, offset: int = 0, limit: int = 100, **filters: Any) -> list[ModelType]:
        """Rows matching ``filters`` in display order, one page at a time."""
        query = self._filtered(select(self.model), filters)
        query = query.order_by(self.model.order, self.model.created_at, self.model.id)
        result = await self.session.scalars(query.offset(offset).limit(limit))
        return list(result.all())

    async def count(self, **filters: Any) -> int:
        query = self._filtered(select(func.count()).select_from(self.model), filters)
        return await self.session.scalar(query) or 0

    async def slug_exists(self, slug: str, exclude_id: UUID | None = None, **scope: Any) -> bool:
        """
        Check whether a slug is taken within its scope.

        ``scope`` names the container the slug is unique in, e.g.
        ``collection_id=...`` for pages; no scope means globally unique.
        ``exclude_id`` skips the row being renamed.
        """
        condition = self.model.slug == slug
        if exclude_id:
            condition = condition & (self.model.id != exclude_id)
        query = self._filtered(select(self.model.id).where(condition), scope)
        return await self.session.scalar(select(query.exists())) or False

    # =========================================================================
    # WRITES
    # =========================================================================

    async def create(self, **values: Any) -> ModelType:
        instance = self.model(**values)
        self.session.add(instance)
        await self.session.flush()
        # Pull server defaults (id, timestamps) onto the instance
        await self.session.refresh(instance)
        return instance

    async def update(self, entity_id: UUID, **changes: Any) -> ModelType | None:
        """
        Apply ``changes`` to a row and return it, or None if it does not exist.

        None values are written too; that is how an item moves back to the
        top level (``parent_id=None``) or out of its category.
        """
        instance = await self.get(entity_id)
        if instance is None:
            return None

        for field, value in changes.items():
            setattr(instance, field, value)

        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, entity_id: UUID) -> bool:
        """Delete a row; dependents follow the foreign keys' ON DELETE rules."""
        instance = await self.get(entity_id)
        if instance is None:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True
