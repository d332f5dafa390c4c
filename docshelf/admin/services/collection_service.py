"""
Collection Service

Business logic for collection and category management.

Every write clears the collection namespace of the content cache, so the
reader never serves a tree older than the last edit.
"""

from typing import Optional, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.admin.services.utils import collect_changes, resolve_slug
from docshelf.cache.content_cache import ContentCache
from docshelf.core.exceptions import CollectionNotFoundError, ConflictError
from docshelf.core.logging import logger
from docshelf.db.repositories import (
    CategoryRepository,
    CollectionRepository,
    PageRepository,
)
from docshelf.db.session import after_commit
from docshelf.schemas.collection import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    CollectionCreate,
    CollectionResponse,
    CollectionUpdate,
)
from docshelf.schemas.converters import (
    to_category_response,
    to_collection_content,
    to_collection_response,
)
from docshelf.schemas.reader import CollectionContentResponse


class CollectionService:
    """Service for collection operations."""

    def __init__(self, session: AsyncSession, cache: ContentCache) -> None:
        self.session = session
        self.cache = cache
        self.repo = CollectionRepository(session)

    async def create_collection(self, data: CollectionCreate) -> CollectionResponse:
        """Create a new collection.

        Raises:
            ConflictError: If the slug is taken
        """
        slug = resolve_slug(data.slug, data.title)
        if await self.repo.slug_exists(slug):
            raise ConflictError(f"Collection with slug '{slug}' already exists")

        collection = await self.repo.create(
            title=data.title,
            slug=slug,
            description=data.description,
            icon=data.icon,
            order=data.order,
        )
        after_commit(self.session, self.cache.invalidate_collections)

        logger.info("Collection created", collection_id=str(collection.id), slug=slug)
        return to_collection_response(collection)

    async def get_collection(self, collection_id: UUID) -> Optional[CollectionResponse]:
        collection = await self.repo.get(collection_id)
        return to_collection_response(collection) if collection else None

    async def list_collections(
        self,
        offset: int = 0,
        limit: int = 100,
    ) -> Tuple[list[CollectionResponse], int]:
        """List collections in display order.

        Returns:
            Tuple of (collections, total_count)
        """
        collections = await self.repo.list_ordered(offset=offset, limit=limit)
        total = await self.repo.count()
        return [to_collection_response(c) for c in collections], total

    async def update_collection(
        self,
        collection_id: UUID,
        data: CollectionUpdate,
    ) -> Optional[CollectionResponse]:
        """Update a collection. Only fields present in the request change.

        Raises:
            ConflictError: If the new slug is taken
        """
        existing = await self.repo.get(collection_id)
        if not existing:
            return None

        update_data = collect_changes(data, nullable=("description", "icon"))
        if "slug" in update_data:
            update_data["slug"] = resolve_slug(update_data["slug"], existing.title)
            if await self.repo.slug_exists(update_data["slug"], exclude_id=collection_id):
                raise ConflictError(
                    f"Collection with slug '{update_data['slug']}' already exists"
                )
        if not update_data:
            return to_collection_response(existing)

        collection = await self.repo.update(collection_id, **update_data)
        after_commit(self.session, self.cache.invalidate_collections)

        logger.info("Collection updated", collection_id=str(collection_id))
        return to_collection_response(collection)

    async def delete_collection(self, collection_id: UUID) -> bool:
        """Delete a collection with its categories and pages.

        Returns:
            True if deleted
        """
        deleted = await self.repo.delete(collection_id)
        if deleted:
            after_commit(self.session, self.cache.invalidate_collections)
            logger.info("Collection deleted", collection_id=str(collection_id))
        return deleted

    async def get_tree(self, collection_id: UUID) -> Optional[CollectionContentResponse]:
        """Get the admin tree: every page, published or not.

        Returns:
            Collection with per-category trees, or None if not found
        """
        collection = await self.repo.get(collection_id)
        if not collection:
            return None

        categories = await CategoryRepository(self.session).list_for_collection(
            collection_id
        )
        pages = await PageRepository(self.session).list_for_collection(collection_id)
        return to_collection_content(collection, categories, pages)


class CategoryService:
    """Service for collection category operations."""

    def __init__(self, session: AsyncSession, cache: ContentCache) -> None:
        self.session = session
        self.cache = cache
        self.repo = CategoryRepository(session)
        self.collection_repo = CollectionRepository(session)

    async def create_category(self, data: CategoryCreate) -> CategoryResponse:
        """Create a category in a collection.

        Raises:
            CollectionNotFoundError: If the collection does not exist
        """
        if not await self.collection_repo.exists(data.collection_id):
            raise CollectionNotFoundError(str(data.collection_id))

        category = await self.repo.create(
            collection_id=data.collection_id,
            title=data.title,
            slug=resolve_slug(data.slug, data.title),
            order=data.order,
        )
        after_commit(self.session, self.cache.invalidate_collections)

        logger.info("Category created", category_id=str(category.id))
        return to_category_response(category)

    async def get_category(self, category_id: UUID) -> Optional[CategoryResponse]:
        category = await self.repo.get(category_id)
        return to_category_response(category) if category else None

    async def list_categories(
        self,
        collection_id: Optional[UUID] = None,
        offset: int = 0,
        limit: int = 100,
    ) -> Tuple[list[CategoryResponse], int]:
        """List categories, optionally of one collection, in display order."""
        filters = {"collection_id": collection_id} if collection_id else None
        categories = await self.repo.list(offset=offset, limit=limit, **filters)
        total = await self.repo.count(**filters)
        return [to_category_response(c) for c in categories], total

    async def update_category(
        self,
        category_id: UUID,
        data: CategoryUpdate,
    ) -> Optional[CategoryResponse]:
        existing = await self.repo.get(category_id)
        if not existing:
            return None

        update_data = collect_changes(data)
        if "slug" in update_data:
            update_data["slug"] = resolve_slug(update_data["slug"], existing.title)
        if not update_data:
            return to_category_response(existing)

        category = await self.repo.update(category_id, **update_data)
        after_commit(self.session, self.cache.invalidate_collections)
        return to_category_response(category)

    async def delete_category(self, category_id: UUID) -> bool:
        """Delete a category. Its pages become uncategorized."""
        deleted = await self.repo.delete(category_id)
        if deleted:
            after_commit(self.session, self.cache.invalidate_collections)
            logger.info("Category deleted", category_id=str(category_id))
        return deleted
