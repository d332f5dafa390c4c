"""
Page Service

Business logic for page management.

Reference rules:
================
- collection_id must exist                        → 404
- category_id must exist                          → 404
- category_id must belong to the page's collection → 400
- parent_id must not be the page itself           → 400
- parent_id is otherwise not checked; a page under a missing parent is
  simply left out of the navigation tree
- slug is unique within the collection            → 409
"""

from typing import Any, Optional, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.admin.services.utils import collect_changes, resolve_slug
from docshelf.cache.content_cache import ContentCache
from docshelf.config.constants import ContentType
from docshelf.core.exceptions import (
    CategoryMismatchError,
    CategoryNotFoundError,
    CollectionNotFoundError,
    ConflictError,
    InvalidParentError,
)
from docshelf.core.logging import logger
from docshelf.db.repositories import (
    CategoryRepository,
    CollectionRepository,
    PageRepository,
)
from docshelf.db.session import after_commit
from docshelf.schemas.converters import to_page_response
from docshelf.schemas.page import (
    PageCreate,
    PageImportRequest,
    PageResponse,
    PageUpdate,
)


class PageService:
    """Service for page operations."""

    def __init__(self, session: AsyncSession, cache: ContentCache) -> None:
        self.session = session
        self.cache = cache
        self.repo = PageRepository(session)
        self.collection_repo = CollectionRepository(session)
        self.category_repo = CategoryRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # VALIDATION
    # ═══════════════════════════════════════════════════════════════════════════

    async def _check_collection(self, collection_id: UUID) -> None:
        if not await self.collection_repo.exists(collection_id):
            raise CollectionNotFoundError(str(collection_id))

    async def _check_category(self, category_id: UUID, collection_id: UUID) -> None:
        category = await self.category_repo.get(category_id)
        if not category:
            raise CategoryNotFoundError(str(category_id))
        if category.collection_id != collection_id:
            raise CategoryMismatchError(str(category_id), str(collection_id))

    async def _check_slug(
        self,
        slug: str,
        collection_id: UUID,
        exclude_id: Optional[UUID] = None,
    ) -> None:
        if await self.repo.slug_exists(
            slug, exclude_id=exclude_id, collection_id=collection_id
        ):
            raise ConflictError(
                f"Page with slug '{slug}' already exists in this collection"
            )

    # ═══════════════════════════════════════════════════════════════════════════
    # CRUD
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_page(self, data: PageCreate) -> PageResponse:
        """Create a page.

        Raises:
            CollectionNotFoundError: Unknown collection
            CategoryNotFoundError: Unknown category
            CategoryMismatchError: Category of another collection
            ConflictError: Slug taken within the collection
        """
        await self._check_collection(data.collection_id)
        if data.category_id:
            await self._check_category(data.category_id, data.collection_id)

        slug = resolve_slug(data.slug, data.title)
        await self._check_slug(slug, data.collection_id)

        page = await self.repo.create(
            collection_id=data.collection_id,
            category_id=data.category_id,
            parent_id=data.parent_id,
            title=data.title,
            slug=slug,
            content=data.content,
            content_type=data.content_type.value,
            order=data.order,
            published=data.published,
        )
        after_commit(self.session, self.cache.invalidate_collections)

        logger.info(
            "Page created",
            page_id=str(page.id),
            collection_id=str(data.collection_id),
            slug=slug,
        )
        return to_page_response(page)

    async def import_markdown(self, data: PageImportRequest) -> PageResponse:
        """Create an unpublished markdown page from an uploaded document."""
        return await self.create_page(
            PageCreate(
                collection_id=data.collection_id,
                category_id=data.category_id,
                title=data.title,
                content=data.content,
                content_type=ContentType.MARKDOWN,
                published=False,
            )
        )

    async def get_page(self, page_id: UUID) -> Optional[PageResponse]:
        page = await self.repo.get(page_id)
        return to_page_response(page) if page else None

    async def list_pages(
        self,
        collection_id: Optional[UUID] = None,
        category_id: Optional[UUID] = None,
        offset: int = 0,
        limit: int = 100,
    ) -> Tuple[list[PageResponse], int]:
        """List pages in display order, optionally narrowed to a container.

        Returns:
            Tuple of (pages, total_count)
        """
        filters: dict[str, Any] = {}
        if collection_id:
            filters["collection_id"] = collection_id
        if category_id:
            filters["category_id"] = category_id

        pages = await self.repo.list(offset=offset, limit=limit, **filters)
        total = await self.repo.count(**filters)
        return [to_page_response(p) for p in pages], total

    async def update_page(
        self,
        page_id: UUID,
        data: PageUpdate,
    ) -> Optional[PageResponse]:
        """Update a page. Only fields present in the request change.

        Moving a page to another collection keeps its category only if that
        category belongs to the new collection; send category_id null to
        drop it.
        """
        existing = await self.repo.get(page_id)
        if not existing:
            return None

        changes = collect_changes(data, nullable=("category_id", "parent_id"))

        collection_id = changes.get("collection_id", existing.collection_id)
        collection_changed = collection_id != existing.collection_id
        if collection_changed:
            await self._check_collection(collection_id)

        category_id = changes.get("category_id", existing.category_id)
        if category_id and ("category_id" in changes or collection_changed):
            await self._check_category(category_id, collection_id)

        if changes.get("parent_id") == page_id:
            raise InvalidParentError(str(page_id))

        if "slug" in changes:
            changes["slug"] = resolve_slug(changes["slug"], existing.title)
        if "slug" in changes or collection_changed:
            await self._check_slug(
                changes.get("slug", existing.slug), collection_id, exclude_id=page_id
            )

        if "content_type" in changes:
            changes["content_type"] = ContentType(changes["content_type"]).value

        if not changes:
            return to_page_response(existing)

        page = await self.repo.update(page_id, **changes)
        after_commit(self.session, self.cache.invalidate_collections)

        logger.info("Page updated", page_id=str(page_id), fields=sorted(changes))
        return to_page_response(page)

    async def delete_page(self, page_id: UUID) -> bool:
        """Delete a page. Its children are left pointing at the missing parent."""
        deleted = await self.repo.delete(page_id)
        if deleted:
            after_commit(self.session, self.cache.invalidate_collections)
            logger.info("Page deleted", page_id=str(page_id))
        return deleted
