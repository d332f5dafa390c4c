"""
Collection Reader Service

Assembles what the public reader shows for a collection.

Request Flow:
=============
    GET /api/collections/getting-started
        │
        ▼
    ContentCache hit? ──yes──▶ cached payload
        │ no
        ▼
    Load collection, categories, every page (flat)
        │
        ▼
    scope_items(published_only) → per category: scope_items(category_id)
        │                          uncategorized: scope_items(category_id=None)
        ▼
    build_tree() per scope → CollectionContentResponse → cache

Reading Order:
==============
Previous/next links follow the sidebar: every category tree flattened in
category order, then the uncategorized tree.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.cache.content_cache import ContentCache
from docshelf.core.headings import extract_content_headings
from docshelf.core.hierarchy import (
    build_tree,
    find_ancestors,
    find_neighbours,
    flatten,
    scope_items,
)
from docshelf.core.logging import logger
from docshelf.db.repositories import (
    CategoryRepository,
    CollectionRepository,
    PageRepository,
)
from docshelf.models import Page
from docshelf.schemas.collection import CollectionResponse
from docshelf.schemas.converters import (
    to_category_content,
    to_collection_content,
    to_collection_response,
    to_page_response,
)
from docshelf.schemas.reader import (
    Breadcrumb,
    CollectionContentResponse,
    HeadingResponse,
    NavLink,
    PageDetailResponse,
)


def _nav_link(page: Optional[Page]) -> Optional[NavLink]:
    if page is None:
        return None
    return NavLink(id=str(page.id), title=page.title, slug=page.slug)


class CollectionReaderService:
    """Read-only views over collections for the public reader."""

    def __init__(self, session: AsyncSession, cache: ContentCache) -> None:
        self.session = session
        self.cache = cache
        self.collection_repo = CollectionRepository(session)
        self.category_repo = CategoryRepository(session)
        self.page_repo = PageRepository(session)

    async def list_collections(self) -> list[CollectionResponse]:
        """List every collection in home-page order."""
        collections = await self.collection_repo.list_ordered(limit=None)
        return [to_collection_response(c) for c in collections]

    async def get_collection_content(
        self, slug: str
    ) -> Optional[CollectionContentResponse]:
        """Get a collection with its published navigation trees.

        Args:
            slug: Collection slug

        Returns:
            Collection payload, or None if the collection does not exist
        """
        cached = await self.cache.get_collection(slug)
        if cached is not None:
            return CollectionContentResponse.model_validate(cached)

        collection = await self.collection_repo.get_by_slug(slug)
        if not collection:
            return None

        categories = await self.category_repo.list_for_collection(collection.id)
        pages = scope_items(
            await self.page_repo.list_for_collection(collection.id),
            published_only=True,
        )

        content = to_collection_content(collection, categories, pages)

        await self.cache.set_collection(slug, content.model_dump(mode="json"))
        return content

    async def get_page_detail(
        self,
        collection_slug: str,
        page_slug: str,
    ) -> Optional[PageDetailResponse]:
        """Get a published page with breadcrumbs, headings and neighbours.

        Args:
            collection_slug: Owning collection slug
            page_slug: Page slug

        Returns:
            Page payload, or None if the collection or page does not exist
            or the page is unpublished
        """
        collection = await self.collection_repo.get_by_slug(collection_slug)
        if not collection:
            return None

        page = await self.page_repo.get_by_slug(collection.id, page_slug)
        if not page or not page.published:
            return None

        categories = await self.category_repo.list_for_collection(collection.id)
        pages = scope_items(
            await self.page_repo.list_for_collection(collection.id),
            published_only=True,
        )

        reading_order: list[Page] = []
        for category in categories:
            reading_order.extend(
                flatten(build_tree(scope_items(pages, category_id=category.id)))
            )
        reading_order.extend(flatten(build_tree(scope_items(pages, category_id=None))))

        previous, following = find_neighbours(reading_order, page.id)

        # Ancestors come from the same sidebar tree as the page
        siblings = scope_items(pages, category_id=page.category_id)
        breadcrumbs = [
            Breadcrumb(title=ancestor.title, slug=ancestor.slug)
            for ancestor in find_ancestors(siblings, page.id)
        ]

        category = next((c for c in categories if c.id == page.category_id), None)

        logger.debug(
            "Page detail assembled",
            collection=collection_slug,
            page=page_slug,
            reading_order_size=len(reading_order),
        )

        return PageDetailResponse(
            page=to_page_response(page),
            collection=to_collection_response(collection),
            category=to_category_content(category, pages) if category else None,
            breadcrumbs=breadcrumbs,
            headings=[
                HeadingResponse(id=h.id, text=h.text, level=h.level)
                for h in extract_content_headings(page.content, page.content_type)
            ],
            previous=_nav_link(previous),
            next=_nav_link(following),
        )
