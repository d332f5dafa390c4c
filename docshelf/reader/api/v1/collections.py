"""
Collection Reader Endpoints

Public, read-only access to collections and their pages.
"""

from fastapi import APIRouter

from docshelf.core.exceptions import CollectionNotFoundError, PageNotFoundError
from docshelf.dependencies import ContentCacheDep, DbSession
from docshelf.reader.services import CollectionReaderService
from docshelf.schemas.collection import CollectionResponse
from docshelf.schemas.reader import CollectionContentResponse, PageDetailResponse


router = APIRouter()


# =============================================================================
# COLLECTION ENDPOINTS
# =============================================================================


@router.get(
    "/collections",
    response_model=list[CollectionResponse],
    summary="List collections",
    description="All collections in home-page order.",
)
async def list_collections(
    db: DbSession,
    cache: ContentCacheDep,
) -> list[CollectionResponse]:
    service = CollectionReaderService(db, cache)
    return await service.list_collections()


@router.get(
    "/collections/{slug}",
    response_model=CollectionContentResponse,
    summary="Get collection",
    description="Collection with its categories and published page trees.",
)
async def get_collection(
    slug: str,
    db: DbSession,
    cache: ContentCacheDep,
) -> CollectionContentResponse:
    """Get a collection with its navigation.

    Raises:
        404: Collection not found
    """
    service = CollectionReaderService(db, cache)
    content = await service.get_collection_content(slug)
    if not content:
        raise CollectionNotFoundError(slug)
    return content


# =============================================================================
# PAGE ENDPOINTS
# =============================================================================


@router.get(
    "/pages/{collection_slug}/{page_slug}",
    response_model=PageDetailResponse,
    summary="Get page",
    description="A published page with breadcrumbs, headings and previous/next links.",
)
async def get_page(
    collection_slug: str,
    page_slug: str,
    db: DbSession,
    cache: ContentCacheDep,
) -> PageDetailResponse:
    """Get a published page.

    Raises:
        404: Collection or page not found, or page unpublished
    """
    service = CollectionReaderService(db, cache)
    detail = await service.get_page_detail(collection_slug, page_slug)
    if not detail:
        raise PageNotFoundError(page_slug)
    return detail
