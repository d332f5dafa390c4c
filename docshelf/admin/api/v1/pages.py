"""
Page Management Endpoints

CRUD operations for pages, plus markdown import.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from docshelf.admin.api.dependencies import CurrentAdmin
from docshelf.admin.api.utils import raise_not_found, validate_uuid
from docshelf.admin.services import PageService
from docshelf.dependencies import ContentCacheDep, DbSession
from docshelf.schemas.common import PaginatedResponse, PaginationParams
from docshelf.schemas.page import (
    PageCreate,
    PageImportRequest,
    PageResponse,
    PageUpdate,
)


router = APIRouter()


# =============================================================================
# PAGE ENDPOINTS
# =============================================================================


@router.get(
    "",
    response_model=PaginatedResponse[PageResponse],
    summary="List pages",
    description="Pages in display order, published or not.",
)
async def list_pages(
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
    pagination: Annotated[PaginationParams, Depends()],
    collection_id: Optional[str] = Query(None, description="Only this collection"),
    category_id: Optional[str] = Query(None, description="Only this category"),
) -> PaginatedResponse[PageResponse]:
    collection_uuid = validate_uuid(collection_id, "collection_id") if collection_id else None
    category_uuid = validate_uuid(category_id, "category_id") if category_id else None

    service = PageService(db, cache)
    pages, total = await service.list_pages(
        collection_id=collection_uuid,
        category_id=category_uuid,
        offset=pagination.offset,
        limit=pagination.limit,
    )

    return PaginatedResponse[PageResponse].build(pages, pagination, total)


@router.post(
    "",
    response_model=PageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create page",
)
async def create_page(
    data: PageCreate,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> PageResponse:
    """Create a page.

    Raises:
        400: Category belongs to another collection
        404: Collection or category not found
        409: Slug already taken in the collection
    """
    service = PageService(db, cache)
    return await service.create_page(data)


@router.post(
    "/import",
    response_model=PageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Import markdown",
    description="Create an unpublished markdown page from an uploaded document.",
)
async def import_page(
    data: PageImportRequest,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> PageResponse:
    service = PageService(db, cache)
    return await service.import_markdown(data)


@router.get(
    "/{page_id}",
    response_model=PageResponse,
    summary="Get page",
)
async def get_page(
    page_id: str,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> PageResponse:
    page_uuid = validate_uuid(page_id, "page_id")

    service = PageService(db, cache)
    page = await service.get_page(page_uuid)

    if not page:
        raise_not_found("Page", page_id)

    return page


@router.put(
    "/{page_id}",
    response_model=PageResponse,
    summary="Update page",
    description=(
        "Only provided fields will be updated. Send category_id or parent_id "
        "as null to clear them."
    ),
)
async def update_page(
    page_id: str,
    data: PageUpdate,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> PageResponse:
    """Update a page.

    Raises:
        400: Invalid UUID, page set as its own parent, or category mismatch
        404: Page, collection or category not found
        409: Slug already taken in the collection
    """
    page_uuid = validate_uuid(page_id, "page_id")

    service = PageService(db, cache)
    page = await service.update_page(page_uuid, data)

    if not page:
        raise_not_found("Page", page_id)

    return page


@router.delete(
    "/{page_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete page",
)
async def delete_page(
    page_id: str,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> Response:
    page_uuid = validate_uuid(page_id, "page_id")

    service = PageService(db, cache)
    if not await service.delete_page(page_uuid):
        raise_not_found("Page", page_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
