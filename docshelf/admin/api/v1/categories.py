"""
Category Management Endpoints

CRUD operations for collection categories.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from docshelf.admin.api.dependencies import CurrentAdmin
from docshelf.admin.api.utils import raise_not_found, validate_uuid
from docshelf.admin.services import CategoryService
from docshelf.dependencies import ContentCacheDep, DbSession
from docshelf.schemas.collection import CategoryCreate, CategoryResponse, CategoryUpdate
from docshelf.schemas.common import PaginatedResponse, PaginationParams


router = APIRouter()


@router.get(
    "",
    response_model=PaginatedResponse[CategoryResponse],
    summary="List categories",
)
async def list_categories(
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
    pagination: Annotated[PaginationParams, Depends()],
    collection_id: Optional[str] = Query(None, description="Only this collection"),
) -> PaginatedResponse[CategoryResponse]:
    collection_uuid = validate_uuid(collection_id, "collection_id") if collection_id else None

    service = CategoryService(db, cache)
    categories, total = await service.list_categories(
        collection_id=collection_uuid,
        offset=pagination.offset,
        limit=pagination.limit,
    )

    return PaginatedResponse[CategoryResponse].build(categories, pagination, total)


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
)
async def create_category(
    data: CategoryCreate,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> CategoryResponse:
    """Create a category.

    Raises:
        404: Collection not found
    """
    service = CategoryService(db, cache)
    return await service.create_category(data)


@router.get(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Get category",
)
async def get_category(
    category_id: str,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> CategoryResponse:
    category_uuid = validate_uuid(category_id, "category_id")

    service = CategoryService(db, cache)
    category = await service.get_category(category_uuid)

    if not category:
        raise_not_found("Category", category_id)

    return category


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Update category",
)
async def update_category(
    category_id: str,
    data: CategoryUpdate,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> CategoryResponse:
    category_uuid = validate_uuid(category_id, "category_id")

    service = CategoryService(db, cache)
    category = await service.update_category(category_uuid, data)

    if not category:
        raise_not_found("Category", category_id)

    return category


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete category",
    description="Delete a category. Its pages stay in the collection, uncategorized.",
)
async def delete_category(
    category_id: str,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> Response:
    category_uuid = validate_uuid(category_id, "category_id")

    service = CategoryService(db, cache)
    if not await service.delete_category(category_uuid):
        raise_not_found("Category", category_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
