"""
Collection Management Endpoints

CRUD operations for collections, plus the unfiltered admin tree.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from docshelf.admin.api.dependencies import CurrentAdmin
from docshelf.admin.api.utils import raise_not_found, validate_uuid
from docshelf.admin.services import CollectionService
from docshelf.dependencies import ContentCacheDep, DbSession
from docshelf.schemas.collection import (
    CollectionCreate,
    CollectionResponse,
    CollectionUpdate,
)
from docshelf.schemas.common import PaginatedResponse, PaginationParams
from docshelf.schemas.reader import CollectionContentResponse


router = APIRouter()


# =============================================================================
# COLLECTION ENDPOINTS
# =============================================================================


@router.get(
    "",
    response_model=PaginatedResponse[CollectionResponse],
    summary="List collections",
)
async def list_collections(
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
    pagination: Annotated[PaginationParams, Depends()],
) -> PaginatedResponse[CollectionResponse]:
    service = CollectionService(db, cache)
    collections, total = await service.list_collections(
        offset=pagination.offset,
        limit=pagination.limit,
    )

    return PaginatedResponse[CollectionResponse].build(collections, pagination, total)


@router.post(
    "",
    response_model=CollectionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create collection",
    description="Create a collection. The slug is derived from the title when omitted.",
)
async def create_collection(
    data: CollectionCreate,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> CollectionResponse:
    """Create a collection.

    Raises:
        409: Slug already taken
    """
    service = CollectionService(db, cache)
    return await service.create_collection(data)


@router.get(
    "/{collection_id}",
    response_model=CollectionResponse,
    summary="Get collection",
)
async def get_collection(
    collection_id: str,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> CollectionResponse:
    collection_uuid = validate_uuid(collection_id, "collection_id")

    service = CollectionService(db, cache)
    collection = await service.get_collection(collection_uuid)

    if not collection:
        raise_not_found("Collection", collection_id)

    return collection


@router.get(
    "/{collection_id}/tree",
    response_model=CollectionContentResponse,
    summary="Get collection tree",
    description="Categories and page trees including unpublished pages.",
)
async def get_collection_tree(
    collection_id: str,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> CollectionContentResponse:
    collection_uuid = validate_uuid(collection_id, "collection_id")

    service = CollectionService(db, cache)
    tree = await service.get_tree(collection_uuid)

    if not tree:
        raise_not_found("Collection", collection_id)

    return tree


@router.put(
    "/{collection_id}",
    response_model=CollectionResponse,
    summary="Update collection",
    description="Only provided fields will be updated.",
)
async def update_collection(
    collection_id: str,
    data: CollectionUpdate,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> CollectionResponse:
    """Update a collection.

    Raises:
        400: Invalid UUID format
        404: Collection not found
        409: Slug already taken
    """
    collection_uuid = validate_uuid(collection_id, "collection_id")

    service = CollectionService(db, cache)
    collection = await service.update_collection(collection_uuid, data)

    if not collection:
        raise_not_found("Collection", collection_id)

    return collection


@router.delete(
    "/{collection_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete collection",
    description="Delete a collection together with its categories and pages.",
)
async def delete_collection(
    collection_id: str,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> Response:
    collection_uuid = validate_uuid(collection_id, "collection_id")

    service = CollectionService(db, cache)
    if not await service.delete_collection(collection_uuid):
        raise_not_found("Collection", collection_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
