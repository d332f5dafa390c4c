"""
Knowledge Base Category Management Endpoints

CRUD operations for the categories of a knowledge base.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from docshelf.admin.api.dependencies import CurrentAdmin
from docshelf.admin.api.utils import raise_not_found, validate_uuid
from docshelf.admin.services import KnowledgeBaseCategoryService
from docshelf.dependencies import ContentCacheDep, DbSession
from docshelf.schemas.common import PaginatedResponse, PaginationParams
from docshelf.schemas.knowledge_base import (
    KnowledgeBaseCategoryCreate,
    KnowledgeBaseCategoryResponse,
    KnowledgeBaseCategoryUpdate,
)


router = APIRouter()


@router.get(
    "",
    response_model=PaginatedResponse[KnowledgeBaseCategoryResponse],
    summary="List knowledge-base categories",
)
async def list_kb_categories(
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
    pagination: Annotated[PaginationParams, Depends()],
    knowledge_base_id: Optional[str] = Query(None, description="Only this knowledge base"),
) -> PaginatedResponse[KnowledgeBaseCategoryResponse]:
    knowledge_base_uuid = (
        validate_uuid(knowledge_base_id, "knowledge_base_id") if knowledge_base_id else None
    )

    service = KnowledgeBaseCategoryService(db, cache)
    categories, total = await service.list_categories(
        knowledge_base_id=knowledge_base_uuid,
        offset=pagination.offset,
        limit=pagination.limit,
    )

    return PaginatedResponse[KnowledgeBaseCategoryResponse].build(
        categories, pagination, total
    )


@router.post(
    "",
    response_model=KnowledgeBaseCategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create knowledge-base category",
)
async def create_kb_category(
    data: KnowledgeBaseCategoryCreate,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> KnowledgeBaseCategoryResponse:
    """Create a knowledge-base category.

    Raises:
        404: Knowledge base not found
    """
    service = KnowledgeBaseCategoryService(db, cache)
    return await service.create_category(data)


@router.get(
    "/{category_id}",
    response_model=KnowledgeBaseCategoryResponse,
    summary="Get knowledge-base category",
)
async def get_kb_category(
    category_id: str,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> KnowledgeBaseCategoryResponse:
    category_uuid = validate_uuid(category_id, "category_id")

    service = KnowledgeBaseCategoryService(db, cache)
    category = await service.get_category(category_uuid)

    if not category:
        raise_not_found("Category", category_id)

    return category


@router.put(
    "/{category_id}",
    response_model=KnowledgeBaseCategoryResponse,
    summary="Update knowledge-base category",
)
async def update_kb_category(
    category_id: str,
    data: KnowledgeBaseCategoryUpdate,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> KnowledgeBaseCategoryResponse:
    category_uuid = validate_uuid(category_id, "category_id")

    service = KnowledgeBaseCategoryService(db, cache)
    category = await service.update_category(category_uuid, data)

    if not category:
        raise_not_found("Category", category_id)

    return category


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete knowledge-base category",
    description="Delete a category together with its articles.",
)
async def delete_kb_category(
    category_id: str,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> Response:
    category_uuid = validate_uuid(category_id, "category_id")

    service = KnowledgeBaseCategoryService(db, cache)
    if not await service.delete_category(category_uuid):
        raise_not_found("Category", category_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
