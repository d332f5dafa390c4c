"""
Knowledge Base Management Endpoints

CRUD operations for knowledge bases, plus the unfiltered admin tree.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from docshelf.admin.api.dependencies import CurrentAdmin
from docshelf.admin.api.utils import raise_not_found, validate_uuid
from docshelf.admin.services import KnowledgeBaseService
from docshelf.dependencies import ContentCacheDep, DbSession
from docshelf.schemas.common import PaginatedResponse, PaginationParams
from docshelf.schemas.knowledge_base import (
    KnowledgeBaseCreate,
    KnowledgeBaseResponse,
    KnowledgeBaseUpdate,
)
from docshelf.schemas.reader import KnowledgeBaseContentResponse


router = APIRouter()


@router.get(
    "",
    response_model=PaginatedResponse[KnowledgeBaseResponse],
    summary="List knowledge bases",
)
async def list_knowledge_bases(
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
    pagination: Annotated[PaginationParams, Depends()],
) -> PaginatedResponse[KnowledgeBaseResponse]:
    service = KnowledgeBaseService(db, cache)
    knowledge_bases, total = await service.list_knowledge_bases(
        offset=pagination.offset,
        limit=pagination.limit,
    )

    return PaginatedResponse[KnowledgeBaseResponse].build(knowledge_bases, pagination, total)


@router.post(
    "",
    response_model=KnowledgeBaseResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create knowledge base",
)
async def create_knowledge_base(
    data: KnowledgeBaseCreate,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> KnowledgeBaseResponse:
    """Create a knowledge base.

    Raises:
        409: Slug already taken
    """
    service = KnowledgeBaseService(db, cache)
    return await service.create_knowledge_base(data)


@router.get(
    "/{knowledge_base_id}",
    response_model=KnowledgeBaseResponse,
    summary="Get knowledge base",
)
async def get_knowledge_base(
    knowledge_base_id: str,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> KnowledgeBaseResponse:
    knowledge_base_uuid = validate_uuid(knowledge_base_id, "knowledge_base_id")

    service = KnowledgeBaseService(db, cache)
    knowledge_base = await service.get_knowledge_base(knowledge_base_uuid)

    if not knowledge_base:
        raise_not_found("Knowledge Base", knowledge_base_id)

    return knowledge_base


@router.get(
    "/{knowledge_base_id}/tree",
    response_model=KnowledgeBaseContentResponse,
    summary="Get knowledge base tree",
    description="Categories and article trees including unpublished articles.",
)
async def get_knowledge_base_tree(
    knowledge_base_id: str,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> KnowledgeBaseContentResponse:
    knowledge_base_uuid = validate_uuid(knowledge_base_id, "knowledge_base_id")

    service = KnowledgeBaseService(db, cache)
    tree = await service.get_tree(knowledge_base_uuid)

    if not tree:
        raise_not_found("Knowledge Base", knowledge_base_id)

    return tree


@router.put(
    "/{knowledge_base_id}",
    response_model=KnowledgeBaseResponse,
    summary="Update knowledge base",
)
async def update_knowledge_base(
    knowledge_base_id: str,
    data: KnowledgeBaseUpdate,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> KnowledgeBaseResponse:
    knowledge_base_uuid = validate_uuid(knowledge_base_id, "knowledge_base_id")

    service = KnowledgeBaseService(db, cache)
    knowledge_base = await service.update_knowledge_base(knowledge_base_uuid, data)

    if not knowledge_base:
        raise_not_found("Knowledge Base", knowledge_base_id)

    return knowledge_base


@router.delete(
    "/{knowledge_base_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete knowledge base",
    description="Delete a knowledge base together with its categories and articles.",
)
async def delete_knowledge_base(
    knowledge_base_id: str,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> Response:
    knowledge_base_uuid = validate_uuid(knowledge_base_id, "knowledge_base_id")

    service = KnowledgeBaseService(db, cache)
    if not await service.delete_knowledge_base(knowledge_base_uuid):
        raise_not_found("Knowledge Base", knowledge_base_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
