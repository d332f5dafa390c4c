"""
Article Management Endpoints

CRUD operations for knowledge-base articles.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from docshelf.admin.api.dependencies import CurrentAdmin
from docshelf.admin.api.utils import raise_not_found, validate_uuid
from docshelf.admin.services import ArticleService
from docshelf.dependencies import ContentCacheDep, DbSession
from docshelf.schemas.common import PaginatedResponse, PaginationParams
from docshelf.schemas.knowledge_base import ArticleCreate, ArticleResponse, ArticleUpdate


router = APIRouter()


@router.get(
    "",
    response_model=PaginatedResponse[ArticleResponse],
    summary="List articles",
)
async def list_articles(
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
    pagination: Annotated[PaginationParams, Depends()],
    category_id: Optional[str] = Query(None, description="Only this category"),
) -> PaginatedResponse[ArticleResponse]:
    category_uuid = validate_uuid(category_id, "category_id") if category_id else None

    service = ArticleService(db, cache)
    articles, total = await service.list_articles(
        category_id=category_uuid,
        offset=pagination.offset,
        limit=pagination.limit,
    )

    return PaginatedResponse[ArticleResponse].build(articles, pagination, total)


@router.post(
    "",
    response_model=ArticleResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create article",
)
async def create_article(
    data: ArticleCreate,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> ArticleResponse:
    """Create an article.

    Raises:
        404: Category not found
        409: Slug already taken in the category
    """
    service = ArticleService(db, cache)
    return await service.create_article(data)


@router.get(
    "/{article_id}",
    response_model=ArticleResponse,
    summary="Get article",
)
async def get_article(
    article_id: str,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> ArticleResponse:
    article_uuid = validate_uuid(article_id, "article_id")

    service = ArticleService(db, cache)
    article = await service.get_article(article_uuid)

    if not article:
        raise_not_found("Article", article_id)

    return article


@router.put(
    "/{article_id}",
    response_model=ArticleResponse,
    summary="Update article",
)
async def update_article(
    article_id: str,
    data: ArticleUpdate,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> ArticleResponse:
    """Update an article.

    Raises:
        400: Article set as its own parent
        404: Article or category not found
        409: Slug already taken in the category
    """
    article_uuid = validate_uuid(article_id, "article_id")

    service = ArticleService(db, cache)
    article = await service.update_article(article_uuid, data)

    if not article:
        raise_not_found("Article", article_id)

    return article


@router.delete(
    "/{article_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete article",
)
async def delete_article(
    article_id: str,
    _current_admin: CurrentAdmin,
    db: DbSession,
    cache: ContentCacheDep,
) -> Response:
    article_uuid = validate_uuid(article_id, "article_id")

    service = ArticleService(db, cache)
    if not await service.delete_article(article_uuid):
        raise_not_found("Article", article_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
