"""
Knowledge Base Reader Endpoints

Public, read-only access to knowledge bases and their articles.

The search route is declared before "/{slug}" so that "search" is never
taken for a knowledge base slug.
"""

from fastapi import APIRouter, Query

from docshelf.core.exceptions import ArticleNotFoundError, KnowledgeBaseNotFoundError
from docshelf.dependencies import ContentCacheDep, DbSession
from docshelf.reader.services import KnowledgeBaseReaderService, SearchService
from docshelf.schemas.knowledge_base import KnowledgeBaseResponse
from docshelf.schemas.reader import ArticleDetailResponse, KnowledgeBaseContentResponse
from docshelf.schemas.search import ArticleSearchResult


router = APIRouter()


@router.get(
    "",
    response_model=list[KnowledgeBaseResponse],
    summary="List knowledge bases",
)
async def list_knowledge_bases(
    db: DbSession,
    cache: ContentCacheDep,
) -> list[KnowledgeBaseResponse]:
    service = KnowledgeBaseReaderService(db, cache)
    return await service.list_knowledge_bases()


@router.get(
    "/search",
    response_model=list[ArticleSearchResult],
    summary="Search articles",
    description="Published articles whose title or content contains the query.",
)
async def search_articles(
    db: DbSession,
    q: str = Query(default="", description="Search query"),
) -> list[ArticleSearchResult]:
    service = SearchService(db)
    return await service.search_articles(q)


@router.get(
    "/{slug}",
    response_model=KnowledgeBaseContentResponse,
    summary="Get knowledge base",
    description="Knowledge base with its categories and published article trees.",
)
async def get_knowledge_base(
    slug: str,
    db: DbSession,
    cache: ContentCacheDep,
) -> KnowledgeBaseContentResponse:
    """Get a knowledge base with its navigation.

    Raises:
        404: Knowledge base not found
    """
    service = KnowledgeBaseReaderService(db, cache)
    content = await service.get_knowledge_base_content(slug)
    if not content:
        raise KnowledgeBaseNotFoundError(slug)
    return content


@router.get(
    "/{knowledge_base_slug}/articles/{article_slug}",
    response_model=ArticleDetailResponse,
    summary="Get article",
)
async def get_article(
    knowledge_base_slug: str,
    article_slug: str,
    db: DbSession,
    cache: ContentCacheDep,
) -> ArticleDetailResponse:
    """Get a published article.

    Raises:
        404: Knowledge base or article not found, or article unpublished
    """
    service = KnowledgeBaseReaderService(db, cache)
    detail = await service.get_article_detail(knowledge_base_slug, article_slug)
    if not detail:
        raise ArticleNotFoundError(article_slug)
    return detail
