"""
Search Endpoints

Full-text-ish search over published pages.
"""

from fastapi import APIRouter, Query

from docshelf.dependencies import DbSession
from docshelf.reader.services import SearchService
from docshelf.schemas.search import PageSearchResult


router = APIRouter()


@router.get(
    "/search",
    response_model=list[PageSearchResult],
    summary="Search pages",
    description=(
        "Published pages whose title or content contains the query "
        "(case-insensitive). Short queries return an empty list."
    ),
)
async def search_pages(
    db: DbSession,
    q: str = Query(default="", description="Search query"),
) -> list[PageSearchResult]:
    service = SearchService(db)
    return await service.search_pages(q)
