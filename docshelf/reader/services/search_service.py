"""
Search Service

Case-insensitive substring search over published pages and articles.
Each hit carries a short excerpt around the first match (see
docshelf.core.search.snippet).

Queries shorter than SEARCH_MIN_QUERY_LENGTH after trimming return no
results without touching the database.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.config.settings import settings
from docshelf.core.logging import logger
from docshelf.core.search import snippet
from docshelf.db.repositories import ArticleRepository, PageRepository
from docshelf.schemas.search import ArticleSearchResult, PageSearchResult


class SearchService:
    """Service for reader search."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.page_repo = PageRepository(session)
        self.article_repo = ArticleRepository(session)

    @staticmethod
    def normalize_query(query: str | None) -> str | None:
        """Trim a raw query; None when it is too short to search."""
        term = (query or "").strip()
        if len(term) < settings.SEARCH_MIN_QUERY_LENGTH:
            return None
        return term

    async def search_pages(self, query: str | None) -> list[PageSearchResult]:
        """Search published pages across every collection.

        Args:
            query: Raw query string

        Returns:
            At most SEARCH_RESULT_LIMIT hits
        """
        term = self.normalize_query(query)
        if term is None:
            return []

        hits = await self.page_repo.search(term, limit=settings.SEARCH_RESULT_LIMIT)
        logger.debug("Page search", query=term, hits=len(hits))

        return [
            PageSearchResult(
                id=str(page.id),
                title=page.title,
                slug=page.slug,
                collection_id=str(collection.id),
                collection_title=collection.title,
                collection_slug=collection.slug,
                snippet=snippet(page.content, term),
            )
            for page, collection in hits
        ]

    async def search_articles(self, query: str | None) -> list[ArticleSearchResult]:
        """Search published articles across every knowledge base."""
        term = self.normalize_query(query)
        if term is None:
            return []

        hits = await self.article_repo.search(term, limit=settings.SEARCH_RESULT_LIMIT)
        logger.debug("Article search", query=term, hits=len(hits))

        return [
            ArticleSearchResult(
                id=str(article.id),
                title=article.title,
                slug=article.slug,
                knowledge_base_id=str(knowledge_base.id),
                knowledge_base_name=knowledge_base.name,
                knowledge_base_slug=knowledge_base.slug,
                snippet=snippet(article.content, term),
            )
            for article, knowledge_base in hits
        ]
