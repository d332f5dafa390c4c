"""
Knowledge Base Reader Service

Read-only views over knowledge bases. Same shape as the collection reader,
except that every article belongs to a category, so there is no
uncategorized tree. Article bodies are HTML from the rich-text editor.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.cache.content_cache import ContentCache
from docshelf.core.headings import extract_html_headings
from docshelf.core.hierarchy import (
    build_tree,
    find_ancestors,
    find_neighbours,
    flatten,
    scope_items,
)
from docshelf.db.repositories import (
    ArticleRepository,
    KnowledgeBaseCategoryRepository,
    KnowledgeBaseRepository,
)
from docshelf.models import Article
from docshelf.schemas.converters import (
    to_article_response,
    to_kb_category_content,
    to_knowledge_base_content,
    to_knowledge_base_response,
)
from docshelf.schemas.knowledge_base import KnowledgeBaseResponse
from docshelf.schemas.reader import (
    ArticleDetailResponse,
    Breadcrumb,
    HeadingResponse,
    KnowledgeBaseContentResponse,
    NavLink,
)


def _nav_link(article: Optional[Article]) -> Optional[NavLink]:
    if article is None:
        return None
    return NavLink(id=str(article.id), title=article.title, slug=article.slug)


class KnowledgeBaseReaderService:
    """Read-only views over knowledge bases for the public reader."""

    def __init__(self, session: AsyncSession, cache: ContentCache) -> None:
        self.session = session
        self.cache = cache
        self.knowledge_base_repo = KnowledgeBaseRepository(session)
        self.category_repo = KnowledgeBaseCategoryRepository(session)
        self.article_repo = ArticleRepository(session)

    async def list_knowledge_bases(self) -> list[KnowledgeBaseResponse]:
        """List every knowledge base in display order."""
        knowledge_bases = await self.knowledge_base_repo.list_ordered(limit=None)
        return [to_knowledge_base_response(kb) for kb in knowledge_bases]

    async def get_knowledge_base_content(
        self, slug: str
    ) -> Optional[KnowledgeBaseContentResponse]:
        """Get a knowledge base with one published article tree per category.

        Args:
            slug: Knowledge base slug

        Returns:
            Knowledge base payload, or None if it does not exist
        """
        cached = await self.cache.get_knowledge_base(slug)
        if cached is not None:
            return KnowledgeBaseContentResponse.model_validate(cached)

        knowledge_base = await self.knowledge_base_repo.get_by_slug(slug)
        if not knowledge_base:
            return None

        categories = await self.category_repo.list_for_knowledge_base(knowledge_base.id)
        articles = scope_items(
            await self.article_repo.list_for_knowledge_base(knowledge_base.id),
            published_only=True,
        )

        content = to_knowledge_base_content(knowledge_base, categories, articles)

        await self.cache.set_knowledge_base(slug, content.model_dump(mode="json"))
        return content

    async def get_article_detail(
        self,
        knowledge_base_slug: str,
        article_slug: str,
    ) -> Optional[ArticleDetailResponse]:
        """Get a published article with breadcrumbs, headings and neighbours.

        Returns:
            Article payload, or None if the knowledge base or article does
            not exist or the article is unpublished
        """
        knowledge_base = await self.knowledge_base_repo.get_by_slug(knowledge_base_slug)
        if not knowledge_base:
            return None

        article = await self.article_repo.get_by_slug(knowledge_base.id, article_slug)
        if not article or not article.published:
            return None

        categories = await self.category_repo.list_for_knowledge_base(knowledge_base.id)
        articles = scope_items(
            await self.article_repo.list_for_knowledge_base(knowledge_base.id),
            published_only=True,
        )

        reading_order: list[Article] = []
        for category in categories:
            reading_order.extend(
                flatten(build_tree(scope_items(articles, category_id=category.id)))
            )

        previous, following = find_neighbours(reading_order, article.id)

        siblings = scope_items(articles, category_id=article.category_id)
        breadcrumbs = [
            Breadcrumb(title=ancestor.title, slug=ancestor.slug)
            for ancestor in find_ancestors(siblings, article.id)
        ]

        category = next(c for c in categories if c.id == article.category_id)

        return ArticleDetailResponse(
            article=to_article_response(article),
            knowledge_base=to_knowledge_base_response(knowledge_base),
            category=to_kb_category_content(category, articles),
            breadcrumbs=breadcrumbs,
            headings=[
                HeadingResponse(id=h.id, text=h.text, level=h.level)
                for h in extract_html_headings(article.content)
            ],
            previous=_nav_link(previous),
            next=_nav_link(following),
        )
