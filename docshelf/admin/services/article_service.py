"""
Article Service

Business logic for knowledge-base articles. Same reference rules as pages,
with the category as the container: category_id must exist (404), the
article cannot be its own parent (400) and the slug is unique within the
category (409).
"""

from typing import Any, Optional, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.admin.services.utils import collect_changes, resolve_slug
from docshelf.cache.content_cache import ContentCache
from docshelf.core.exceptions import (
    CategoryNotFoundError,
    ConflictError,
    InvalidParentError,
)
from docshelf.core.logging import logger
from docshelf.db.repositories import ArticleRepository, KnowledgeBaseCategoryRepository
from docshelf.db.session import after_commit
from docshelf.schemas.converters import to_article_response
from docshelf.schemas.knowledge_base import ArticleCreate, ArticleResponse, ArticleUpdate


class ArticleService:
    """Service for article operations."""

    def __init__(self, session: AsyncSession, cache: ContentCache) -> None:
        self.session = session
        self.cache = cache
        self.repo = ArticleRepository(session)
        self.category_repo = KnowledgeBaseCategoryRepository(session)

    async def _check_category(self, category_id: UUID) -> None:
        if not await self.category_repo.exists(category_id):
            raise CategoryNotFoundError(str(category_id))

    async def _check_slug(
        self,
        slug: str,
        category_id: UUID,
        exclude_id: Optional[UUID] = None,
    ) -> None:
        if await self.repo.slug_exists(slug, exclude_id=exclude_id, category_id=category_id):
            raise ConflictError(f"Article with slug '{slug}' already exists in this category")

    async def create_article(self, data: ArticleCreate) -> ArticleResponse:
        """Create an article.

        Raises:
            CategoryNotFoundError: Unknown category
            ConflictError: Slug taken within the category
        """
        await self._check_category(data.category_id)

        slug = resolve_slug(data.slug, data.title)
        await self._check_slug(slug, data.category_id)

        article = await self.repo.create(
            category_id=data.category_id,
            parent_id=data.parent_id,
            title=data.title,
            slug=slug,
            content=data.content,
            order=data.order,
            published=data.published,
        )
        after_commit(self.session, self.cache.invalidate_knowledge_bases)

        logger.info("Article created", article_id=str(article.id), slug=slug)
        return to_article_response(article)

    async def get_article(self, article_id: UUID) -> Optional[ArticleResponse]:
        article = await self.repo.get(article_id)
        return to_article_response(article) if article else None

    async def list_articles(
        self,
        category_id: Optional[UUID] = None,
        offset: int = 0,
        limit: int = 100,
    ) -> Tuple[list[ArticleResponse], int]:
        filters: dict[str, Any] = {"category_id": category_id} if category_id else {}
        articles = await self.repo.list(offset=offset, limit=limit, **filters)
        total = await self.repo.count(**filters)
        return [to_article_response(a) for a in articles], total

    async def update_article(
        self,
        article_id: UUID,
        data: ArticleUpdate,
    ) -> Optional[ArticleResponse]:
        existing = await self.repo.get(article_id)
        if not existing:
            return None

        changes = collect_changes(data, nullable=("parent_id",))

        category_id = changes.get("category_id", existing.category_id)
        category_changed = category_id != existing.category_id
        if category_changed:
            await self._check_category(category_id)

        if changes.get("parent_id") == article_id:
            raise InvalidParentError(str(article_id))

        if "slug" in changes:
            changes["slug"] = resolve_slug(changes["slug"], existing.title)
        if "slug" in changes or category_changed:
            await self._check_slug(
                changes.get("slug", existing.slug), category_id, exclude_id=article_id
            )

        if not changes:
            return to_article_response(existing)

        article = await self.repo.update(article_id, **changes)
        after_commit(self.session, self.cache.invalidate_knowledge_bases)

        logger.info("Article updated", article_id=str(article_id), fields=sorted(changes))
        return to_article_response(article)

    async def delete_article(self, article_id: UUID) -> bool:
        deleted = await self.repo.delete(article_id)
        if deleted:
            after_commit(self.session, self.cache.invalidate_knowledge_bases)
            logger.info("Article deleted", article_id=str(article_id))
        return deleted
