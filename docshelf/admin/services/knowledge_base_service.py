"""
Knowledge Base Service

Business logic for knowledge bases and their categories. Writes clear the
knowledge-base namespace of the content cache.
"""

from typing import Optional, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.admin.services.utils import collect_changes, resolve_slug
from docshelf.cache.content_cache import ContentCache
from docshelf.core.exceptions import ConflictError, KnowledgeBaseNotFoundError
from docshelf.core.logging import logger
from docshelf.db.repositories import (
    ArticleRepository,
    KnowledgeBaseCategoryRepository,
    KnowledgeBaseRepository,
)
from docshelf.db.session import after_commit
from docshelf.schemas.converters import (
    to_kb_category_response,
    to_knowledge_base_content,
    to_knowledge_base_response,
)
from docshelf.schemas.knowledge_base import (
    KnowledgeBaseCategoryCreate,
    KnowledgeBaseCategoryResponse,
    KnowledgeBaseCategoryUpdate,
    KnowledgeBaseCreate,
    KnowledgeBaseResponse,
    KnowledgeBaseUpdate,
)
from docshelf.schemas.reader import KnowledgeBaseContentResponse


class KnowledgeBaseService:
    """Service for knowledge base operations."""

    def __init__(self, session: AsyncSession, cache: ContentCache) -> None:
        self.session = session
        self.cache = cache
        self.repo = KnowledgeBaseRepository(session)

    async def create_knowledge_base(self, data: KnowledgeBaseCreate) -> KnowledgeBaseResponse:
        """Create a knowledge base.

        Raises:
            ConflictError: If the slug is taken
        """
        slug = resolve_slug(data.slug, data.name)
        if await self.repo.slug_exists(slug):
            raise ConflictError(f"Knowledge base with slug '{slug}' already exists")

        knowledge_base = await self.repo.create(
            name=data.name,
            slug=slug,
            description=data.description,
            icon=data.icon,
            order=data.order,
        )
        after_commit(self.session, self.cache.invalidate_knowledge_bases)

        logger.info(
            "Knowledge base created", knowledge_base_id=str(knowledge_base.id), slug=slug
        )
        return to_knowledge_base_response(knowledge_base)

    async def get_knowledge_base(
        self, knowledge_base_id: UUID
    ) -> Optional[KnowledgeBaseResponse]:
        knowledge_base = await self.repo.get(knowledge_base_id)
        return to_knowledge_base_response(knowledge_base) if knowledge_base else None

    async def list_knowledge_bases(
        self,
        offset: int = 0,
        limit: int = 100,
    ) -> Tuple[list[KnowledgeBaseResponse], int]:
        knowledge_bases = await self.repo.list_ordered(offset=offset, limit=limit)
        total = await self.repo.count()
        return [to_knowledge_base_response(kb) for kb in knowledge_bases], total

    async def update_knowledge_base(
        self,
        knowledge_base_id: UUID,
        data: KnowledgeBaseUpdate,
    ) -> Optional[KnowledgeBaseResponse]:
        """Update a knowledge base.

        Raises:
            ConflictError: If the new slug is taken
        """
        existing = await self.repo.get(knowledge_base_id)
        if not existing:
            return None

        changes = collect_changes(data, nullable=("description", "icon"))
        if "slug" in changes:
            changes["slug"] = resolve_slug(changes["slug"], existing.name)
            if await self.repo.slug_exists(changes["slug"], exclude_id=knowledge_base_id):
                raise ConflictError(
                    f"Knowledge base with slug '{changes['slug']}' already exists"
                )
        if not changes:
            return to_knowledge_base_response(existing)

        knowledge_base = await self.repo.update(knowledge_base_id, **changes)
        after_commit(self.session, self.cache.invalidate_knowledge_bases)
        return to_knowledge_base_response(knowledge_base)

    async def delete_knowledge_base(self, knowledge_base_id: UUID) -> bool:
        """Delete a knowledge base with its categories and articles."""
        deleted = await self.repo.delete(knowledge_base_id)
        if deleted:
            after_commit(self.session, self.cache.invalidate_knowledge_bases)
            logger.info("Knowledge base deleted", knowledge_base_id=str(knowledge_base_id))
        return deleted

    async def get_tree(
        self, knowledge_base_id: UUID
    ) -> Optional[KnowledgeBaseContentResponse]:
        """Get the admin tree: every article, published or not."""
        knowledge_base = await self.repo.get(knowledge_base_id)
        if not knowledge_base:
            return None

        categories = await KnowledgeBaseCategoryRepository(
            self.session
        ).list_for_knowledge_base(knowledge_base_id)
        articles = await ArticleRepository(self.session).list_for_knowledge_base(
            knowledge_base_id
        )
        return to_knowledge_base_content(knowledge_base, categories, articles)


class KnowledgeBaseCategoryService:
    """Service for knowledge-base category operations."""

    def __init__(self, session: AsyncSession, cache: ContentCache) -> None:
        self.session = session
        self.cache = cache
        self.repo = KnowledgeBaseCategoryRepository(session)
        self.knowledge_base_repo = KnowledgeBaseRepository(session)

    async def create_category(
        self, data: KnowledgeBaseCategoryCreate
    ) -> KnowledgeBaseCategoryResponse:
        """Create a category in a knowledge base.

        Raises:
            KnowledgeBaseNotFoundError: If the knowledge base does not exist
        """
        if not await self.knowledge_base_repo.exists(data.knowledge_base_id):
            raise KnowledgeBaseNotFoundError(str(data.knowledge_base_id))

        category = await self.repo.create(
            knowledge_base_id=data.knowledge_base_id,
            name=data.name,
            slug=resolve_slug(data.slug, data.name),
            description=data.description,
            order=data.order,
        )
        after_commit(self.session, self.cache.invalidate_knowledge_bases)
        return to_kb_category_response(category)

    async def get_category(
        self, category_id: UUID
    ) -> Optional[KnowledgeBaseCategoryResponse]:
        category = await self.repo.get(category_id)
        return to_kb_category_response(category) if category else None

    async def list_categories(
        self,
        knowledge_base_id: Optional[UUID] = None,
        offset: int = 0,
        limit: int = 100,
    ) -> Tuple[list[KnowledgeBaseCategoryResponse], int]:
        filters = {"knowledge_base_id": knowledge_base_id} if knowledge_base_id else None
        categories = await self.repo.list(offset=offset, limit=limit, **filters)
        total = await self.repo.count(**filters)
        return [to_kb_category_response(c) for c in categories], total

    async def update_category(
        self,
        category_id: UUID,
        data: KnowledgeBaseCategoryUpdate,
    ) -> Optional[KnowledgeBaseCategoryResponse]:
        existing = await self.repo.get(category_id)
        if not existing:
            return None

        changes = collect_changes(data, nullable=("description",))
        if "slug" in changes:
            changes["slug"] = resolve_slug(changes["slug"], existing.name)
        if not changes:
            return to_kb_category_response(existing)

        category = await self.repo.update(category_id, **changes)
        after_commit(self.session, self.cache.invalidate_knowledge_bases)
        return to_kb_category_response(category)

    async def delete_category(self, category_id: UUID) -> bool:
        """Delete a category together with its articles."""
        deleted = await self.repo.delete(category_id)
        if deleted:
            after_commit(self.session, self.cache.invalidate_knowledge_bases)
        return deleted
