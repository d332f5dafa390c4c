"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]                 ← Generic CRUD operations
         │
         ├── CollectionRepository             ← Collection lookups by slug
         ├── CategoryRepository               ← Sidebar sections of a collection
         ├── PageRepository                   ← Flat page lists and page search
         ├── KnowledgeBaseRepository          ← Knowledge base lookups by slug
         ├── KnowledgeBaseCategoryRepository  ← Sections of a knowledge base
         ├── ArticleRepository                ← Flat article lists and article search
         └── AdminUserRepository              ← Admin login

Usage Example:
==============
    from docshelf.core.hierarchy import build_tree
    from docshelf.db.repositories import CollectionRepository, PageRepository

    async def collection_tree(db: AsyncSession, slug: str):
        collection = await CollectionRepository(db).get_by_slug(slug)
        pages = await PageRepository(db).list_for_collection(collection.id)
        return build_tree(pages)
"""

from docshelf.db.repositories.admin_user_repository import AdminUserRepository
from docshelf.db.repositories.base import BaseRepository
from docshelf.db.repositories.collection_repository import (
    CategoryRepository,
    CollectionRepository,
)
from docshelf.db.repositories.knowledge_base_repository import (
    ArticleRepository,
    KnowledgeBaseCategoryRepository,
    KnowledgeBaseRepository,
)
from docshelf.db.repositories.page_repository import PageRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Collection reader
    "CollectionRepository",
    "CategoryRepository",
    "PageRepository",
    # Knowledge-base reader
    "KnowledgeBaseRepository",
    "KnowledgeBaseCategoryRepository",
    "ArticleRepository",
    # Admin
    "AdminUserRepository",
]
