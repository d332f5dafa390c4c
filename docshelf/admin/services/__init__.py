"""Admin services."""

from docshelf.admin.services.article_service import ArticleService
from docshelf.admin.services.collection_service import CategoryService, CollectionService
from docshelf.admin.services.knowledge_base_service import (
    KnowledgeBaseCategoryService,
    KnowledgeBaseService,
)
from docshelf.admin.services.page_service import PageService

__all__ = [
    "CollectionService",
    "CategoryService",
    "PageService",
    "KnowledgeBaseService",
    "KnowledgeBaseCategoryService",
    "ArticleService",
]
