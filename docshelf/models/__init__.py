"""
Docshelf SQLAlchemy Models

Model Hierarchy:
================
    Collection
       ├── Categories
       │      └── Pages (category_id set)
       └── Pages (uncategorized)

    KnowledgeBase
       └── KnowledgeBaseCategories
              └── Articles

    AdminUser (admin panel accounts)

Pages and articles nest through parent_id and are arranged into navigation
trees by docshelf.core.hierarchy.
"""

from docshelf.models.admin_user import AdminUser
from docshelf.models.base import Base, TimestampMixin
from docshelf.models.category import Category
from docshelf.models.collection import Collection
from docshelf.models.knowledge_base import Article, KnowledgeBase, KnowledgeBaseCategory
from docshelf.models.page import Page

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Collection reader
    "Collection",
    "Category",
    "Page",
    # Knowledge-base reader
    "KnowledgeBase",
    "KnowledgeBaseCategory",
    "Article",
    # Admin
    "AdminUser",
]
