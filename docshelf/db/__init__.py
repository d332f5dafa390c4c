"""
Database Module

Database connectivity and session management for Docshelf.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (session.py)
        - One session per request
        - Auto-commit on success, auto-rollback on exception
        │
        ▼
    Repository (repositories/)
        - CollectionRepository, CategoryRepository, PageRepository
        - KnowledgeBaseRepository, KnowledgeBaseCategoryRepository, ArticleRepository
        - AdminUserRepository
        │
        ▼
    PostgreSQL (SQLite in tests)
"""

from docshelf.db.session import (
    AsyncSessionLocal,
    close_db,
    get_db,
    init_db,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
]
