"""
Admin API Router

Aggregates all admin API routes.
"""

from fastapi import APIRouter

from docshelf.admin.api import auth
from docshelf.admin.api.v1 import (
    articles,
    categories,
    collections,
    kb_categories,
    knowledge_bases,
    pages,
)
from docshelf.schemas.common import ErrorResponse

router = APIRouter(
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    }
)

# Authentication
router.include_router(auth.router, prefix="/auth", tags=["Admin: Authentication"])

# Collection variant
router.include_router(
    collections.router,
    prefix="/collections",
    tags=["Admin: Collections"],
)
router.include_router(
    categories.router,
    prefix="/categories",
    tags=["Admin: Categories"],
)
router.include_router(
    pages.router,
    prefix="/pages",
    tags=["Admin: Pages"],
)

# Knowledge-base variant
router.include_router(
    knowledge_bases.router,
    prefix="/knowledge-bases",
    tags=["Admin: Knowledge Bases"],
)
router.include_router(
    kb_categories.router,
    prefix="/kb-categories",
    tags=["Admin: Knowledge Base Categories"],
)
router.include_router(
    articles.router,
    prefix="/articles",
    tags=["Admin: Articles"],
)
