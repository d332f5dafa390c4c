"""
Reader API Router

Aggregates the public, unauthenticated routes.
"""

from fastapi import APIRouter

from docshelf.reader.api.v1 import collections, knowledge_bases, search
from docshelf.schemas.common import ErrorResponse

router = APIRouter(responses={404: {"model": ErrorResponse}})

router.include_router(collections.router, tags=["Reader: Collections"])
router.include_router(search.router, tags=["Reader: Search"])
router.include_router(
    knowledge_bases.router,
    prefix="/knowledge-bases",
    tags=["Reader: Knowledge Bases"],
)
