"""
Shared API Dependencies

Dependencies used by both the reader and the admin routers.
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.cache.content_cache import ContentCache
from docshelf.db.session import get_db


def get_content_cache(request: Request) -> ContentCache:
    """Get the content cache created in the application lifespan.

    Falls back to a disabled cache when the lifespan has not run (for
    example under a test client without lifespan support).
    """
    cache = getattr(request.app.state, "content_cache", None)
    if cache is None:
        return ContentCache(client=None)
    return cache


# Type aliases for cleaner signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
ContentCacheDep = Annotated[ContentCache, Depends(get_content_cache)]
