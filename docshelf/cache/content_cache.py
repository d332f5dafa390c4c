"""
Content Cache

Read-through cache for reader payloads (a collection with its navigation
trees, a knowledge base with its categories).

Key Layout:
===========
    content:collection:{slug}   → reader payload of one collection
    content:kb:{slug}           → reader payload of one knowledge base

Any admin write clears the whole namespace it touches. Moving a page can
change two collections and renaming a slug orphans the old key, so
namespace-wide invalidation is the only rule that is always right.
Services queue the invalidation with db.session.after_commit(), so it
runs once the request's transaction has committed.

Failure Behaviour:
==================
The cache never fails a request. Without a client every lookup is a miss
and every write is a no-op; Redis errors are logged and treated the same.
"""

import json
from typing import Any, Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from docshelf.config.constants import (
    CACHE_COLLECTION_NAMESPACE,
    CACHE_KNOWLEDGE_BASE_NAMESPACE,
    CACHE_PREFIX,
)
from docshelf.config.settings import settings
from docshelf.core.logging import logger


class ContentCache:
    """JSON cache in front of the reader queries."""

    def __init__(
        self,
        client: Optional[Redis] = None,
        ttl: Optional[int] = None,
        prefix: str = CACHE_PREFIX,
    ) -> None:
        """Initialize the cache.

        Args:
            client: Redis client; None disables caching
            ttl: Time-to-live in seconds, defaults to CACHE_TTL_SECONDS
            prefix: Prefix for all keys
        """
        self.client = client
        self.ttl = settings.CACHE_TTL_SECONDS if ttl is None else ttl
        self.prefix = prefix

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def _key(self, namespace: str, name: str) -> str:
        return f"{self.prefix}{namespace}:{name}"

    # ═══════════════════════════════════════════════════════════════════════════
    # GENERIC OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_json(self, namespace: str, name: str) -> Optional[Any]:
        """Get a cached JSON document.

        Returns:
            Decoded document, or None on a miss
        """
        if self.client is None:
            return None

        key = self._key(namespace, name)
        try:
            cached = await self.client.get(key)
        except RedisError as e:
            logger.warning("Content cache read failed", key=key, error=str(e))
            return None

        if cached is None:
            logger.debug("Content cache miss", key=key)
            return None

        logger.debug("Content cache hit", key=key)
        return json.loads(cached)

    async def set_json(self, namespace: str, name: str, value: Any) -> None:
        """Store a JSON-serializable document."""
        if self.client is None:
            return

        key = self._key(namespace, name)
        try:
            await self.client.setex(key, self.ttl, json.dumps(value, default=str))
        except RedisError as e:
            logger.warning("Content cache write failed", key=key, error=str(e))

    async def invalidate_namespace(self, namespace: str) -> None:
        """Delete every key of a namespace."""
        if self.client is None:
            return

        pattern = f"{self.prefix}{namespace}:*"
        try:
            deleted = 0
            async for key in self.client.scan_iter(match=pattern, count=100):
                await self.client.delete(key)
                deleted += 1
        except RedisError as e:
            logger.warning("Content cache invalidation failed", pattern=pattern, error=str(e))
            return

        logger.info("Invalidated content cache", namespace=namespace, keys=deleted)

    # ═══════════════════════════════════════════════════════════════════════════
    # READER PAYLOADS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_collection(self, slug: str) -> Optional[dict[str, Any]]:
        return await self.get_json(CACHE_COLLECTION_NAMESPACE, slug)

    async def set_collection(self, slug: str, payload: dict[str, Any]) -> None:
        await self.set_json(CACHE_COLLECTION_NAMESPACE, slug, payload)

    async def invalidate_collections(self) -> None:
        await self.invalidate_namespace(CACHE_COLLECTION_NAMESPACE)

    async def get_knowledge_base(self, slug: str) -> Optional[dict[str, Any]]:
        return await self.get_json(CACHE_KNOWLEDGE_BASE_NAMESPACE, slug)

    async def set_knowledge_base(self, slug: str, payload: dict[str, Any]) -> None:
        await self.set_json(CACHE_KNOWLEDGE_BASE_NAMESPACE, slug, payload)

    async def invalidate_knowledge_bases(self) -> None:
        await self.invalidate_namespace(CACHE_KNOWLEDGE_BASE_NAMESPACE)
