"""
Redis Client

Async Redis connection used by the content cache.

The reader works without Redis: when caching is disabled or the server
cannot be reached, init_redis() returns None and the cache passes every
call through to the database.
"""

from typing import Optional

import redis.asyncio as redis
from redis.asyncio import Redis
from redis.exceptions import RedisError

from docshelf.config.settings import settings
from docshelf.core.logging import logger


async def init_redis() -> Optional[Redis]:
    """Create the Redis connection pool.

    Returns:
        Connected client, or None when caching is disabled or Redis is down
    """
    if not settings.CACHE_ENABLED:
        logger.info("Content cache disabled, skipping Redis")
        return None

    logger.info("Initializing Redis connection")
    client = redis.from_url(
        settings.REDIS_URL,
        encoding="utf-8",
        decode_responses=True,
        max_connections=settings.REDIS_POOL_SIZE,
    )
    try:
        await client.ping()
    except (RedisError, OSError) as e:
        logger.warning("Redis unavailable, content cache disabled", error=str(e))
        await client.aclose()
        return None

    logger.info("Redis connection established")
    return client


async def close_redis(client: Optional[Redis]) -> None:
    """Close the Redis connection pool."""
    if client is not None:
        logger.info("Closing Redis connection")
        await client.aclose()
        logger.info("Redis connection closed")
