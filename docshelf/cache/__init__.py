"""Cache module for Redis operations."""

from docshelf.cache.content_cache import ContentCache
from docshelf.cache.redis_client import close_redis, init_redis

__all__ = [
    "ContentCache",
    "init_redis",
    "close_redis",
]
