"""
Content Cache Tests

Unit tests for the reader payload cache, using an in-memory stand-in for
the handful of Redis commands the cache issues.
"""

import fnmatch
import json

from redis.exceptions import ConnectionError as RedisConnectionError

from docshelf.cache.content_cache import ContentCache


class FakeRedis:
    """Dict-backed client implementing get/setex/scan_iter/delete."""

    def __init__(self) -> None:
        self.store: dict[str, str] = {}
        self.ttls: dict[str, int] = {}

    async def get(self, key):
        return self.store.get(key)

    async def setex(self, key, ttl, value):
        self.store[key] = value
        self.ttls[key] = ttl

    async def scan_iter(self, match=None, count=None):
        for key in list(self.store):
            if match is None or fnmatch.fnmatch(key, match):
                yield key

    async def delete(self, *keys):
        for key in keys:
            self.store.pop(key, None)
            self.ttls.pop(key, None)


class BrokenRedis:
    """Client whose every command fails."""

    async def get(self, key):
        raise RedisConnectionError("down")

    async def setex(self, key, ttl, value):
        raise RedisConnectionError("down")

    async def scan_iter(self, match=None, count=None):
        raise RedisConnectionError("down")
        yield  # pragma: no cover

    async def delete(self, *keys):
        raise RedisConnectionError("down")


class TestContentCache:
    """Tests for ContentCache."""

    async def test_round_trip_collection(self) -> None:
        """A stored payload is returned on the next lookup."""
        client = FakeRedis()
        cache = ContentCache(client=client, ttl=60)

        await cache.set_collection("guide", {"slug": "guide", "pages": []})

        assert await cache.get_collection("guide") == {"slug": "guide", "pages": []}
        assert client.ttls["content:collection:guide"] == 60

    async def test_miss_returns_none(self) -> None:
        """Unknown keys are misses."""
        cache = ContentCache(client=FakeRedis())

        assert await cache.get_knowledge_base("nope") is None

    async def test_values_stored_as_json(self) -> None:
        """Payloads are serialized as JSON text."""
        client = FakeRedis()
        cache = ContentCache(client=client)

        await cache.set_knowledge_base("help", {"name": "Help"})

        assert json.loads(client.store["content:kb:help"]) == {"name": "Help"}

    async def test_invalidate_clears_only_its_namespace(self) -> None:
        """Collection writes leave knowledge base payloads alone."""
        client = FakeRedis()
        cache = ContentCache(client=client)
        await cache.set_collection("a", {"n": 1})
        await cache.set_collection("b", {"n": 2})
        await cache.set_knowledge_base("a", {"n": 3})

        await cache.invalidate_collections()

        assert await cache.get_collection("a") is None
        assert await cache.get_collection("b") is None
        assert await cache.get_knowledge_base("a") == {"n": 3}

    async def test_disabled_without_client(self) -> None:
        """Without a client every call is a harmless no-op."""
        cache = ContentCache(client=None)

        await cache.set_collection("a", {"n": 1})
        await cache.invalidate_collections()

        assert cache.enabled is False
        assert await cache.get_collection("a") is None

    async def test_redis_errors_are_misses(self) -> None:
        """A failing Redis never fails the caller."""
        cache = ContentCache(client=BrokenRedis())

        await cache.set_collection("a", {"n": 1})
        await cache.invalidate_knowledge_bases()

        assert await cache.get_collection("a") is None
