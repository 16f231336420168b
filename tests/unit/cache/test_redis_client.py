"""Tests for the async Redis client wrapper."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from bookresolve.cache.client import AsyncRedisClient, aioredis

REDIS_URL = "redis://localhost:6379/15"


@pytest.fixture
def redis():
    """Stand-in for redis.asyncio.Redis."""
    with patch.object(aioredis, "Redis") as redis_cls:
        instance = redis_cls.return_value
        instance.ping = AsyncMock(return_value=True)
        instance.get = AsyncMock(return_value=None)
        instance.set = AsyncMock()
        instance.delete = AsyncMock(return_value=1)
        instance.aclose = AsyncMock()
        yield instance


class TestDisconnected:
    """Before connect() every call is a no-op."""

    async def test_ping(self):
        assert await AsyncRedisClient(REDIS_URL).ping() is False

    async def test_get(self):
        assert await AsyncRedisClient(REDIS_URL).get("key") is None

    async def test_delete(self):
        assert await AsyncRedisClient(REDIS_URL).delete("key") is False


class TestConnected:
    """Tests for JSON round trips through a connected client."""

    async def test_set_serializes_json(self, redis):
        async with AsyncRedisClient(REDIS_URL) as client:
            await client.set("history", ["キッチン", "kitchen"], ttl=60)

        redis.set.assert_awaited_once_with("history", '["キッチン", "kitchen"]', ex=60)
        redis.aclose.assert_awaited_once()

    async def test_get_decodes_json(self, redis):
        redis.get.return_value = '["kitchen"]'

        async with AsyncRedisClient(REDIS_URL) as client:
            assert await client.get("history") == ["kitchen"]

    async def test_get_returns_raw_non_json(self, redis):
        redis.get.return_value = "not json"

        async with AsyncRedisClient(REDIS_URL) as client:
            assert await client.get("history") == "not json"

    async def test_delete(self, redis):
        redis.delete.return_value = 0

        async with AsyncRedisClient(REDIS_URL) as client:
            assert await client.delete("missing") is False
            assert await client.ping() is True
