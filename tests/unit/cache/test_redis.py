"""Tests for the shared Redis connection pool."""

from unittest.mock import AsyncMock

import pytest

from guildperms.config import settings
from guildperms.core.cache import close_redis_pool
from guildperms.core.cache import redis as redis_cache


pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def reset_pool(monkeypatch):
    """Start and finish every test without a pool."""
    monkeypatch.setattr(redis_cache, "_pool", None)


class TestConnectionPool:
    """Tests for pool creation and shutdown."""

    def test_pool_is_created_once(self):
        pool = redis_cache._get_pool()

        assert redis_cache._get_pool() is pool
        assert pool.max_connections == settings.redis_max_connections

    @pytest.mark.asyncio
    async def test_close_disconnects_and_forgets_pool(self):
        pool = redis_cache._get_pool()
        pool.disconnect = AsyncMock()

        await close_redis_pool()

        pool.disconnect.assert_awaited_once()
        assert redis_cache._pool is None

    @pytest.mark.asyncio
    async def test_close_without_pool_is_noop(self):
        await close_redis_pool()

        assert redis_cache._pool is None
