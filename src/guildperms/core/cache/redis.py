"""Pooled async Redis access for snapshot lookups.

Snapshot entities are written by the gateway process; this module only
reads them.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import redis.asyncio as redis
from redis.asyncio.connection import ConnectionPool

from guildperms.config import settings


# Shared by every redis_client() in the process
_pool: ConnectionPool | None = None


def _get_pool() -> ConnectionPool:
    """Return the shared pool, creating it from settings on first use."""
    global _pool
    if _pool is None:
        _pool = ConnectionPool.from_url(
            str(settings.redis_url),
            max_connections=settings.redis_max_connections,
            decode_responses=True,
        )
    return _pool


@asynccontextmanager
async def redis_client() -> AsyncGenerator[redis.Redis, None]:  # type: ignore[type-arg]
    """Yield a client bound to the shared pool.

        async with redis_client() as client:
            raw = await client.get("cache:guilds:1")
    """
    client = redis.Redis(connection_pool=_get_pool())
    try:
        yield client
    finally:
        await client.aclose()


async def close_redis_pool() -> None:
    """Disconnect and forget the shared pool. Safe to call twice."""
    global _pool
    if _pool is not None:
        await _pool.disconnect()
        _pool = None


class RedisCache:
    """Reads string values under a fixed key namespace.

    Args:
        prefix: Namespace prepended to every key, e.g. ``"cache:"``
    """

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}" if self.prefix else key

    async def get(self, key: str) -> str | None:
        """Return the raw value stored under ``prefix + key``, or None."""
        async with redis_client() as client:
            return await client.get(self._key(key))
