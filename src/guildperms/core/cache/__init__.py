"""Cache module for Redis-backed snapshot reads."""

from guildperms.core.cache.redis import RedisCache, close_redis_pool, redis_client


__all__ = [
    "RedisCache",
    "close_redis_pool",
    "redis_client",
]
