"""Snapshot store reading JSON entities from Redis.

Entities are stored under ``<prefix><kind>:<id>`` where kind is one of
``guilds``, ``members`` or ``channels``. Keeping the keys populated is
the job of whatever process caches gateway data.
"""

from typing import TypeVar

import structlog

from guildperms.config import settings
from guildperms.core.cache.redis import RedisCache
from guildperms.core.constants import (
    SNAPSHOT_KIND_CHANNELS,
    SNAPSHOT_KIND_GUILDS,
    SNAPSHOT_KIND_MEMBERS,
)
from guildperms.permissions.models import Channel, Guild, Member, SnapshotModel


logger = structlog.get_logger()

ModelT = TypeVar("ModelT", bound=SnapshotModel)


class RedisSnapshotStore:
    """Snapshot store backed by a Redis cache."""

    def __init__(self, cache: RedisCache | None = None) -> None:
        self.cache = cache or RedisCache(prefix=settings.snapshot_key_prefix)

    async def _load(self, kind: str, entity_id: int, model: type[ModelT]) -> ModelT | None:
        data = await self.cache.get(f"{kind}:{entity_id}")
        if data is None:
            logger.debug("snapshot_miss", kind=kind, entity_id=entity_id)
            return None
        return model.model_validate_json(data)

    async def get_guild(self, guild_id: int) -> Guild | None:
        return await self._load(SNAPSHOT_KIND_GUILDS, guild_id, Guild)

    async def get_member(self, member_id: int) -> Member | None:
        return await self._load(SNAPSHOT_KIND_MEMBERS, member_id, Member)

    async def get_channel(self, channel_id: int) -> Channel | None:
        return await self._load(SNAPSHOT_KIND_CHANNELS, channel_id, Channel)
