"""Snapshot store read interface.

The permission engine only reads from the store. Any implementation,
in-process dicts or a networked cache, satisfies the protocol as long
as a miss is reported as ``None``.
"""

from typing import Protocol, runtime_checkable

from guildperms.permissions.models import Channel, Guild, Member


@runtime_checkable
class SnapshotStore(Protocol):
    """Read-only lookup of cached guilds, members and channels."""

    async def get_guild(self, guild_id: int) -> Guild | None: ...

    async def get_member(self, member_id: int) -> Member | None: ...

    async def get_channel(self, channel_id: int) -> Channel | None: ...
