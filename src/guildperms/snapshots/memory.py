"""In-process snapshot store backed by dictionaries."""

from collections.abc import Iterable

from guildperms.permissions.models import Channel, Guild, Member


class InMemorySnapshotStore:
    """Snapshot store holding models in plain dictionaries.

    Used by tests and the CLI, where a whole snapshot is loaded up front.
    """

    def __init__(
        self,
        guilds: Iterable[Guild] = (),
        members: Iterable[Member] = (),
        channels: Iterable[Channel] = (),
    ) -> None:
        self.guilds: dict[int, Guild] = {g.id: g for g in guilds}
        self.members: dict[int, Member] = {m.id: m for m in members}
        self.channels: dict[int, Channel] = {c.id: c for c in channels}

    async def get_guild(self, guild_id: int) -> Guild | None:
        return self.guilds.get(guild_id)

    async def get_member(self, member_id: int) -> Member | None:
        return self.members.get(member_id)

    async def get_channel(self, channel_id: int) -> Channel | None:
        return self.channels.get(channel_id)
