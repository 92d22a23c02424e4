"""Permission resolution against a snapshot store.

This module provides the ``PermissionResolver`` service, which fetches
guilds, members and channels from a snapshot store and evaluates what a
member may do in a guild or a channel.
"""

from collections.abc import Iterable

import structlog

from guildperms.core.errors import (
    ChannelNotFoundError,
    GuildNotFoundError,
    MemberNotFoundError,
    MissingPermissionError,
    RoleNotFoundError,
)
from guildperms.permissions.bits import PermissionLike, has_all, missing
from guildperms.permissions.compute import (
    compute_base_permissions,
    compute_overwrites,
    compute_role_overwrites,
)
from guildperms.permissions.flags import ADMINISTRATOR_SENTINEL, CapabilitySet
from guildperms.permissions.models import Channel, Guild, Member, Role
from guildperms.permissions.ranking import higher_role
from guildperms.permissions.ranking import highest_role as _highest_role
from guildperms.snapshots.store import SnapshotStore


logger = structlog.get_logger()


class PermissionResolver:
    """Service for resolving member permissions.

    Holds no state besides the store. The acting member (including the
    bot's own user) is always passed explicitly.
    """

    def __init__(self, store: SnapshotStore) -> None:
        self.store = store

    async def _guild(self, guild_id: int) -> Guild:
        guild = await self.store.get_guild(guild_id)
        if guild is None:
            raise GuildNotFoundError(guild_id)
        return guild

    async def _member(self, member_id: int) -> Member:
        member = await self.store.get_member(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)
        return member

    async def _channel(self, channel_id: int) -> Channel:
        channel = await self.store.get_channel(channel_id)
        if channel is None:
            raise ChannelNotFoundError(channel_id)
        return channel

    async def guild_permissions(self, member_id: int, guild_id: int) -> CapabilitySet:
        """Compute the permissions a member has across a guild.

        Args:
            member_id: The member's id
            guild_id: The guild's id

        Returns:
            Permission bitmask, or the administrator sentinel

        Raises:
            GuildNotFoundError: If the guild is not in the snapshot
            MemberNotFoundError: If the member is not in the snapshot
        """
        guild = await self._guild(guild_id)
        if guild.owner_id == member_id:
            logger.debug("owner_short_circuit", guild_id=guild_id, member_id=member_id)
            return ADMINISTRATOR_SENTINEL

        member = await self._member(member_id)
        bits = compute_base_permissions(guild, member)
        logger.debug(
            "guild_permissions_resolved",
            guild_id=guild_id,
            member_id=member_id,
            permissions=bits,
        )
        return bits

    async def channel_permissions(self, member_id: int, channel_id: int) -> CapabilitySet:
        """Compute the permissions a member has in a channel.

        Applies the channel's overwrites on top of the member's guild
        permissions. Private channels grant everything.

        Raises:
            ChannelNotFoundError: If the channel is not in the snapshot
            GuildNotFoundError: If the channel's guild is not in the snapshot
            MemberNotFoundError: If the member is not in the snapshot
        """
        channel = await self._channel(channel_id)
        if channel.guild_id is None:
            return ADMINISTRATOR_SENTINEL

        guild = await self._guild(channel.guild_id)
        if guild.owner_id == member_id:
            logger.debug("owner_short_circuit", guild_id=guild.id, member_id=member_id)
            return ADMINISTRATOR_SENTINEL

        member = await self._member(member_id)
        base = compute_base_permissions(guild, member)
        if base == ADMINISTRATOR_SENTINEL:
            return base

        bits = compute_overwrites(
            base, channel, member.role_ids(channel.guild_id), member_id
        )
        logger.debug(
            "channel_permissions_resolved",
            channel_id=channel_id,
            member_id=member_id,
            permissions=bits,
        )
        return bits

    async def role_channel_permissions(self, role_id: int, channel_id: int) -> CapabilitySet:
        """Compute what holders of a single role may do in a channel.

        Raises:
            ChannelNotFoundError: If the channel is not in the snapshot
            GuildNotFoundError: If the channel's guild is not in the snapshot
            RoleNotFoundError: If the role is not part of the channel's guild
        """
        channel = await self._channel(channel_id)
        if channel.guild_id is None:
            return ADMINISTRATOR_SENTINEL

        guild = await self._guild(channel.guild_id)
        role = guild.roles.get(role_id)
        if role is None:
            raise RoleNotFoundError(role_id)
        return compute_role_overwrites(guild, role, channel)

    async def has_guild_permissions(
        self,
        member_id: int,
        guild_id: int,
        permissions: Iterable[PermissionLike],
    ) -> bool:
        """Check if a member has all of the given permissions in a guild."""
        bits = await self.guild_permissions(member_id, guild_id)
        return has_all(bits, permissions)

    async def has_channel_permissions(
        self,
        member_id: int,
        channel_id: int,
        permissions: Iterable[PermissionLike],
    ) -> bool:
        """Check if a member has all of the given permissions in a channel."""
        bits = await self.channel_permissions(member_id, channel_id)
        return has_all(bits, permissions)

    async def ensure_guild_permissions(
        self,
        member_id: int,
        guild_id: int,
        permissions: Iterable[PermissionLike],
    ) -> None:
        """Raise if a member lacks any of the given guild permissions.

        Raises:
            MissingPermissionError: Naming the first missing permission
        """
        bits = await self.guild_permissions(member_id, guild_id)
        _raise_first_missing(bits, permissions, member_id=member_id, guild_id=guild_id)

    async def ensure_channel_permissions(
        self,
        member_id: int,
        channel_id: int,
        permissions: Iterable[PermissionLike],
    ) -> None:
        """Raise if a member lacks any of the given channel permissions.

        Raises:
            MissingPermissionError: Naming the first missing permission
        """
        bits = await self.channel_permissions(member_id, channel_id)
        _raise_first_missing(bits, permissions, member_id=member_id, channel_id=channel_id)

    async def highest_role(self, guild_id: int, member_id: int) -> Role:
        """Get the member's highest role in a guild.

        A member without roles (or without a record for this guild) is
        ranked by the everyone role.
        """
        guild = await self._guild(guild_id)
        member = await self._member(member_id)
        return _highest_role(guild, member.role_ids(guild_id))

    async def higher_role_position(
        self,
        guild_id: int,
        role_id: int,
        other_role_id: int,
    ) -> bool:
        """Check if one role of a guild outranks another.

        Raises:
            GuildNotFoundError: If the guild is not in the snapshot
            RoleNotFoundError: If either role is not in the guild
        """
        guild = await self._guild(guild_id)
        role = guild.roles.get(role_id)
        if role is None:
            raise RoleNotFoundError(role_id)
        other = guild.roles.get(other_role_id)
        if other is None:
            raise RoleNotFoundError(other_role_id)
        return higher_role(role, other)

    async def member_outranks(
        self,
        guild_id: int,
        member_id: int,
        compare_role_id: int,
    ) -> bool:
        """Check if a member's highest role outranks the given role.

        The guild owner outranks every role.

        Raises:
            GuildNotFoundError: If the guild is not in the snapshot
            MemberNotFoundError: If the member is not in the snapshot
            RoleNotFoundError: If the compared role is not in the guild
        """
        guild = await self._guild(guild_id)
        if guild.owner_id == member_id:
            return True

        compare_role = guild.roles.get(compare_role_id)
        if compare_role is None:
            raise RoleNotFoundError(compare_role_id)

        member = await self._member(member_id)
        top = _highest_role(guild, member.role_ids(guild_id))
        return higher_role(top, compare_role)


def _raise_first_missing(
    bits: CapabilitySet,
    permissions: Iterable[PermissionLike],
    **context: int,
) -> None:
    absent = missing(bits, permissions)
    if absent:
        logger.warning(
            "missing_permission",
            permission=absent[0].name,
            missing=[p.name for p in absent],
            **context,
        )
        raise MissingPermissionError(absent[0])
