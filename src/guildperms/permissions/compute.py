"""Pure permission computation over snapshot models.

The functions in this module never touch the snapshot store; the
resolver fetches the entities and hands them in.
"""

from collections.abc import Iterable

import structlog

from guildperms.permissions.bits import apply_overwrite
from guildperms.permissions.flags import (
    ADMINISTRATOR_SENTINEL,
    CapabilitySet,
    Permission,
)
from guildperms.permissions.models import Channel, Guild, Member, Role


logger = structlog.get_logger()


def aggregate_roles(guild: Guild, role_ids: Iterable[int]) -> CapabilitySet:
    """OR together the permissions of every role that exists in the guild.

    Role ids with no matching role are stale references and are skipped.
    """
    bits = 0
    for role_id in role_ids:
        role = guild.roles.get(role_id)
        if role is None:
            logger.debug("stale_role_reference", guild_id=guild.id, role_id=role_id)
            continue
        bits |= role.permissions
    return bits


def compute_base_permissions(guild: Guild, member: Member) -> CapabilitySet:
    """Compute the guild-wide permissions of a member.

    The owner and any member whose combined roles carry ADMINISTRATOR get
    the administrator sentinel.
    """
    if guild.owner_id == member.id:
        return ADMINISTRATOR_SENTINEL

    # The everyone role is implicit, so the guild id is always a candidate
    bits = aggregate_roles(guild, [*member.role_ids(guild.id), guild.id])

    if bits & Permission.ADMINISTRATOR:
        return ADMINISTRATOR_SENTINEL
    return bits


def compute_overwrites(
    base: CapabilitySet,
    channel: Channel,
    role_ids: Iterable[int],
    member_id: int,
) -> CapabilitySet:
    """Apply a channel's overwrites on top of guild-wide permissions.

    Precedence, lowest first: everyone overwrite, the combined role
    overwrites, the member's own overwrite. Administrators and private
    channels are returned unchanged as the sentinel.
    """
    if channel.guild_id is None or base & Permission.ADMINISTRATOR:
        return ADMINISTRATOR_SENTINEL

    bits = base

    everyone = channel.overwrite_for(channel.guild_id)
    if everyone is not None:
        bits = apply_overwrite(bits, everyone.allow, everyone.deny)

    # Role overwrites share one tier, so their masks are combined first
    allow = 0
    deny = 0
    for role_id in role_ids:
        if role_id == channel.guild_id:
            continue
        overwrite = channel.overwrite_for(role_id)
        if overwrite is not None:
            allow |= overwrite.allow
            deny |= overwrite.deny
    bits = apply_overwrite(bits, allow, deny)

    own = channel.overwrite_for(member_id)
    if own is not None:
        bits = apply_overwrite(bits, own.allow, own.deny)

    return bits


def compute_role_overwrites(guild: Guild, role: Role, channel: Channel) -> CapabilitySet:
    """Compute what a role, together with the everyone role, may do in a channel."""
    if channel.guild_id is None:
        return ADMINISTRATOR_SENTINEL

    bits = aggregate_roles(guild, [role.id, guild.id])
    if bits & Permission.ADMINISTRATOR:
        return ADMINISTRATOR_SENTINEL

    everyone = channel.overwrite_for(guild.id)
    if everyone is not None:
        bits = apply_overwrite(bits, everyone.allow, everyone.deny)

    if role.id != guild.id:
        overwrite = channel.overwrite_for(role.id)
        if overwrite is not None:
            bits = apply_overwrite(bits, overwrite.allow, overwrite.deny)

    return bits
