"""Permission resolution engine."""

from guildperms.permissions.flags import (
    ADMINISTRATOR_SENTINEL,
    ALL_PERMISSIONS,
    CapabilitySet,
    Permission,
)
from guildperms.permissions.models import Channel, Guild, Member, MemberGuild, Overwrite, Role
from guildperms.permissions.bits import (
    apply_overwrite,
    from_flags,
    has_all,
    is_administrator,
    missing,
    parse_permission,
    to_flags,
)
from guildperms.permissions.ranking import higher_role, highest_role
from guildperms.permissions.resolver import PermissionResolver
from guildperms.permissions.decorators import (
    require_channel_permissions,
    require_guild_permissions,
)


__all__ = [
    "ADMINISTRATOR_SENTINEL",
    "ALL_PERMISSIONS",
    "CapabilitySet",
    "Channel",
    "Guild",
    "Member",
    "MemberGuild",
    "Overwrite",
    "Permission",
    "PermissionResolver",
    "Role",
    "apply_overwrite",
    "from_flags",
    "has_all",
    "higher_role",
    "highest_role",
    "is_administrator",
    "missing",
    "parse_permission",
    "require_channel_permissions",
    "require_guild_permissions",
    "to_flags",
]
