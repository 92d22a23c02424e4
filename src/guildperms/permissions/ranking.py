"""Role hierarchy.

Roles form a total order inside a guild: a larger position outranks a
smaller one, and on equal positions the older role (smaller id) wins.
The order decides moderation-style authority and plays no part in
channel overwrite resolution.
"""

from collections.abc import Iterable

from guildperms.core.errors import RoleNotFoundError
from guildperms.permissions.models import Guild, Role


def higher_role(role: Role, other: Role) -> bool:
    """Check if ``role`` outranks ``other``."""
    if role.position == other.position:
        return role.id < other.id
    return role.position > other.position


def highest_role(guild: Guild, role_ids: Iterable[int]) -> Role:
    """Return the highest of the given roles, or the everyone role if none resolve.

    Raises:
        RoleNotFoundError: If no role resolves and the guild has no everyone role
    """
    best: Role | None = None
    for role_id in role_ids:
        role = guild.roles.get(role_id)
        if role is None:
            continue
        if best is None or higher_role(role, best):
            best = role

    if best is not None:
        return best

    everyone = guild.everyone_role
    if everyone is None:
        raise RoleNotFoundError(guild.id, message="Everyone role not found")
    return everyone
