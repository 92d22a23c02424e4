"""Permission set algebra.

Stateless helpers for checking, diffing and converting permission
bitmasks. A bitmask equal to ``ADMINISTRATOR_SENTINEL`` means "all
capabilities" and satisfies every requirement.

Note:
    ``to_flags`` only reports catalogued bits, so
    ``from_flags(to_flags(x))`` drops any bit of ``x`` that is outside
    the catalog.
"""

from collections.abc import Iterable

from guildperms.core.errors import UnknownPermissionError
from guildperms.permissions.flags import (
    ADMINISTRATOR_SENTINEL,
    ALL_PERMISSIONS,
    CapabilitySet,
    Permission,
)


PermissionLike = Permission | str


def parse_permission(value: PermissionLike) -> Permission:
    """Resolve a permission member or name (case-insensitive).

    Raises:
        UnknownPermissionError: If the name is not in the catalog
    """
    if isinstance(value, Permission):
        return value
    try:
        return Permission[value.strip().upper()]
    except KeyError:
        raise UnknownPermissionError(value) from None


def is_administrator(bits: CapabilitySet) -> bool:
    """Check if a bitmask is the all-capabilities sentinel."""
    return bits == ADMINISTRATOR_SENTINEL


def has_all(bits: CapabilitySet, required: Iterable[PermissionLike]) -> bool:
    """Check that every required permission is present in ``bits``.

    Names are validated even when ``bits`` is the sentinel.
    """
    wanted = [parse_permission(p) for p in required]
    if is_administrator(bits):
        return True
    return all(bits & p for p in wanted)


def missing(bits: CapabilitySet, required: Iterable[PermissionLike]) -> list[Permission]:
    """Return the required permissions absent from ``bits``, in caller order."""
    wanted = [parse_permission(p) for p in required]
    if is_administrator(bits):
        return []
    return [p for p in wanted if not bits & p]


def to_flags(bits: CapabilitySet) -> list[Permission]:
    """Expand a bitmask into permission flags, in catalog order."""
    return [p for p in ALL_PERMISSIONS if bits & p]


def from_flags(flags: Iterable[PermissionLike]) -> CapabilitySet:
    """Combine permission flags or names into a bitmask."""
    bits = 0
    for flag in flags:
        bits |= parse_permission(flag)
    return int(bits)


def apply_overwrite(bits: CapabilitySet, allow: CapabilitySet, deny: CapabilitySet) -> CapabilitySet:
    """Remove denied bits, then add allowed bits."""
    return (bits & ~deny) | allow
