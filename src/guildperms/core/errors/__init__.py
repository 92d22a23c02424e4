"""Error handling module with RFC 7807 Problem Details."""

from guildperms.core.errors.exceptions import (
    ChannelNotFoundError,
    EntityNotFoundError,
    GuildNotFoundError,
    MemberNotFoundError,
    MissingPermissionError,
    PermissionsError,
    RoleNotFoundError,
    UnknownPermissionError,
)
from guildperms.core.errors.handlers import (
    ProblemDetail,
    register_exception_handlers,
)


__all__ = [
    "ChannelNotFoundError",
    "EntityNotFoundError",
    "GuildNotFoundError",
    "MemberNotFoundError",
    "MissingPermissionError",
    "PermissionsError",
    "ProblemDetail",
    "RoleNotFoundError",
    "UnknownPermissionError",
    "register_exception_handlers",
]
