"""Permission decorators for handler protection.

This module provides decorators that can be applied to async handlers
(commands, routes, event callbacks) to require permissions before the
handler runs.
"""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar

import structlog

from guildperms.permissions.bits import PermissionLike, parse_permission
from guildperms.permissions.resolver import PermissionResolver


logger = structlog.get_logger()

P = ParamSpec("P")
R = TypeVar("R")


def _get_context(kwargs: dict[str, Any], scope_key: str) -> tuple[PermissionResolver, int, int]:
    """Extract resolver, member id and scope id from kwargs.

    Raises:
        TypeError: If the decorated handler was called without them
    """
    resolver = kwargs.get("resolver")
    member_id = kwargs.get("member_id")
    scope_id = kwargs.get(scope_key)
    if not isinstance(resolver, PermissionResolver) or member_id is None or scope_id is None:
        raise TypeError(
            f"Permission-protected handlers must be called with "
            f"'resolver', 'member_id' and '{scope_key}' keyword arguments"
        )
    return resolver, member_id, scope_id


def require_guild_permissions(
    *permissions: PermissionLike,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Decorator that requires guild-wide permissions.

    Usage:
        @require_guild_permissions(Permission.BAN_MEMBERS)
        async def ban(*, resolver, member_id, guild_id, target_id):
            ...

    Raises:
        MissingPermissionError: If the member lacks a required permission
    """
    required = [parse_permission(p) for p in permissions]

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            resolver, member_id, guild_id = _get_context(kwargs, "guild_id")
            await resolver.ensure_guild_permissions(member_id, guild_id, required)
            return await func(*args, **kwargs)

        return wrapper

    return decorator


def require_channel_permissions(
    *permissions: PermissionLike,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Decorator that requires permissions in a channel.

    Usage:
        @require_channel_permissions("SEND_MESSAGES", "EMBED_LINKS")
        async def post(*, resolver, member_id, channel_id, content):
            ...

    Raises:
        MissingPermissionError: If the member lacks a required permission
    """
    required = [parse_permission(p) for p in permissions]

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            resolver, member_id, channel_id = _get_context(kwargs, "channel_id")
            await resolver.ensure_channel_permissions(member_id, channel_id, required)
            return await func(*args, **kwargs)

        return wrapper

    return decorator
