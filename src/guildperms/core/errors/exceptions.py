"""Domain exceptions for permission resolution.

These exceptions represent snapshot misses and authorization failures.
Web layers can convert them to RFC 7807 Problem Details responses with
the handlers in ``guildperms.core.errors.handlers``.
"""

from typing import Any


class PermissionsError(Exception):
    """Base exception for all permission resolution errors.

    All domain exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for clients
        status_code: HTTP status code for the response
        details: Additional error details
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class EntityNotFoundError(PermissionsError):
    """Raised when an entity is missing from the snapshot store.

    The engine never retries a miss; refreshing the snapshot is the
    store's concern.

    Example:
        raise GuildNotFoundError(guild_id)
    """

    kind: str = "entity"
    message = "Entity not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        entity_id: int | None = None,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.entity_id = entity_id
        details = kwargs.pop("details", {})
        details["resource"] = self.kind
        if entity_id is not None:
            details["resource_id"] = str(entity_id)
        super().__init__(
            message=message or f"{self.kind.capitalize()} not found",
            error_code=f"{self.kind}_not_found",
            details=details,
            **kwargs,
        )


class GuildNotFoundError(EntityNotFoundError):
    """Raised when a guild is not in the snapshot."""

    kind = "guild"


class MemberNotFoundError(EntityNotFoundError):
    """Raised when a member is not in the snapshot."""

    kind = "member"


class ChannelNotFoundError(EntityNotFoundError):
    """Raised when a channel is not in the snapshot."""

    kind = "channel"


class RoleNotFoundError(EntityNotFoundError):
    """Raised when a role is not part of the guild it was looked up in."""

    kind = "role"


class MissingPermissionError(PermissionsError):
    """Raised when a member lacks a required permission.

    Only the first missing permission is reported so that callers can
    surface one actionable deficiency at a time.

    Example:
        raise MissingPermissionError(Permission.SEND_MESSAGES)
    """

    message = "Missing permission"
    error_code = "missing_permission"
    status_code = 403

    def __init__(self, permission: Any, **kwargs: Any) -> None:
        self.permission = permission
        name = getattr(permission, "name", None) or str(permission)
        details = kwargs.pop("details", {})
        details["missing_permission"] = name
        super().__init__(
            message=kwargs.pop("message", None) or f"Missing permission: {name}",
            error_code=f"missing_{name.lower()}",
            details=details,
            **kwargs,
        )


class UnknownPermissionError(PermissionsError):
    """Raised when a permission name is not in the catalog.

    Example:
        raise UnknownPermissionError("SEND_MESAGES")
    """

    message = "Unknown permission"
    error_code = "unknown_permission"
    status_code = 422

    def __init__(self, name: str, **kwargs: Any) -> None:
        self.name = name
        details = kwargs.pop("details", {})
        details["permission"] = name
        super().__init__(
            message=f"Unknown permission: {name}",
            details=details,
            **kwargs,
        )
