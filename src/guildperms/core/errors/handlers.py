"""RFC 7807 Problem Details exception handlers.

Web applications that gate routes on resolved permissions can register
these handlers so snapshot misses and missing permissions become
standardized error responses.

See: https://tools.ietf.org/html/rfc7807
"""

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, cast

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from guildperms.config import settings
from guildperms.core.errors.exceptions import PermissionsError


if TYPE_CHECKING:
    from starlette.types import ExceptionHandler


logger = structlog.get_logger()


class ProblemDetail(BaseModel):
    """RFC 7807 Problem Details response schema.

    Attributes:
        type: URI reference identifying the problem type
        title: Short human-readable summary
        status: HTTP status code
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying this specific occurrence
        trace_id: Request trace ID for debugging
    """

    type: str
    title: str
    status: int
    detail: str
    instance: str | None = None
    trace_id: str | None = None

    model_config = {"extra": "allow"}


def _get_trace_id(request: Request) -> str | None:
    """Extract trace ID from request state if available."""
    return getattr(request.state, "trace_id", None)


def _get_error_type_uri(base_url: str | None, error_code: str) -> str:
    """Build the type URI under the configured docs site."""
    base_url = base_url or settings.error_docs_base_url
    return f"{base_url}/errors/{error_code}"


def make_permissions_error_handler(
    docs_base_url: str | None = None,
) -> Callable[[Request, PermissionsError], Awaitable[JSONResponse]]:
    """Build a handler converting PermissionsError into Problem Details.

    Type URIs default to ``settings.error_docs_base_url``.
    """

    async def permissions_error_handler(
        request: Request, exc: PermissionsError
    ) -> JSONResponse:
        logger.warning(
            "permissions_error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=str(request.url.path),
            details=exc.details,
        )

        content: dict[str, Any] = ProblemDetail(
            type=_get_error_type_uri(docs_base_url, exc.error_code),
            title=exc.error_code.replace("_", " ").title(),
            status=exc.status_code,
            detail=exc.message,
            instance=str(request.url.path),
            trace_id=_get_trace_id(request),
        ).model_dump(exclude_none=True)

        # Add any additional details from the exception
        for key, value in exc.details.items():
            if key not in content:
                content[key] = value

        return JSONResponse(status_code=exc.status_code, content=content)

    return permissions_error_handler


def register_exception_handlers(
    app: FastAPI, docs_base_url: str | None = None
) -> None:
    """Register the permission error handler with a FastAPI app.

    Call this function during app initialization:

        app = FastAPI()
        register_exception_handlers(app)
    """
    app.add_exception_handler(
        PermissionsError,
        cast("ExceptionHandler", make_permissions_error_handler(docs_base_url)),
    )
