"""Request validation error handling."""

from logging import getLogger
from typing import Any, cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_422_UNPROCESSABLE_CONTENT

from inkwell.utils.helpers import file_logger, host

logger = file_logger(getLogger(__name__))


def _format_error(error: dict[str, Any]) -> dict[str, Any]:
    """Flatten one pydantic error into a field/message pair."""
    formatted: dict[str, Any] = {
        # Skip the leading 'body' / 'query' / 'path' location
        "field": ".".join(str(loc) for loc in error.get("loc", [])[1:]),
        "message": error.get("msg", "Invalid value"),
        "type": error.get("type", "validation_error"),
    }
    if ctx := error.get("ctx"):
        formatted["context"] = {
            key: str(value) if isinstance(value, Exception) else value
            for key, value in ctx.items()
        }
    return formatted


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle request validation errors with a compact response format.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    errors = [_format_error(e) for e in cast(RequestValidationError, exc).errors()]

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_422_UNPROCESSABLE_CONTENT,
        content={"detail": "Validation failed", "errors": errors},
    )
