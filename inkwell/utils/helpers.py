from collections.abc import MutableMapping
from datetime import datetime
from logging import INFO, Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from pythonjsonlogger.json import JsonFormatter
from starlette.routing import BaseRoute, Match, Route

LOG_DIR = Path("logs")
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return today's date as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(
        "%Y-%m-%d %H:%M:%S",
    )


def file_logger(logger: Logger) -> Logger:
    """
    Attach a rotating JSON file handler to a logger when file logging is enabled.

    The handler is attached once per logger; calling this repeatedly is safe.

    Args:
        logger: Logger to decorate.

    Returns:
        Logger: The same logger instance.
    """
    from inkwell.configs.settings import settings  # noqa: PLC0415

    if not settings.LOG_TO_FILE:
        return logger

    if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        return logger

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        LOG_DIR / "inkwell.log",
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(INFO)
    handler.setFormatter(JsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    return logger


def get_summary(request: Request) -> str | None:
    """Extract route summary from request."""

    scope: MutableMapping[str, Any] = request.scope
    app: FastAPI = scope["app"]
    routes: list[BaseRoute] = app.routes

    summary = None
    for route in routes:
        is_api_route = type(route) is APIRoute
        is_route = type(route) is Route
        if is_api_route and route.matches(scope)[0] == Match.FULL:
            summary = route.summary
            break
        if is_route and route.matches(scope)[0] == Match.FULL:
            summary = route.name
            break

    return summary


def static_route_segments(routes: list[BaseRoute], prefix: str) -> frozenset[str]:
    """
    Collect the literal path segments of the routes mounted under a prefix.

    ``/page/manage/edit/{page_id}`` under ``/page`` yields ``manage`` and
    ``edit``; path parameters yield nothing.
    """
    segments: set[str] = set()
    for route in routes:
        path = getattr(route, "path", "")
        if not path.startswith(f"{prefix}/"):
            continue
        for part in path[len(prefix) + 1 :].split("/"):
            if part and not part.startswith("{"):
                segments.add(part.lower())
    return frozenset(segments)
