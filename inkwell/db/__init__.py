"""Database engine and session helpers."""

from inkwell.db.database import (
    async_session_maker,
    build_engine,
    close_db,
    engine,
    get_session,
    init_db,
)

__all__ = [
    "async_session_maker",
    "build_engine",
    "close_db",
    "engine",
    "get_session",
    "init_db",
]
