"""Timezone utility functions for displaying stored UTC datetimes."""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo


def to_timezone(dt: datetime, timezone: str) -> datetime:
    """
    Convert a stored UTC datetime to the blog's display timezone.

    Naive datetimes are treated as UTC, which is how the database stores them.

    Example:
        >>> to_timezone(datetime(2026, 2, 13, 15, 0, tzinfo=UTC), "Asia/Makassar").hour
        23

    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(ZoneInfo(timezone))


def to_utc(dt: datetime, timezone: str) -> datetime:
    """
    Convert a datetime entered in the blog's timezone to UTC for storage.

    Naive datetimes are interpreted in ``timezone``; aware ones keep their offset.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=ZoneInfo(timezone))
    return dt.astimezone(UTC)
