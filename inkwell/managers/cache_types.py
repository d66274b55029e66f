"""Type definitions for the content cache."""

from collections.abc import Awaitable, Callable
from enum import StrEnum
from typing import Any

CacheValue = Any
CacheLoader = Callable[[], Awaitable[CacheValue]]


class CacheDivision(StrEnum):
    """Partitions that keep identical keys for different content apart."""

    PAGE = "page"
    POST = "post"
    TAG = "tag"
    CATEGORY = "category"
    FRIEND_LINK = "friend_link"
