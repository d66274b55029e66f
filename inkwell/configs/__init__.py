from inkwell.configs.settings import (
    DEFAULT_SLIDING_EXPIRATION_MINUTES,
    CacheConfig,
    Settings,
    settings,
)
from inkwell.utils.helpers import file_logger

__all__ = [
    "CacheConfig",
    "DEFAULT_SLIDING_EXPIRATION_MINUTES",
    "Settings",
    "file_logger",
    "settings",
]
