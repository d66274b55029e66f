from inkwell.errors.base import BASE_EXCEPTION, BaseAppError, create_exception_handler
from inkwell.errors.cache import (
    CacheConfigurationError,
    CacheExceptionError,
    UnknownCacheDivisionError,
    cache_exception_handler,
)
from inkwell.errors.content import (
    ContentError,
    ContentNotFoundError,
    InvalidCssError,
    ReservedSlugError,
    content_exception_handler,
)
from inkwell.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from inkwell.errors.indexnow import (
    IndexNowConfigurationError,
    IndexNowError,
    indexnow_exception_handler,
)
from inkwell.errors.validation import validation_exception_handler

__all__ = [
    "BASE_EXCEPTION",
    "BaseAppError",
    "CacheConfigurationError",
    "CacheExceptionError",
    "ContentError",
    "ContentNotFoundError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DuplicateEntryError",
    "IndexNowConfigurationError",
    "IndexNowError",
    "InvalidCssError",
    "RecordNotFoundError",
    "ReservedSlugError",
    "UnknownCacheDivisionError",
    "cache_exception_handler",
    "content_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "indexnow_exception_handler",
    "validation_exception_handler",
]
