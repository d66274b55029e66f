"""Custom exceptions for the content cache."""

from logging import getLogger

from starlette import status

from inkwell.errors.base import BaseAppError, create_exception_handler
from inkwell.utils.helpers import file_logger

logger = file_logger(getLogger(__name__))


class CacheExceptionError(BaseAppError):
    """Base exception for cache operations."""

    def __init__(self, detail: str = "Cache exception occurred") -> None:
        super().__init__(
            detail=detail,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


class CacheConfigurationError(CacheExceptionError):
    """Raised when the cache expiration policy is incomplete or invalid."""

    def __init__(self, detail: str = "Invalid cache configuration") -> None:
        super().__init__(detail)


class UnknownCacheDivisionError(CacheExceptionError):
    """Raised when a request names a cache division that does not exist."""

    def __init__(self, detail: str = "Unknown cache division") -> None:
        super().__init__(detail)
        self.status_code = status.HTTP_404_NOT_FOUND


cache_exception_handler = create_exception_handler(logger)
