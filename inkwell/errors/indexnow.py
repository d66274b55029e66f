from logging import getLogger

from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR, HTTP_502_BAD_GATEWAY

from inkwell.errors.base import BaseAppError, create_exception_handler
from inkwell.utils.helpers import file_logger

logger = file_logger(getLogger(__name__))


class IndexNowError(BaseAppError):
    """Base exception for IndexNow pings."""

    def __init__(
        self,
        detail: str = "IndexNow request failed",
        status_code: int = HTTP_502_BAD_GATEWAY,
    ) -> None:
        super().__init__(detail, status_code)


class IndexNowConfigurationError(IndexNowError):
    """Raised when IndexNow ping targets are not configured."""

    def __init__(self, detail: str = "IndexNow ping targets are not configured.") -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


indexnow_exception_handler = create_exception_handler(logger)
