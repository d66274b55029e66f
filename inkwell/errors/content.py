"""Exceptions raised by the blog content services."""

from logging import getLogger

from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from inkwell.errors.base import BaseAppError, create_exception_handler
from inkwell.utils.helpers import file_logger

logger = file_logger(getLogger(__name__))


class ContentError(BaseAppError):
    """Base exception for content operations."""

    def __init__(
        self,
        detail: str = "Content Error",
        status_code: int = HTTP_400_BAD_REQUEST,
    ) -> None:
        super().__init__(detail, status_code)


class ReservedSlugError(ContentError):
    """Raised when a page slug collides with a reserved route segment."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Reserved Slug: '{slug}'", HTTP_400_BAD_REQUEST)
        self.slug = slug


class InvalidCssError(ContentError):
    """Raised when page CSS does not parse; ``errors`` lists each problem."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("Invalid CSS content", HTTP_400_BAD_REQUEST)
        self.errors = errors


class ContentNotFoundError(ContentError):
    """Raised when requested content does not exist or is not visible."""

    def __init__(self, detail: str = "Content not found") -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


content_exception_handler = create_exception_handler(logger)
