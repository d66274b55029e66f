"""Custom page repository."""

from logging import getLogger
from uuid import UUID

from sqlalchemy import func, select

from inkwell.configs import file_logger
from inkwell.errors.database import DuplicateEntryError, RecordNotFoundError
from inkwell.models import PageDB
from inkwell.models.page import utc_now
from inkwell.repositories.base import BaseRepository
from inkwell.schemas.page import PageEditModel

logger = file_logger(getLogger(__name__))

_PAGE_COLUMNS = (
    "title",
    "slug",
    "meta_description",
    "raw_html_content",
    "css_content",
    "hide_sidebar",
    "is_published",
)


class PageRepository(BaseRepository[PageDB, PageEditModel]):
    """Queries and writes for custom pages."""

    model = PageDB

    async def get_by_slug(self, slug: str) -> PageDB | None:
        """Find a page by slug, ignoring case."""
        statement = select(PageDB).where(func.lower(PageDB.slug) == slug.lower())
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_segments(self) -> list[PageDB]:
        """All pages, newest first, for the management list."""
        statement = select(PageDB).order_by(PageDB.created_at.desc())  # type: ignore[attr-defined]
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def create_page(self, page: PageEditModel) -> PageDB:
        """
        Insert a new page.

        Raises:
            DuplicateEntryError: If the slug is taken.
        """
        if await self._check_exists_by_field("slug", page.slug):
            raise DuplicateEntryError(f"Page with slug '{page.slug}' already exists")

        record = PageDB(**page.model_dump(include=set(_PAGE_COLUMNS)))
        return await self._add_and_refresh(record)

    async def update_page(self, page_id: UUID, page: PageEditModel) -> tuple[PageDB, str]:
        """
        Overwrite an existing page.

        Returns:
            The updated row and the slug it had before the update.

        Raises:
            RecordNotFoundError: If no page has this id.
            DuplicateEntryError: If another page already uses the new slug.
        """
        record = await self.get_by_id(page_id)
        if record is None:
            raise RecordNotFoundError(f"Page with ID {page_id} not found")

        if await self._check_exists_by_field("slug", page.slug, exclude_id=page_id):
            raise DuplicateEntryError(f"Page with slug '{page.slug}' already exists")

        old_slug = record.slug
        for column, value in page.model_dump(include=set(_PAGE_COLUMNS)).items():
            setattr(record, column, value)
        record.updated_at = utc_now()

        updated = await self._add_and_refresh(record)
        logger.debug("Page %s updated (slug %s -> %s)", page_id, old_slug, updated.slug)
        return updated, old_slug
