"""Custom page service: cached reads and cache-invalidating writes."""

from collections.abc import Collection
from logging import getLogger
from uuid import UUID

from inkwell.configs import file_logger
from inkwell.errors.content import ContentNotFoundError, InvalidCssError, ReservedSlugError
from inkwell.errors.database import RecordNotFoundError
from inkwell.managers.cache_types import CacheDivision
from inkwell.managers.content_cache import ContentCache
from inkwell.repositories import PageRepository
from inkwell.schemas.page import PageDetail, PageEditModel, PageSegment, PageView
from inkwell.utils.cache_keys import page_slug_key
from inkwell.utils.css import css_errors

logger = file_logger(getLogger(__name__))


class PageService:
    """
    Reads and writes custom pages.

    Published pages are served from the ``page`` partition of the content
    cache; every write removes the affected slugs so the next read reloads.
    """

    def __init__(
        self,
        repository: PageRepository,
        cache: ContentCache,
        reserved_slugs: Collection[str] = (),
    ) -> None:
        """
        Args:
            repository: Page repository bound to the request's session.
            cache: Shared content cache.
            reserved_slugs: Lower-cased slugs that collide with page routes.
        """
        self.repository = repository
        self.cache = cache
        self.reserved_slugs = frozenset(reserved_slugs)

    async def get_published(self, slug: str) -> PageView:
        """
        Return a published page by slug through the cache.

        A missing page is cached as well, so repeated requests for an unknown
        slug do not reach the database until the entry slides out.

        Raises:
            ContentNotFoundError: If the page does not exist or is a draft.
        """

        async def load() -> PageDetail | None:
            record = await self.repository.get_by_slug(slug)
            return PageDetail.model_validate(record) if record else None

        page = await self.cache.get_or_create(CacheDivision.PAGE, page_slug_key(slug), load)
        if page is None:
            logger.warning(f"Page not found. slug: '{slug}'")
            raise ContentNotFoundError(f"Page '{slug}' not found")

        if not page.is_published:
            raise ContentNotFoundError(f"Page '{slug}' not found")

        return PageView.from_detail(page)

    async def preview(self, page_id: UUID) -> PageView:
        """Render any page by id, drafts included, bypassing the cache."""
        record = await self.repository.get_by_id(page_id)
        if record is None:
            logger.warning(f"Page not found, parameter '{page_id}'.")
            raise ContentNotFoundError(f"Page with ID {page_id} not found")
        return PageView.from_detail(PageDetail.model_validate(record), is_draft_preview=True)

    async def list_segments(self) -> list[PageSegment]:
        return [PageSegment.model_validate(p) for p in await self.repository.list_segments()]

    async def get_edit_model(self, page_id: UUID) -> PageEditModel:
        record = await self.repository.get_by_id(page_id)
        if record is None:
            raise ContentNotFoundError(f"Page with ID {page_id} not found")
        return PageEditModel.model_validate(record)

    async def create_or_edit(self, page: PageEditModel) -> UUID:
        """
        Create a page when it has no id, otherwise update it.

        Returns:
            The id of the saved page.

        Raises:
            ReservedSlugError: If the slug names one of the page routes.
            InvalidCssError: If the page CSS does not parse.
            RecordNotFoundError: If the id does not exist.
            DuplicateEntryError: If the slug belongs to another page.
        """
        slug = page.slug.lower()
        if slug in self.reserved_slugs:
            raise ReservedSlugError(slug)

        if page.css_content and (errors := css_errors(page.css_content)):
            raise InvalidCssError(errors)

        old_slug: str | None = None
        if page.id is None:
            record = await self.repository.create_page(page)
        else:
            record, old_slug = await self.repository.update_page(page.id, page)
        await self.repository.commit()

        logger.info(f"Custom page '{record.id}' saved with slug '{record.slug}'")

        await self.cache.remove(CacheDivision.PAGE, page_slug_key(record.slug))
        if old_slug is not None and page_slug_key(old_slug) != page_slug_key(record.slug):
            await self.cache.remove(CacheDivision.PAGE, page_slug_key(old_slug))
        return record.id

    async def delete(self, page_id: UUID, slug: str | None = None) -> UUID:
        """
        Delete a page and drop its cache entry.

        Args:
            page_id: Page to delete.
            slug: Slug to invalidate; defaults to the stored slug.

        Raises:
            RecordNotFoundError: If the id does not exist.
        """
        record = await self.repository.get_by_id(page_id)
        if record is None:
            raise RecordNotFoundError(f"Page with ID {page_id} not found")

        stored_slug = record.slug
        await self.repository.delete(page_id)
        await self.repository.commit()

        for key in {page_slug_key(stored_slug), page_slug_key(slug or stored_slug)}:
            await self.cache.remove(CacheDivision.PAGE, key)
        logger.info(f"Custom page '{page_id}' deleted")
        return page_id
