"""Friend link service."""

from logging import getLogger
from uuid import UUID

from inkwell.configs import file_logger
from inkwell.managers.cache_types import CacheDivision
from inkwell.managers.content_cache import ContentCache
from inkwell.repositories import FriendLinkRepository
from inkwell.schemas.friend_link import FriendLinkCreate, FriendLinkResponse
from inkwell.utils.cache_keys import ALL_KEY

logger = file_logger(getLogger(__name__))


class FriendLinkService:
    def __init__(self, repository: FriendLinkRepository, cache: ContentCache) -> None:
        self.repository = repository
        self.cache = cache

    async def list_all(self) -> list[FriendLinkResponse]:
        async def load() -> list[FriendLinkResponse]:
            return [FriendLinkResponse.model_validate(f) for f in await self.repository.list_ordered()]

        return await self.cache.get_or_create(CacheDivision.FRIEND_LINK, ALL_KEY, load)

    async def create(self, link: FriendLinkCreate) -> FriendLinkResponse:
        record = await self.repository.create(link)
        await self.repository.commit()
        logger.info(f"Added a friend link: {record.title}")

        await self.cache.remove(CacheDivision.FRIEND_LINK, ALL_KEY)
        return FriendLinkResponse.model_validate(record)

    async def delete(self, link_id: UUID) -> None:
        """
        Delete a friend link if it exists.

        Deleting an unknown id is not an error; the attempt is still logged.
        """
        link = await self.repository.get_by_id(link_id)
        title = link.title if link else None
        if link is not None:
            await self.repository.delete(link_id)
            await self.repository.commit()

        logger.info(f"Deleted a friend link: {title}")
        await self.cache.remove(CacheDivision.FRIEND_LINK, ALL_KEY)
