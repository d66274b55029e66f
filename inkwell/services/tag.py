from inkwell.configs import settings
from inkwell.managers.cache_types import CacheDivision
from inkwell.managers.content_cache import ContentCache
from inkwell.repositories import TagRepository
from inkwell.schemas.tag import HotTag
from inkwell.utils.cache_keys import hot_tags_key


class TagService:
    def __init__(self, repository: TagRepository, cache: ContentCache) -> None:
        self.repository = repository
        self.cache = cache

    async def hot_tags(self, amount: int | None = None) -> list[HotTag]:
        """Most used tags, cached per list size in the ``tag`` partition."""
        size = amount or settings.HOT_TAG_AMOUNT

        async def load() -> list[HotTag]:
            return await self.repository.hot_tags(size)

        return await self.cache.get_or_create(CacheDivision.TAG, hot_tags_key(size), load)
