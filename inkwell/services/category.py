"""Category service."""

from logging import getLogger
from uuid import UUID

from inkwell.configs import file_logger
from inkwell.errors.database import RecordNotFoundError
from inkwell.managers.cache_types import CacheDivision
from inkwell.managers.content_cache import ContentCache
from inkwell.repositories import CategoryRepository
from inkwell.schemas.category import CategoryCreate, CategoryResponse
from inkwell.utils.cache_keys import ALL_KEY

logger = file_logger(getLogger(__name__))


class CategoryService:
    """Category list served from the ``category`` partition under one key."""

    def __init__(self, repository: CategoryRepository, cache: ContentCache) -> None:
        self.repository = repository
        self.cache = cache

    async def list_all(self) -> list[CategoryResponse]:
        async def load() -> list[CategoryResponse]:
            return [CategoryResponse.model_validate(c) for c in await self.repository.list_ordered()]

        return await self.cache.get_or_create(CacheDivision.CATEGORY, ALL_KEY, load)

    async def create(self, category: CategoryCreate) -> CategoryResponse:
        """
        Create a category.

        Raises:
            DuplicateEntryError: If the route name is taken.
        """
        record = await self.repository.create(category)
        await self.repository.commit()
        logger.info(f"Category '{record.route_name}' created")

        await self.cache.remove(CacheDivision.CATEGORY, ALL_KEY)
        return CategoryResponse.model_validate(record)

    async def delete(self, category_id: UUID) -> None:
        """
        Delete a category; posts keep their other categories.

        Raises:
            RecordNotFoundError: If the category does not exist.
        """
        if not await self.repository.delete(category_id):
            raise RecordNotFoundError(f"Category with ID {category_id} not found")
        await self.repository.commit()
        logger.info(f"Category '{category_id}' deleted")

        await self.cache.remove(CacheDivision.CATEGORY, ALL_KEY)
