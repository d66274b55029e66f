"""Category repository."""

from sqlalchemy import select

from inkwell.errors.database import DuplicateEntryError
from inkwell.models import CategoryDB
from inkwell.repositories.base import BaseRepository
from inkwell.schemas.category import CategoryCreate


class CategoryRepository(BaseRepository[CategoryDB, CategoryCreate]):
    model = CategoryDB

    async def list_ordered(self) -> list[CategoryDB]:
        """All categories sorted by display name."""
        result = await self.session.execute(select(CategoryDB).order_by(CategoryDB.display_name))
        return list(result.scalars().all())

    async def create(self, schema: CategoryCreate, **extra: object) -> CategoryDB:
        """
        Insert a category.

        Raises:
            DuplicateEntryError: If the route name is taken.
        """
        route_name = schema.route_name.lower()
        if await self._check_exists_by_field("route_name", route_name):
            raise DuplicateEntryError(f"Category with route name '{route_name}' already exists")
        return await super().create(schema, route_name=route_name, **extra)
