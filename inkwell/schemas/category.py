from uuid import UUID

from pydantic import Field

from inkwell.schemas.base import SLUG_PATTERN, CamelModel


class CategoryCreate(CamelModel):
    display_name: str = Field(..., min_length=1, max_length=64)
    route_name: str = Field(..., min_length=1, max_length=64, pattern=SLUG_PATTERN)
    note: str | None = Field(default=None, max_length=128)


class CategoryResponse(CamelModel):
    id: UUID
    display_name: str
    route_name: str
    note: str | None = None
