from uuid import UUID

from pydantic import Field, HttpUrl

from inkwell.schemas.base import CamelModel


class FriendLinkCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=64)
    link_url: HttpUrl


class FriendLinkResponse(CamelModel):
    id: UUID
    title: str
    link_url: str
