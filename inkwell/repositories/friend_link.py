"""Friend link repository."""

from sqlalchemy import select

from inkwell.models import FriendLinkDB
from inkwell.repositories.base import BaseRepository
from inkwell.schemas.friend_link import FriendLinkCreate


class FriendLinkRepository(BaseRepository[FriendLinkDB, FriendLinkCreate]):
    model = FriendLinkDB

    async def list_ordered(self) -> list[FriendLinkDB]:
        result = await self.session.execute(select(FriendLinkDB).order_by(FriendLinkDB.title))
        return list(result.scalars().all())
