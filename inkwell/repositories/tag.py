"""Tag repository."""

from collections.abc import Iterable

from sqlalchemy import func, select

from inkwell.models import PostDB, PostTagLink, TagDB
from inkwell.repositories.base import BaseRepository
from inkwell.schemas.tag import HotTag


def normalize_tag_name(display_name: str) -> str:
    """URL form of a tag: lower-cased words joined by hyphens."""
    return "-".join(display_name.lower().split())


class TagRepository(BaseRepository[TagDB, HotTag]):
    model = TagDB

    async def get_or_create_by_names(self, names: Iterable[str]) -> list[TagDB]:
        """
        Resolve display names to tags, inserting the ones that do not exist.

        Names that normalize to the same value resolve to a single tag.
        """
        by_normalized: dict[str, str] = {}
        for name in names:
            by_normalized.setdefault(normalize_tag_name(name), name.strip())
        by_normalized.pop("", None)
        if not by_normalized:
            return []

        statement = select(TagDB).where(TagDB.normalized_name.in_(by_normalized))  # type: ignore[attr-defined]
        result = await self.session.execute(statement)
        existing = {tag.normalized_name: tag for tag in result.scalars().all()}

        tags: list[TagDB] = []
        for normalized, display in by_normalized.items():
            tag = existing.get(normalized)
            if tag is None:
                tag = await self._add_and_refresh(
                    TagDB(display_name=display, normalized_name=normalized),
                )
            tags.append(tag)
        return tags

    async def hot_tags(self, amount: int) -> list[HotTag]:
        """
        Tags ordered by how many published posts carry them.

        Args:
            amount: Maximum number of tags to return.
        """
        post_count = func.count(PostTagLink.post_id).label("post_count")
        statement = (
            select(TagDB.display_name, TagDB.normalized_name, post_count)
            .join(PostTagLink, PostTagLink.tag_id == TagDB.id)
            .join(PostDB, PostDB.id == PostTagLink.post_id)
            .where(PostDB.is_published.is_(True))  # type: ignore[attr-defined]
            .group_by(TagDB.id, TagDB.display_name, TagDB.normalized_name)
            .order_by(post_count.desc(), TagDB.normalized_name)
            .limit(amount)
        )
        result = await self.session.execute(statement)
        return [
            HotTag(display_name=row.display_name, normalized_name=row.normalized_name, post_count=row.post_count)
            for row in result.all()
        ]
