"""Blog post repository."""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import delete, func, select

from inkwell.errors.database import DuplicateEntryError
from inkwell.models import CategoryDB, PostCategoryLink, PostDB, PostTagLink, TagDB
from inkwell.repositories.base import BaseRepository
from inkwell.schemas.post import PostSaveModel


class PostRepository(BaseRepository[PostDB, PostSaveModel]):
    """
    Posts together with their tag and category assignments.

    Link rows are replaced wholesale on every save; the editor always submits
    the complete set of tags and categories.
    """

    model = PostDB

    async def get_published_by_slug(self, slug: str) -> PostDB | None:
        statement = select(PostDB).where(
            func.lower(PostDB.slug) == slug.lower(),
            PostDB.is_published.is_(True),  # type: ignore[attr-defined]
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_tags(self, post_id: UUID) -> list[TagDB]:
        statement = (
            select(TagDB)
            .join(PostTagLink, PostTagLink.tag_id == TagDB.id)
            .where(PostTagLink.post_id == post_id)
            .order_by(TagDB.display_name)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_category_ids(self, post_id: UUID) -> set[UUID]:
        statement = select(PostCategoryLink.category_id).where(PostCategoryLink.post_id == post_id)
        result = await self.session.execute(statement)
        return set(result.scalars().all())

    async def save_post(
        self,
        post: PostDB,
        tag_ids: Sequence[UUID],
        category_ids: Sequence[UUID],
    ) -> PostDB:
        """
        Insert or update a post and replace its links.

        Category ids that do not exist are ignored.

        Raises:
            DuplicateEntryError: If another post already uses the slug.
        """
        if await self._check_exists_by_field("slug", post.slug, exclude_id=post.id):
            raise DuplicateEntryError(f"Post with slug '{post.slug}' already exists")

        saved = await self._add_and_refresh(post)
        await self._clear_links(saved.id)

        known = await self._existing_category_ids(category_ids)
        self.session.add_all(PostTagLink(post_id=saved.id, tag_id=tag_id) for tag_id in dict.fromkeys(tag_ids))
        self.session.add_all(
            PostCategoryLink(post_id=saved.id, category_id=category_id)
            for category_id in dict.fromkeys(category_ids)
            if category_id in known
        )
        await self.session.flush()
        return saved

    async def delete(self, record_id: UUID) -> bool:
        """Delete a post and its link rows."""
        if not await self.exists(record_id):
            return False
        await self._clear_links(record_id)
        return await super().delete(record_id)

    async def _clear_links(self, post_id: UUID) -> None:
        await self.session.execute(delete(PostTagLink).where(PostTagLink.post_id == post_id))  # type: ignore[arg-type]
        await self.session.execute(
            delete(PostCategoryLink).where(PostCategoryLink.post_id == post_id),  # type: ignore[arg-type]
        )

    async def _existing_category_ids(self, category_ids: Sequence[UUID]) -> set[UUID]:
        if not category_ids:
            return set()
        statement = select(CategoryDB.id).where(CategoryDB.id.in_(category_ids))  # type: ignore[attr-defined]
        result = await self.session.execute(statement)
        return set(result.scalars().all())
