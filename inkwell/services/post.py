"""Blog post service: cached reads, the admin editor and saves."""

import re
from logging import getLogger
from uuid import UUID

from inkwell.configs import file_logger, settings
from inkwell.errors.content import ContentNotFoundError
from inkwell.errors.database import RecordNotFoundError
from inkwell.managers.cache_types import CacheDivision
from inkwell.managers.content_cache import ContentCache
from inkwell.models import PostDB
from inkwell.models.page import utc_now
from inkwell.repositories import CategoryRepository, PostRepository, TagRepository
from inkwell.schemas.post import (
    ABSTRACT_ELLIPSIS,
    CategoryCheckBox,
    PostDetail,
    PostEditModel,
    PostEditView,
    PostSaveModel,
)
from inkwell.utils.cache_keys import post_slug_key
from inkwell.utils.timezone import to_timezone, to_utc

logger = file_logger(getLogger(__name__))

ABSTRACT_WORDS = 64
_TAG_RE = re.compile(r"<[^>]+>")


def build_abstract(content: str, words: int = ABSTRACT_WORDS) -> str:
    """Plain-text excerpt of the post body, marked when truncated."""
    text = _TAG_RE.sub(" ", content).split()
    if len(text) <= words:
        return " ".join(text)
    return " ".join(text[:words]) + ABSTRACT_ELLIPSIS


class PostService:
    """Posts with their tags and categories."""

    def __init__(
        self,
        repository: PostRepository,
        tags: TagRepository,
        categories: CategoryRepository,
        cache: ContentCache,
    ) -> None:
        self.repository = repository
        self.tags = tags
        self.categories = categories
        self.cache = cache

    async def get_published(self, slug: str) -> PostDetail:
        """
        Return a published post by slug through the ``post`` partition.

        Raises:
            ContentNotFoundError: If no published post has this slug.
        """

        async def load() -> PostDetail | None:
            record = await self.repository.get_published_by_slug(slug)
            if record is None:
                return None
            tags = await self.repository.get_tags(record.id)
            return PostDetail.model_validate(record).model_copy(
                update={"tags": [t.display_name for t in tags]},
            )

        post = await self.cache.get_or_create(CacheDivision.POST, post_slug_key(slug), load)
        if post is None:
            logger.warning(f"Post not found. slug: '{slug}'")
            raise ContentNotFoundError(f"Post '{slug}' not found")
        return post

    async def get_editor(self, post_id: UUID | None = None) -> PostEditView:
        """
        Build the post editor.

        Without an id the editor starts a new post owned by the blog owner,
        with every category unchecked.

        Raises:
            ContentNotFoundError: If ``post_id`` does not exist.
        """
        categories = await self.categories.list_ordered()

        if post_id is None:
            view_model = PostEditModel(
                is_outdated=False,
                is_published=False,
                featured=False,
                enable_comment=True,
                feed_included=True,
                author=settings.BLOG_OWNER_NAME,
            )
            checked: set[UUID] = set()
        else:
            post = await self.repository.get_by_id(post_id)
            if post is None:
                raise ContentNotFoundError(f"Post with ID {post_id} not found")

            tags = await self.repository.get_tags(post.id)
            checked = await self.repository.get_category_ids(post.id)
            view_model = PostEditModel(
                post_id=post.id,
                is_published=post.is_published,
                editor_content=post.post_content,
                author=post.author,
                slug=post.slug,
                title=post.title,
                enable_comment=post.comment_enabled,
                feed_included=post.is_feed_included,
                language_code=post.content_language_code,
                abstract=post.content_abstract.replace(ABSTRACT_ELLIPSIS, ""),
                featured=post.is_featured,
                origin_link=post.origin_link,
                hero_image_url=post.hero_image_url,
                is_outdated=post.is_outdated,
                publish_date=(
                    to_timezone(post.pub_date_utc, settings.BLOG_TIMEZONE) if post.pub_date_utc else None
                ),
                tags=",".join(t.display_name for t in tags),
            )

        category_list = [
            CategoryCheckBox(id=c.id, display_text=c.display_name, is_checked=c.id in checked)
            for c in categories
        ]
        return PostEditView(view_model=view_model, category_list=category_list)

    async def save(self, model: PostSaveModel) -> PostDB:
        """
        Create or update a post from the editor.

        Removes the cached entries of the old and new slug and clears the
        ``tag`` partition, since hot tag counts may have changed.

        Raises:
            RecordNotFoundError: If ``post_id`` is set but does not exist.
            DuplicateEntryError: If another post uses the slug.
        """
        old_slug: str | None = None
        if model.post_id is None:
            post = PostDB(title=model.title, slug=model.slug)
        else:
            existing = await self.repository.get_by_id(model.post_id)
            if existing is None:
                raise RecordNotFoundError(f"Post with ID {model.post_id} not found")
            post, old_slug = existing, existing.slug
            post.updated_at = utc_now()

        self._apply(post, model)
        tags = await self.tags.get_or_create_by_names(model.tag_names())
        saved = await self.repository.save_post(
            post,
            tag_ids=[t.id for t in tags],
            category_ids=model.selected_category_ids,
        )
        await self.repository.commit()
        logger.info(f"Post '{saved.id}' saved with slug '{saved.slug}'")

        await self._invalidate(saved.slug, old_slug)
        return saved

    async def delete(self, post_id: UUID) -> None:
        """
        Delete a post.

        Raises:
            RecordNotFoundError: If the post does not exist.
        """
        post = await self.repository.get_or_raise(post_id)
        slug = post.slug
        await self.repository.delete(post_id)
        await self.repository.commit()
        logger.info(f"Post '{post_id}' deleted")

        await self._invalidate(slug)

    async def _invalidate(self, slug: str, old_slug: str | None = None) -> None:
        keys = {post_slug_key(slug)}
        if old_slug is not None:
            keys.add(post_slug_key(old_slug))
        for key in keys:
            await self.cache.remove(CacheDivision.POST, key)
        await self.cache.clear(CacheDivision.TAG)

    @staticmethod
    def _apply(post: PostDB, model: PostSaveModel) -> None:
        """Copy editor fields onto the row."""
        post.title = model.title
        post.slug = model.slug
        post.author = model.author or settings.BLOG_OWNER_NAME
        post.post_content = model.editor_content
        post.content_abstract = (
            model.abstract.strip() + ABSTRACT_ELLIPSIS
            if model.abstract.strip()
            else build_abstract(model.editor_content)
        )
        post.content_language_code = model.language_code
        post.origin_link = model.origin_link
        post.hero_image_url = model.hero_image_url
        post.comment_enabled = model.enable_comment
        post.is_feed_included = model.feed_included
        post.is_featured = model.featured
        post.is_outdated = model.is_outdated
        post.is_published = model.is_published

        if model.publish_date is not None:
            post.pub_date_utc = to_utc(model.publish_date, settings.BLOG_TIMEZONE)
        elif model.is_published and post.pub_date_utc is None:
            post.pub_date_utc = utc_now()

    @staticmethod
    def post_url(post: PostDB) -> str | None:
        """Public URL of a post, or None when SITE_URL is not configured."""
        if not settings.SITE_URL:
            return None
        return f"{settings.SITE_URL.rstrip('/')}/post/{post.slug}"
