"""Tests for the blog post service and its editor."""

from datetime import UTC, datetime
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from inkwell.configs import settings
from inkwell.errors import ContentNotFoundError, RecordNotFoundError
from inkwell.managers.cache_types import CacheDivision
from inkwell.managers.content_cache import ContentCache
from inkwell.models import CategoryDB, PostDB, TagDB
from inkwell.schemas.post import ABSTRACT_ELLIPSIS, PostSaveModel
from inkwell.services import PostService
from inkwell.services.post import build_abstract


@pytest.fixture
def service(
    post_repo: MagicMock,
    tag_repo: MagicMock,
    category_repo: MagicMock,
    content_cache: ContentCache,
) -> PostService:
    return PostService(post_repo, tag_repo, category_repo, content_cache)


@pytest.fixture
def categories() -> list[CategoryDB]:
    return [
        CategoryDB(id=uuid4(), display_name="News", route_name="news"),
        CategoryDB(id=uuid4(), display_name="Tech", route_name="tech"),
    ]


@pytest.fixture
def stored_post() -> PostDB:
    return PostDB(
        id=uuid4(),
        title="Hello",
        slug="hello",
        author="Jane",
        post_content="<p>Hello world</p>",
        content_abstract="Hello world" + ABSTRACT_ELLIPSIS,
        is_published=True,
        is_featured=True,
        pub_date_utc=datetime(2026, 2, 13, 15, 0, tzinfo=UTC),
    )


class TestEditor:
    async def test_new_post_defaults(
        self,
        service: PostService,
        category_repo: MagicMock,
        categories: list[CategoryDB],
    ) -> None:
        category_repo.list_ordered.return_value = categories

        editor = await service.get_editor()

        vm = editor.view_model
        assert vm.post_id is None
        assert vm.author == settings.BLOG_OWNER_NAME
        assert (vm.is_published, vm.is_outdated, vm.featured) == (False, False, False)
        assert (vm.enable_comment, vm.feed_included) == (True, True)
        assert [c.display_text for c in editor.category_list] == ["News", "Tech"]
        assert not any(c.is_checked for c in editor.category_list)

    async def test_existing_post(
        self,
        service: PostService,
        post_repo: MagicMock,
        category_repo: MagicMock,
        categories: list[CategoryDB],
        stored_post: PostDB,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(settings, "BLOG_TIMEZONE", "Asia/Makassar")
        category_repo.list_ordered.return_value = categories
        post_repo.get_by_id.return_value = stored_post
        post_repo.get_tags.return_value = [
            TagDB(display_name="Python", normalized_name="python"),
            TagDB(display_name="Web Dev", normalized_name="web-dev"),
        ]
        post_repo.get_category_ids.return_value = {categories[1].id}

        editor = await service.get_editor(stored_post.id)

        vm = editor.view_model
        assert vm.post_id == stored_post.id
        assert vm.abstract == "Hello world"
        assert vm.editor_content == "<p>Hello world</p>"
        assert vm.tags == "Python,Web Dev"
        assert vm.featured is True
        assert vm.publish_date is not None
        assert vm.publish_date.hour == 23
        assert [c.is_checked for c in editor.category_list] == [False, True]

    async def test_unknown_post(self, service: PostService, post_repo: MagicMock, category_repo: MagicMock) -> None:
        category_repo.list_ordered.return_value = []
        post_repo.get_by_id.return_value = None
        with pytest.raises(ContentNotFoundError):
            await service.get_editor(uuid4())


class TestGetPublished:
    async def test_cached_with_tags(self, service: PostService, post_repo: MagicMock, stored_post: PostDB) -> None:
        post_repo.get_published_by_slug.return_value = stored_post
        post_repo.get_tags.return_value = [TagDB(display_name="Python", normalized_name="python")]

        first = await service.get_published("Hello")
        second = await service.get_published("hello")

        assert first.tags == ["Python"]
        assert first == second
        post_repo.get_published_by_slug.assert_awaited_once()

    async def test_missing(self, service: PostService, post_repo: MagicMock) -> None:
        post_repo.get_published_by_slug.return_value = None
        with pytest.raises(ContentNotFoundError):
            await service.get_published("missing")


class TestSave:
    async def test_create_post(
        self,
        service: PostService,
        post_repo: MagicMock,
        tag_repo: MagicMock,
        content_cache: ContentCache,
    ) -> None:
        tag = TagDB(id=uuid4(), display_name="Python", normalized_name="python")
        tag_repo.get_or_create_by_names.return_value = [tag]
        post_repo.save_post.side_effect = lambda post, **_: post
        await content_cache.get_or_create(CacheDivision.TAG, "hot-10", lambda: _value([]))

        model = PostSaveModel(
            title="Hello",
            slug="Hello",
            editor_content="<p>Hello <b>world</b></p>",
            tags="Python, python ,",
            is_published=True,
        )
        saved = await service.save(model)

        assert saved.slug == "hello"
        assert saved.content_abstract == "Hello world"
        assert saved.pub_date_utc is not None
        assert saved.author == settings.BLOG_OWNER_NAME
        tag_repo.get_or_create_by_names.assert_awaited_once_with(["Python"])
        assert post_repo.save_post.await_args.kwargs["tag_ids"] == [tag.id]
        post_repo.commit.assert_awaited_once()
        assert await content_cache.contains(CacheDivision.TAG, "hot-10") is False

    async def test_update_invalidates_old_slug(
        self,
        service: PostService,
        post_repo: MagicMock,
        tag_repo: MagicMock,
        content_cache: ContentCache,
        stored_post: PostDB,
    ) -> None:
        post_repo.get_by_id.return_value = stored_post
        post_repo.save_post.side_effect = lambda post, **_: post
        tag_repo.get_or_create_by_names.return_value = []
        await content_cache.get_or_create(CacheDivision.POST, "hello", lambda: _value("old"))

        model = PostSaveModel(
            post_id=stored_post.id,
            title="Hello again",
            slug="hello-again",
            editor_content="<p>Updated</p>",
            abstract="Short",
            is_published=True,
        )
        saved = await service.save(model)

        assert saved.slug == "hello-again"
        assert saved.content_abstract == "Short" + ABSTRACT_ELLIPSIS
        assert saved.pub_date_utc == datetime(2026, 2, 13, 15, 0, tzinfo=UTC)
        assert await content_cache.contains(CacheDivision.POST, "hello") is False

    async def test_update_missing(self, service: PostService, post_repo: MagicMock) -> None:
        post_repo.get_by_id.return_value = None
        model = PostSaveModel(post_id=uuid4(), title="x", slug="x", editor_content="x")
        with pytest.raises(RecordNotFoundError):
            await service.save(model)

    def test_post_url(self, stored_post: PostDB, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "SITE_URL", None)
        assert PostService.post_url(stored_post) is None
        monkeypatch.setattr(settings, "SITE_URL", "https://blog.example/")
        assert PostService.post_url(stored_post) == "https://blog.example/post/hello"


class TestDelete:
    async def test_delete_invalidates(
        self,
        service: PostService,
        post_repo: MagicMock,
        content_cache: ContentCache,
        stored_post: PostDB,
    ) -> None:
        post_repo.get_or_raise.return_value = stored_post
        await content_cache.get_or_create(CacheDivision.POST, "hello", lambda: _value("cached"))

        await service.delete(stored_post.id)

        post_repo.delete.assert_awaited_once_with(stored_post.id)
        assert await content_cache.contains(CacheDivision.POST, "hello") is False


def test_build_abstract_truncates() -> None:
    content = "<p>" + " ".join(f"w{i}" for i in range(100)) + "</p>"
    abstract = build_abstract(content, words=3)
    assert abstract == "w0 w1 w2" + ABSTRACT_ELLIPSIS


async def _value(value: object) -> object:
    return value
