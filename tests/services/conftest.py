"""Fixtures for service tests: mocked repositories over a real content cache."""

from datetime import UTC, datetime
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from inkwell.configs import CacheConfig
from inkwell.managers.content_cache import ContentCache
from inkwell.models import PageDB
from inkwell.repositories import (
    CategoryRepository,
    FriendLinkRepository,
    PageRepository,
    PostRepository,
    TagRepository,
)


@pytest.fixture
def content_cache() -> ContentCache:
    return ContentCache(CacheConfig())


@pytest.fixture
def page_repo() -> MagicMock:
    return MagicMock(spec=PageRepository)


@pytest.fixture
def post_repo() -> MagicMock:
    return MagicMock(spec=PostRepository)


@pytest.fixture
def tag_repo() -> MagicMock:
    return MagicMock(spec=TagRepository)


@pytest.fixture
def category_repo() -> MagicMock:
    return MagicMock(spec=CategoryRepository)


@pytest.fixture
def friend_link_repo() -> MagicMock:
    return MagicMock(spec=FriendLinkRepository)


@pytest.fixture
def about_page() -> PageDB:
    return PageDB(
        id=uuid4(),
        title="About",
        slug="about",
        raw_html_content="<p>About me</p>",
        css_content="  h1 { color: red; }  ",
        is_published=True,
        created_at=datetime(2026, 1, 1, tzinfo=UTC),
    )
