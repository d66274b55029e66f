"""Request-scoped dependencies wiring repositories, services and the cache."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.clients.indexnow_client import IndexNowClient
from inkwell.db import get_session
from inkwell.managers.content_cache import ContentCache
from inkwell.repositories import (
    CategoryRepository,
    FriendLinkRepository,
    PageRepository,
    PostRepository,
    TagRepository,
)
from inkwell.services import (
    CategoryService,
    FriendLinkService,
    PageService,
    PostService,
    TagService,
)
from inkwell.utils.helpers import static_route_segments

PAGE_ROUTE_PREFIX = "/page"

# Reserved alongside the route segments: the default document and the new-page editor
RESERVED_PAGE_NAMES = frozenset({"index", "create"})

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_content_cache(request: Request) -> ContentCache:
    """The content cache created by the application lifespan."""
    return request.app.state.content_cache


CacheDep = Annotated[ContentCache, Depends(get_content_cache)]


def get_indexnow_client() -> IndexNowClient:
    return IndexNowClient()


IndexNowDep = Annotated[IndexNowClient, Depends(get_indexnow_client)]


def get_reserved_page_slugs(request: Request) -> frozenset[str]:
    """
    Slugs a custom page may not use because a page route already owns them.

    Every literal segment of the page routes plus ``RESERVED_PAGE_NAMES``,
    computed from the mounted routes on first use and kept on app state.
    """
    state = request.app.state
    reserved: frozenset[str] | None = getattr(state, "reserved_page_slugs", None)
    if reserved is None:
        reserved = static_route_segments(request.app.routes, PAGE_ROUTE_PREFIX) | RESERVED_PAGE_NAMES
        state.reserved_page_slugs = reserved
    return reserved


def get_page_service(
    session: SessionDep,
    cache: CacheDep,
    reserved: Annotated[frozenset[str], Depends(get_reserved_page_slugs)],
) -> PageService:
    return PageService(PageRepository(session), cache, reserved_slugs=reserved)


def get_post_service(session: SessionDep, cache: CacheDep) -> PostService:
    return PostService(
        PostRepository(session),
        TagRepository(session),
        CategoryRepository(session),
        cache,
    )


def get_tag_service(session: SessionDep, cache: CacheDep) -> TagService:
    return TagService(TagRepository(session), cache)


def get_category_service(session: SessionDep, cache: CacheDep) -> CategoryService:
    return CategoryService(CategoryRepository(session), cache)


def get_friend_link_service(session: SessionDep, cache: CacheDep) -> FriendLinkService:
    return FriendLinkService(FriendLinkRepository(session), cache)


PageServiceDep = Annotated[PageService, Depends(get_page_service)]
PostServiceDep = Annotated[PostService, Depends(get_post_service)]
TagServiceDep = Annotated[TagService, Depends(get_tag_service)]
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
FriendLinkServiceDep = Annotated[FriendLinkService, Depends(get_friend_link_service)]
