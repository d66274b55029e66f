from inkwell.dependencies.dependencies import (
    PAGE_ROUTE_PREFIX,
    CacheDep,
    CategoryServiceDep,
    FriendLinkServiceDep,
    IndexNowDep,
    PageServiceDep,
    PostServiceDep,
    SessionDep,
    TagServiceDep,
    get_content_cache,
    get_indexnow_client,
    get_reserved_page_slugs,
    get_session,
)

__all__ = [
    "PAGE_ROUTE_PREFIX",
    "CacheDep",
    "CategoryServiceDep",
    "FriendLinkServiceDep",
    "IndexNowDep",
    "PageServiceDep",
    "PostServiceDep",
    "SessionDep",
    "TagServiceDep",
    "get_content_cache",
    "get_indexnow_client",
    "get_reserved_page_slugs",
    "get_session",
]
