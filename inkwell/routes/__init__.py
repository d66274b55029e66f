from inkwell.routes.cache import router as cache_router
from inkwell.routes.categories import router as categories_router
from inkwell.routes.friend_links import router as friend_links_router
from inkwell.routes.pages import router as pages_router
from inkwell.routes.posts import admin_router as admin_posts_router
from inkwell.routes.posts import router as posts_router
from inkwell.routes.tags import router as tags_router

__all__ = [
    "admin_posts_router",
    "cache_router",
    "categories_router",
    "friend_links_router",
    "pages_router",
    "posts_router",
    "tags_router",
]
