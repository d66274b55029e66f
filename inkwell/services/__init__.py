from inkwell.services.category import CategoryService
from inkwell.services.friend_link import FriendLinkService
from inkwell.services.page import PageService
from inkwell.services.post import PostService
from inkwell.services.tag import TagService

__all__ = ["CategoryService", "FriendLinkService", "PageService", "PostService", "TagService"]
