from inkwell.repositories.base import BaseRepository
from inkwell.repositories.category import CategoryRepository
from inkwell.repositories.friend_link import FriendLinkRepository
from inkwell.repositories.page import PageRepository
from inkwell.repositories.post import PostRepository
from inkwell.repositories.tag import TagRepository, normalize_tag_name

__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "FriendLinkRepository",
    "PageRepository",
    "PostRepository",
    "TagRepository",
    "normalize_tag_name",
]
