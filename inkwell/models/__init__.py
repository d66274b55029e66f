"""Database models for the application."""

from inkwell.models.category import CategoryDB
from inkwell.models.friend_link import FriendLinkDB
from inkwell.models.page import PageDB
from inkwell.models.post import PostCategoryLink, PostDB, PostTagLink
from inkwell.models.tag import TagDB

__all__ = [
    "CategoryDB",
    "FriendLinkDB",
    "PageDB",
    "PostCategoryLink",
    "PostDB",
    "PostTagLink",
    "TagDB",
]
