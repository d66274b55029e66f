from inkwell.schemas.cache import (
    CacheClearResponse,
    CacheHealthResponse,
    CacheResetStatsResponse,
    CacheStatisticsData,
    CacheStatsResponse,
    HealthCheckResponse,
)
from inkwell.schemas.category import CategoryCreate, CategoryResponse
from inkwell.schemas.friend_link import FriendLinkCreate, FriendLinkResponse
from inkwell.schemas.indexnow import IndexNowRequest
from inkwell.schemas.page import (
    PageDeleteRequest,
    PageDetail,
    PageEditModel,
    PageSaveResponse,
    PageSegment,
    PageView,
)
from inkwell.schemas.post import (
    CategoryCheckBox,
    PostDetail,
    PostEditModel,
    PostEditView,
    PostSaveModel,
    PostSaveResponse,
)
from inkwell.schemas.tag import HotTag

__all__ = [
    "CacheClearResponse",
    "CacheHealthResponse",
    "CacheResetStatsResponse",
    "CacheStatisticsData",
    "CacheStatsResponse",
    "CategoryCheckBox",
    "CategoryCreate",
    "CategoryResponse",
    "FriendLinkCreate",
    "FriendLinkResponse",
    "HealthCheckResponse",
    "HotTag",
    "IndexNowRequest",
    "PageDeleteRequest",
    "PageDetail",
    "PageEditModel",
    "PageSaveResponse",
    "PageSegment",
    "PageView",
    "PostDetail",
    "PostEditModel",
    "PostEditView",
    "PostSaveModel",
    "PostSaveResponse",
]
