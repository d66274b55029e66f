"""
Blog Post Routes.

Public reads go through the ``post`` partition of the content cache; the
admin editor endpoints write through the service, which invalidates the
affected entries. Publishing a post pings IndexNow in the background.
"""

from logging import getLogger
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Path, Query
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_204_NO_CONTENT

from inkwell.clients.indexnow_client import IndexNowClient
from inkwell.configs import file_logger
from inkwell.dependencies import IndexNowDep, PostServiceDep
from inkwell.errors.indexnow import IndexNowError
from inkwell.schemas.base import SLUG_PATTERN
from inkwell.schemas.post import PostDetail, PostEditView, PostSaveModel, PostSaveResponse

router = APIRouter(prefix="/post", tags=["📝 Posts"])
admin_router = APIRouter(prefix="/admin/post", tags=["📝 Posts"])

logger = file_logger(getLogger(__name__))

_NOT_FOUND = {
    "description": "Not found",
    "content": {"application/json": {"example": {"detail": "Post 'hello-world' not found"}}},
}


async def ping_indexnow(client: IndexNowClient, url: str) -> None:
    """Background task notifying search engines about a published post."""
    try:
        await client.send_request(url)
    except IndexNowError:
        logger.exception(f"IndexNow ping failed for {url}")


@router.get(
    "/{slug}",
    response_class=ORJSONResponse,
    response_model=PostDetail,
    summary="Read a post",
    responses={404: _NOT_FOUND},
    operation_id="posts_get_by_slug",
)
async def get_post(
    slug: Annotated[str, Path(pattern=SLUG_PATTERN, max_length=128)],
    service: PostServiceDep,
) -> PostDetail:
    return await service.get_published(slug)


@admin_router.get(
    "/edit",
    response_class=ORJSONResponse,
    response_model=PostEditView,
    summary="Load the post editor",
    description="Editor defaults for a new post, or the stored post when `id` is given.",
    responses={404: _NOT_FOUND},
    operation_id="posts_editor",
)
async def edit_post(
    service: PostServiceDep,
    post_id: Annotated[UUID | None, Query(alias="id", description="Post to edit")] = None,
) -> PostEditView:
    return await service.get_editor(post_id)


@admin_router.post(
    "/save",
    response_class=ORJSONResponse,
    response_model=PostSaveResponse,
    summary="Create or update a post",
    responses={
        404: _NOT_FOUND,
        409: {
            "description": "Slug taken",
            "content": {
                "application/json": {"example": {"detail": "Post with slug 'hello-world' already exists"}},
            },
        },
    },
    operation_id="posts_save",
)
async def save_post(
    post: PostSaveModel,
    service: PostServiceDep,
    indexnow: IndexNowDep,
    background_tasks: BackgroundTasks,
) -> PostSaveResponse:
    """
    Save a post from the editor.

    Parameters
    ----------
    post : PostSaveModel
        Editor payload; ``postId`` is omitted for new posts.
    service : PostService
        Post service dependency.
    indexnow : IndexNowClient
        Client used for the background ping.
    background_tasks : BackgroundTasks
        Queue for the IndexNow ping.

    Returns
    -------
    PostSaveResponse
        Id of the saved post.
    """
    saved = await service.save(post)

    if saved.is_published and (url := service.post_url(saved)):
        background_tasks.add_task(ping_indexnow, indexnow, url)

    return PostSaveResponse(post_id=saved.id)


@admin_router.delete(
    "/{post_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete a post",
    responses={404: _NOT_FOUND},
    operation_id="posts_delete",
)
async def delete_post(post_id: UUID, service: PostServiceDep) -> Response:
    await service.delete(post_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
