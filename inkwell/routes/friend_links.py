from uuid import UUID

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from inkwell.dependencies import FriendLinkServiceDep
from inkwell.schemas.friend_link import FriendLinkCreate, FriendLinkResponse

router = APIRouter(prefix="/friendlinks", tags=["🔗 Friend Links"])


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[FriendLinkResponse],
    summary="List friend links",
    operation_id="friend_links_list",
)
async def list_friend_links(service: FriendLinkServiceDep) -> list[FriendLinkResponse]:
    return await service.list_all()


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=FriendLinkResponse,
    status_code=HTTP_201_CREATED,
    summary="Add a friend link",
    operation_id="friend_links_create",
)
async def create_friend_link(link: FriendLinkCreate, service: FriendLinkServiceDep) -> FriendLinkResponse:
    return await service.create(link)


@router.delete(
    "/{link_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete a friend link",
    description="Deleting an unknown link is not an error.",
    operation_id="friend_links_delete",
)
async def delete_friend_link(link_id: UUID, service: FriendLinkServiceDep) -> Response:
    await service.delete(link_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
