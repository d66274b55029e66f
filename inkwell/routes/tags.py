from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import ORJSONResponse

from inkwell.dependencies import TagServiceDep
from inkwell.schemas.tag import HotTag

router = APIRouter(prefix="/tags", tags=["🏷️ Tags"])


@router.get(
    "/hot",
    response_class=ORJSONResponse,
    response_model=list[HotTag],
    summary="Most used tags",
    description="Tags ordered by number of published posts. Defaults to HOT_TAG_AMOUNT entries.",
    operation_id="tags_hot",
)
async def hot_tags(
    service: TagServiceDep,
    amount: Annotated[int | None, Query(ge=1, le=100, description="Number of tags")] = None,
) -> list[HotTag]:
    return await service.hot_tags(amount)
