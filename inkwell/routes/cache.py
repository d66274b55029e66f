"""Content cache administration."""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from inkwell.dependencies import CacheDep
from inkwell.errors.cache import UnknownCacheDivisionError
from inkwell.managers.cache_types import CacheDivision
from inkwell.schemas import CacheClearResponse, CacheResetStatsResponse, CacheStatsResponse

router = APIRouter(prefix="/cache", tags=["🗄️ Cache"])


@router.get(
    "/stats",
    response_model=CacheStatsResponse,
    summary="Get cache statistics",
    response_class=ORJSONResponse,
    operation_id="cache_stats",
)
async def get_cache_stats(cache: CacheDep) -> ORJSONResponse:
    response = CacheStatsResponse(status="success", data=cache.get_statistics())
    return ORJSONResponse(content=response.model_dump())


@router.get(
    "/reset-stats",
    response_model=CacheResetStatsResponse,
    summary="Reset cache statistics",
    response_class=ORJSONResponse,
    operation_id="cache_reset_stats",
)
async def reset_stats(cache: CacheDep) -> ORJSONResponse:
    """Zero the hit, miss and load counters; cached entries are kept."""
    cache.reset_statistics()
    response = CacheResetStatsResponse(status="success", message="Cache statistics reset")
    return ORJSONResponse(content=response.model_dump())


@router.delete(
    "/{partition}",
    response_model=CacheClearResponse,
    summary="Clear one cache partition",
    description=f"Partition is one of: {', '.join(d.value for d in CacheDivision)}.",
    response_class=ORJSONResponse,
    responses={
        404: {
            "description": "Unknown partition",
            "content": {"application/json": {"example": {"detail": "Unknown cache division: 'foo'"}}},
        },
    },
    operation_id="cache_clear_partition",
)
async def clear_partition(partition: str, cache: CacheDep) -> ORJSONResponse:
    """
    Remove every entry of a partition.

    Returns:
        Number of entries removed.
    """
    try:
        division = CacheDivision(partition.lower())
    except ValueError as e:
        raise UnknownCacheDivisionError(f"Unknown cache division: '{partition}'") from e

    removed = await cache.clear(division)
    response = CacheClearResponse(status="success", partition=division.value, removed=removed)
    return ORJSONResponse(content=response.model_dump())
