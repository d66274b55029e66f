from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class CacheStatisticsData(BaseModel):
    """Cache statistics model."""

    hits: int
    misses: int
    loads: int
    load_failures: int
    sets: int
    deletes: int
    evictions: int
    hit_rate: str
    total_requests: int
    created_at: str
    last_updated_at: str


class CacheStatsResponse(BaseModel):
    status: Literal["success", "error"]
    data: CacheStatisticsData


class CacheClearResponse(BaseModel):
    status: Literal["success", "error"]
    partition: str
    removed: int


class CacheResetStatsResponse(BaseModel):
    """Cache reset statistics response model."""

    status: Literal["success", "error"]
    message: str


class CacheHealthResponse(BaseModel):
    """Cache health response model (nested in HealthCheckResponse)."""

    model_config = ConfigDict(extra="allow")

    backend: str
    statistics: CacheStatisticsData
    status: str
    info: dict[str, Any] | None = None
    error: str | None = None


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    version: str = Field(description="API version")
    status: str = Field(description="Overall health status")
    timestamp: str = Field(description="Current timestamp")
    cache: CacheHealthResponse | None = Field(
        default=None,
        description="Cache health information",
    )
