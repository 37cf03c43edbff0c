"""Response DTOs for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class CacheStatsResponse(BaseModel):
    """Response DTO for cache statistics."""

    hits: int = Field(..., description="Lookups that returned a fresh entry", ge=0)
    misses: int = Field(..., description="Lookups that found nothing usable", ge=0)
    total_requests: int = Field(..., description="hits + misses", ge=0)
    hit_rate: float = Field(..., description="Hit percentage", ge=0.0, le=100.0)
    hit_rate_status: str = Field(..., description="excellent, good, fair or poor")
    size: int = Field(..., description="Entries currently stored", ge=0)


class CacheClearResponse(BaseModel):
    """Response DTO for clearing the cache."""

    success: bool = Field(..., description="Whether the operation succeeded")
    deleted_count: int = Field(..., description="Number of entries removed", ge=0)
    message: str = Field(..., description="Human-readable status message")


class CleanupResponse(BaseModel):
    """Response DTO for a cleanup sweep."""

    removed: int = Field(..., description="Number of entries removed", ge=0)
    force: bool = Field(..., description="Whether the sweep was forced")


class SimilarContentItem(BaseModel):
    """Single similar content item (in matches array)."""

    content: Any = Field(..., description="The cached payload")
    similarity: float = Field(
        ...,
        description="Digest similarity (1 = identical digest)",
        ge=0.0,
        le=1.0,
    )


class SimilarContentResponse(BaseModel):
    """Response DTO for similar content lookup."""

    matches: list[SimilarContentItem] = Field(
        default_factory=list,
        description="Matches sorted by similarity, highest first",
    )
    threshold: float = Field(..., description="Threshold that was applied")


class DeleteEntryResponse(BaseModel):
    """Response DTO for deleting one cached result."""

    deleted: bool = Field(..., description="Whether an entry was removed")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy'")
    cache_size: int = Field(..., description="Entries currently stored", ge=0)
    reaper_running: bool = Field(..., description="Whether periodic cleanup is scheduled")
