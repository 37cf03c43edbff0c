"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import CleanupRequest, DeleteEntryRequest, SimilarContentRequest
from .responses import (
    CacheClearResponse,
    CacheStatsResponse,
    CleanupResponse,
    DeleteEntryResponse,
    HealthCheckResponse,
    SimilarContentItem,
    SimilarContentResponse,
)

__all__ = [
    "CleanupRequest",
    "DeleteEntryRequest",
    "SimilarContentRequest",
    "CacheClearResponse",
    "CacheStatsResponse",
    "CleanupResponse",
    "DeleteEntryResponse",
    "HealthCheckResponse",
    "SimilarContentItem",
    "SimilarContentResponse",
]
