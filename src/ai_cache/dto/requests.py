"""Request DTOs for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class CleanupRequest(BaseModel):
    """Request DTO for a manual cleanup sweep."""

    force: bool = Field(False, description="Remove every entry, not only expired ones")


class SimilarContentRequest(BaseModel):
    """Request DTO for similar content lookup.

    The handler will convert this to internal calls to the service layer.
    """

    content: str = Field(..., description="The target content", min_length=1)
    threshold: float | None = Field(
        None,
        description="Override the default similarity threshold (0-1, higher = more strict)",
        ge=0.0,
        le=1.0,
    )


class DeleteEntryRequest(BaseModel):
    """Request DTO for deleting one cached result."""

    function_name: str = Field(..., description="Logical AI function name", min_length=1)
    content: str = Field(..., description="The input content of the cached call")
    params: dict[str, Any] | None = Field(None, description="Call parameters used when caching")
