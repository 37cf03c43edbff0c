"""HTTP handlers for cache administration.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error responses.
"""

from fastapi import HTTPException, status

from ai_cache.config import settings
from ai_cache.dto import (
    CacheClearResponse,
    CacheStatsResponse,
    CleanupRequest,
    CleanupResponse,
    DeleteEntryRequest,
    DeleteEntryResponse,
    HealthCheckResponse,
    SimilarContentItem,
    SimilarContentRequest,
    SimilarContentResponse,
)
from ai_cache.services import AICacheService, CacheReaper


class CacheHandler:
    """HTTP handlers for cache administration.

    This handler delegates to AICacheService and handles HTTP-specific
    concerns like:
    - Converting entities to DTOs
    - Setting appropriate status codes
    - Error handling and responses

    Example:
        ```python
        handler = CacheHandler(cache_service=cache, reaper=reaper)

        @app.get("/stats", response_model=CacheStatsResponse)
        async def get_stats():
            return await handler.get_stats()
        ```
    """

    def __init__(self, cache_service: AICacheService, reaper: CacheReaper | None = None) -> None:
        """Initialize the cache handler.

        Args:
            cache_service: The cache to administer (required).
            reaper: The background reaper, reported by the health check.
        """
        self._cache = cache_service
        self._reaper = reaper

    async def get_stats(self) -> CacheStatsResponse:
        """Handle GET /stats requests.

        Raises:
            HTTPException: If an error occurs while fetching stats
        """
        try:
            stats = self._cache.get_stats()
            return CacheStatsResponse(**stats.to_dict())

        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to get stats: {e}",
            ) from e

    async def reset_stats(self) -> dict:
        """Handle POST /stats/reset requests."""
        self._cache.reset_stats()
        return {"message": "Cache statistics reset"}

    async def clear_cache(self) -> CacheClearResponse:
        """Handle DELETE /cache requests.

        Raises:
            HTTPException: If an error occurs while clearing
        """
        try:
            count = self._cache.clear()

            return CacheClearResponse(
                success=True,
                deleted_count=count,
                message="Cache cleared successfully",
            )

        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to clear cache: {e}",
            ) from e

    async def cleanup(self, request: CleanupRequest) -> CleanupResponse:
        """Handle POST /cache/cleanup requests.

        Raises:
            HTTPException: If an error occurs during the sweep
        """
        try:
            removed = self._cache.cleanup(force=request.force)
            return CleanupResponse(removed=removed, force=request.force)

        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to clean up cache: {e}",
            ) from e

    async def similar_content(self, request: SimilarContentRequest) -> SimilarContentResponse:
        """Handle POST /cache/similar requests.

        Raises:
            HTTPException: If an error occurs during the lookup
        """
        threshold = settings.similarity_threshold if request.threshold is None else request.threshold

        try:
            matches = self._cache.get_similar_content(request.content, threshold)

            return SimilarContentResponse(
                matches=[SimilarContentItem(content=m.content, similarity=m.similarity) for m in matches],
                threshold=threshold,
            )

        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to find similar content: {e}",
            ) from e

    async def delete_entry(self, request: DeleteEntryRequest) -> DeleteEntryResponse:
        """Handle POST /cache/entry/delete requests."""
        deleted = self._cache.delete(request.function_name, request.content, request.params)
        return DeleteEntryResponse(deleted=deleted)

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        return HealthCheckResponse(
            status="healthy",
            cache_size=len(self._cache),
            reaper_running=self._reaper is not None and self._reaper.is_running,
        )
