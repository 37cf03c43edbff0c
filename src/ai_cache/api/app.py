import logging
from typing import Any

from fastapi import FastAPI

from ai_cache.api.dependencies import HandlerDep, build_lifespan
from ai_cache.config import settings
from ai_cache.dto import (
    CacheClearResponse,
    CacheStatsResponse,
    CleanupRequest,
    CleanupResponse,
    DeleteEntryRequest,
    DeleteEntryResponse,
    HealthCheckResponse,
    SimilarContentRequest,
    SimilarContentResponse,
)
from ai_cache.services import AICacheService

API_VERSION = "0.1.0"


def create_app(
    cache_service: AICacheService | None = None,
    reaper_interval_ms: float | None = None,
) -> FastAPI:
    """Create the cache administration app.

    Args:
        cache_service: Cache instance to serve. If None, one is built at startup.
        reaper_interval_ms: Reaper interval override.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="AI Cache API",
        description="Administration API for the in-process AI response cache",
        version=API_VERSION,
        lifespan=build_lifespan(cache_service, reaper_interval_ms),
    )

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "AI Cache API",
            "version": API_VERSION,
            "endpoints": {
                "cache": "/cache",
                "stats": "/stats",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return await handler.health_check()

    @app.get("/stats", response_model=CacheStatsResponse)
    async def get_stats(handler: HandlerDep) -> CacheStatsResponse:
        """Get cache statistics."""
        return await handler.get_stats()

    @app.post("/stats/reset", response_model=dict[str, str])
    async def reset_stats(handler: HandlerDep) -> dict[str, str]:
        """Reset hit/miss counters."""
        return await handler.reset_stats()

    @app.delete("/cache", response_model=CacheClearResponse)
    async def clear_cache(handler: HandlerDep) -> CacheClearResponse:
        """Clear all entries from the cache."""
        return await handler.clear_cache()

    @app.post("/cache/cleanup", response_model=CleanupResponse)
    async def cleanup_cache(request: CleanupRequest, handler: HandlerDep) -> CleanupResponse:
        """Sweep expired entries, or everything when forced."""
        return await handler.cleanup(request)

    @app.post("/cache/similar", response_model=SimilarContentResponse)
    async def similar_content(request: SimilarContentRequest, handler: HandlerDep) -> SimilarContentResponse:
        """Find cached payloads with a similar content digest."""
        return await handler.similar_content(request)

    @app.post("/cache/entry/delete", response_model=DeleteEntryResponse)
    async def delete_entry(request: DeleteEntryRequest, handler: HandlerDep) -> DeleteEntryResponse:
        """Delete one cached result."""
        return await handler.delete_entry(request)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(
        "ai_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
