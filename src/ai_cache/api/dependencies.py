"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - The lifespan is the composition root: it owns the one cache instance
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from ai_cache.handlers import CacheHandler
from ai_cache.services import AICacheService, CacheReaper

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> CacheHandler:
    """Dependency injection for CacheHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "cache_handler", None)
    if handler is None:
        raise RuntimeError("CacheHandler not initialized. Check lifespan setup.")
    return handler


def build_lifespan(
    cache_service: AICacheService | None = None,
    reaper_interval_ms: float | None = None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Build the lifespan context manager for the FastAPI app.

    Args:
        cache_service: Cache to serve. If None, one is created at startup.
        reaper_interval_ms: Reaper interval. If None, uses settings.

    Returns:
        A lifespan callable for FastAPI(lifespan=...)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize all layers and store them in app.state.

        1. Service (business logic) - app.state.cache_service
        2. Reaper (periodic cleanup) - app.state.cache_reaper
        3. Handler (HTTP endpoints) - app.state.cache_handler
        """
        service = cache_service if cache_service is not None else AICacheService.create()
        reaper = CacheReaper(service, interval_ms=reaper_interval_ms)
        reaper.start()

        app.state.cache_service = service
        app.state.cache_reaper = reaper
        app.state.cache_handler = CacheHandler(cache_service=service, reaper=reaper)

        logger.info(
            "AI cache initialized (max_entries=%d, default_ttl_ms=%.0f)",
            service.max_entries,
            service.default_ttl_ms,
        )

        yield

        await reaper.stop()

        # Cleanup - remove from app.state
        del app.state.cache_handler
        del app.state.cache_reaper
        del app.state.cache_service
        logger.info("AI cache shut down")

    return lifespan


# Type alias for cleaner dependency injection
HandlerDep = Annotated[CacheHandler, Depends(get_handler)]
