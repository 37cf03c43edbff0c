"""Background reaper for expired cache entries.

Runs as an asyncio task on the host's event loop, so a sweep never
overlaps a `get`/`set` in progress. Without a running loop the reaper is
simply not scheduled and the cache falls back to lazy expiration.
"""

import asyncio
import contextlib
import logging

from ai_cache.config import settings
from ai_cache.services.cache_service import AICacheService

logger = logging.getLogger(__name__)


class CacheReaper:
    """Periodically sweeps expired entries out of an AICacheService.

    Example:
        ```python
        reaper = CacheReaper(cache)
        reaper.start()  # inside a running event loop
        ...
        await reaper.stop()
        ```
    """

    def __init__(self, cache: AICacheService, interval_ms: float | None = None) -> None:
        """Initialize the reaper.

        Args:
            cache: The cache to sweep.
            interval_ms: Sweep interval in milliseconds. Defaults to settings.
        """
        self._cache = cache
        self._interval_ms = settings.cleanup_interval_ms if interval_ms is None else interval_ms
        self._task: asyncio.Task | None = None

        if self._interval_ms <= 0:
            raise ValueError("interval_ms must be positive")

    def sweep(self) -> int:
        """Run one sweep of expired entries."""
        return self._cache.cleanup()

    def start(self) -> bool:
        """Schedule the sweep loop on the running event loop.

        Returns:
            True if scheduled (or already running), False if no loop is running
        """
        if self.is_running:
            return True

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning("No running event loop, periodic cache cleanup disabled")
            return False

        self._task = loop.create_task(self._run())
        logger.info("Cache reaper started (interval %.0f ms)", self._interval_ms)
        return True

    async def stop(self) -> None:
        """Cancel the sweep loop and wait for it to finish."""
        if self._task is None:
            return

        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Cache reaper stopped")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval_ms / 1000)
            try:
                self.sweep()
            except Exception:
                logger.exception("Cache reaper sweep failed")

    @property
    def interval_ms(self) -> float:
        """Get the sweep interval in milliseconds."""
        return self._interval_ms

    @property
    def is_running(self) -> bool:
        """Whether the sweep loop is scheduled and not finished."""
        return self._task is not None and not self._task.done()
