"""Service layer for business logic.

This layer contains the core caching logic and its background upkeep.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from ai_cache.services import AICacheService, CacheReaper

    # Using factory method (recommended)
    cache = AICacheService.create()
    cache = AICacheService.create(max_entries=500)

    # Or manual creation
    cache = AICacheService(repository=repo, clock=clock)
    ```
"""

from .cache_service import AICacheService
from .reaper import CacheReaper

__all__ = [
    "AICacheService",
    "CacheReaper",
]
