"""AI Cache - in-process caching of AI completion results.

This package provides a layered architecture for caching:

Layers:
    - protocols: Interface contracts (CacheStore, Clock)
    - repositories: Entry storage implementations
    - services: Business logic (AICacheService, CacheReaper)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from ai_cache.services import AICacheService

    cache = AICacheService.create()
    cache.set("polish_text", text, result, ttl_ms=60 * 60 * 1000)
    cache.get("polish_text", text)
    ```

For HTTP API:
    ```python
    from ai_cache.api.app import app
    ```
"""

from ai_cache.config import get_settings, settings
from ai_cache.entities import CacheEntryEntity, CacheStatsEntity, SimilarContentEntity
from ai_cache.fingerprint import cache_key, content_digest, digest_similarity
from ai_cache.models import StatsTracker
from ai_cache.protocols import CacheStore, Clock, system_clock
from ai_cache.repositories import InMemoryCacheRepository
from ai_cache.services import AICacheService, CacheReaper

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "CacheStore",
    "Clock",
    "system_clock",
    # Services (business logic)
    "AICacheService",
    "CacheReaper",
    "StatsTracker",
    # Repositories (data access)
    "InMemoryCacheRepository",
    # Fingerprints
    "cache_key",
    "content_digest",
    "digest_similarity",
    # Entities (domain models)
    "CacheEntryEntity",
    "CacheStatsEntity",
    "SimilarContentEntity",
]
