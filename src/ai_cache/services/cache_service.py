"""Cache service for core business logic.

This service deduplicates expensive AI completion calls. It coordinates
the fingerprint generator, the entry store, the expiration and eviction
policies and the stats tracker.

All operations are synchronous and run to completion, so on a single
event loop no two calls interleave mid-mutation.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from ai_cache.config import settings
from ai_cache.entities import CacheEntryEntity, CacheStatsEntity, SimilarContentEntity
from ai_cache.fingerprint import cache_key, content_digest, digest_similarity
from ai_cache.models import StatsTracker
from ai_cache.policies import is_expired, select_eviction_candidate
from ai_cache.protocols import CacheStore, Clock, system_clock
from ai_cache.repositories import InMemoryCacheRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

_KEY_LOG_LENGTH = 50


class AICacheService:
    """Process-local cache for AI completion results.

    The payload type is opaque to the cache; callers that ask for a
    particular shape validate it themselves.

    Example:
        ```python
        from ai_cache.services import AICacheService

        cache = AICacheService.create()

        result = cache.get("polish_text", text)
        if result is None:
            result = call_model(text)
            cache.set("polish_text", text, result)
        ```
    """

    def __init__(
        self,
        repository: CacheStore,
        default_ttl_ms: float | None = None,
        max_entries: int | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Initialize the cache service.

        Args:
            repository: Entry storage backend (required).
            default_ttl_ms: TTL used when `set` gets none. Defaults to settings.
            max_entries: Upper bound on stored entries. Defaults to settings.
            clock: Millisecond wall clock. Defaults to the system clock.

        Raises:
            ValueError: If the TTL is not positive or max_entries < 1
        """
        self._repository = repository
        self._default_ttl_ms = settings.default_ttl_ms if default_ttl_ms is None else default_ttl_ms
        self._max_entries = settings.max_entries if max_entries is None else max_entries
        self._clock = clock if clock is not None else system_clock
        self._stats = StatsTracker()

        if self._default_ttl_ms <= 0:
            raise ValueError("default_ttl_ms must be positive")
        if self._max_entries < 1:
            raise ValueError("max_entries must be at least 1")

    @classmethod
    def create(
        cls,
        repository: CacheStore | None = None,
        default_ttl_ms: float | None = None,
        max_entries: int | None = None,
        clock: Clock | None = None,
    ) -> "AICacheService":
        """Factory method to create AICacheService with sensible defaults.

        Args:
            repository: Entry store. If None, a fresh in-memory store.
            default_ttl_ms: Default TTL in milliseconds. If None, uses settings.
            max_entries: Capacity. If None, uses settings.
            clock: Millisecond clock. If None, uses the system clock.

        Returns:
            Configured AICacheService instance
        """
        return cls(
            repository=repository if repository is not None else InMemoryCacheRepository.create(),
            default_ttl_ms=default_ttl_ms,
            max_entries=max_entries,
            clock=clock,
        )

    def key_for(self, function_name: str, content: str, params: dict[str, Any] | None = None) -> str:
        """Return the cache key a request maps to."""
        return cache_key(function_name, content, params)

    def get(
        self,
        function_name: str,
        content: str,
        params: dict[str, Any] | None = None,
    ) -> Any | None:
        """Look up a cached result.

        Expired entries count as misses and are removed on the way out.

        Args:
            function_name: Logical AI function name
            content: The input content
            params: Optional call parameters

        Returns:
            The cached payload, or None on a miss
        """
        key = cache_key(function_name, content, params)
        entry = self._repository.get_entry(key)

        if entry is None:
            self._stats.record_miss()
            return None

        if is_expired(self._clock(), entry):
            self._repository.delete_by_key(key)
            self._stats.record_miss()
            return None

        self._stats.record_hit()
        logger.debug("AI cache hit: %s, key: %s...", function_name, key[:_KEY_LOG_LENGTH])
        return entry.payload

    def set(
        self,
        function_name: str,
        content: str,
        value: Any,
        params: dict[str, Any] | None = None,
        ttl_ms: float | None = None,
    ) -> None:
        """Store a result, evicting the oldest write if the store is full.

        Overwriting an existing key refreshes its write time and TTL and
        never evicts.

        A stored None is a hit that `get` cannot tell apart from a miss;
        use `contains` to distinguish them. `get_or_compute` never stores None.

        Args:
            function_name: Logical AI function name
            content: The input content
            value: The result to cache
            params: Optional call parameters
            ttl_ms: Per-entry TTL in milliseconds. None means the default.
        """
        key = cache_key(function_name, content, params)
        ttl = self._default_ttl_ms if ttl_ms is None else ttl_ms

        if not self._repository.contains(key) and self._repository.count_all() >= self._max_entries:
            self._evict_oldest()

        self._repository.put_entry(
            key,
            CacheEntryEntity(
                payload=value,
                written_at=self._clock(),
                ttl_ms=ttl,
                content_digest=content_digest(content),
            ),
        )
        logger.debug(
            "AI cache set: %s, key: %s..., TTL: %.1f minutes",
            function_name,
            key[:_KEY_LOG_LENGTH],
            ttl / 1000 / 60,
        )

    def delete(self, function_name: str, content: str, params: dict[str, Any] | None = None) -> bool:
        """Delete a cached result.

        Returns:
            True if an entry was removed, False otherwise
        """
        return self._repository.delete_by_key(cache_key(function_name, content, params))

    def contains(self, function_name: str, content: str, params: dict[str, Any] | None = None) -> bool:
        """Check for a fresh entry without touching the hit/miss counters."""
        key = cache_key(function_name, content, params)
        entry = self._repository.get_entry(key)
        if entry is None:
            return False
        if is_expired(self._clock(), entry):
            self._repository.delete_by_key(key)
            return False
        return True

    def cleanup(self, force: bool = False) -> int:
        """Sweep expired entries, or every entry when forced.

        Args:
            force: Remove all entries regardless of freshness

        Returns:
            Number of entries removed
        """
        now = self._clock()
        removed = 0

        for key, entry in self._repository.items():
            if force or is_expired(now, entry):
                self._repository.delete_by_key(key)
                removed += 1

        if removed > 0:
            logger.info("AI cache cleanup removed %d entries (force=%s)", removed, force)

        return removed

    def handle_memory_pressure(self) -> int:
        """Drop everything when the host reports memory pressure."""
        logger.warning("Memory pressure reported, flushing AI cache")
        return self.cleanup(force=True)

    def _evict_oldest(self) -> None:
        key = select_eviction_candidate(self._repository.items())
        if key is not None:
            self._repository.delete_by_key(key)
            logger.debug("AI cache evicted oldest write: %s...", key[:_KEY_LOG_LENGTH])

    def get_stats(self) -> CacheStatsEntity:
        """Get a snapshot of the cache statistics.

        Returns:
            Immutable CacheStatsEntity with the live store size
        """
        return self._stats.snapshot(size=self._repository.count_all())

    def reset_stats(self) -> None:
        """Zero the hit/miss counters. Stored entries are kept."""
        self._stats.reset()

    def clear(self) -> int:
        """Empty the store. Hit/miss counters are kept.

        Returns:
            Number of entries deleted
        """
        count = self._repository.clear_all()
        logger.debug("AI cache cleared (%d entries)", count)
        return count

    def get_similar_content(
        self,
        content: str,
        threshold: float | None = None,
    ) -> list[SimilarContentEntity]:
        """Find cached payloads whose content digest resembles the target's.

        This compares digests character by character, so a high score says
        nothing about meaning.

        Args:
            content: Target content
            threshold: Minimum similarity (0-1). Defaults to settings.

        Returns:
            Matches sorted by similarity, highest first

        Raises:
            ValueError: If threshold is outside [0, 1]
        """
        threshold = settings.similarity_threshold if threshold is None else threshold
        if not 0 <= threshold <= 1:
            raise ValueError("Threshold must be between 0 and 1")

        target = content_digest(content)
        matches = []
        for _, entry in self._repository.items():
            similarity = digest_similarity(target, entry.content_digest)
            if similarity >= threshold:
                matches.append(SimilarContentEntity(content=entry.payload, similarity=similarity))

        # Stable sort keeps store order among equal scores
        matches.sort(key=lambda m: m.similarity, reverse=True)
        return matches

    def get_or_compute(
        self,
        function_name: str,
        content: str,
        compute: Callable[[], T],
        params: dict[str, Any] | None = None,
        ttl_ms: float | None = None,
    ) -> T:
        """Return the cached result or compute and cache it.

        A computed value of None is returned but not cached.

        Args:
            function_name: Logical AI function name
            content: The input content
            compute: Zero-argument callable producing the real result
            params: Optional call parameters
            ttl_ms: TTL for a freshly computed result

        Returns:
            The cached or freshly computed result
        """
        cached = self.get(function_name, content, params)
        if cached is not None:
            return cached

        result = compute()
        if result is not None:
            self.set(function_name, content, result, params=params, ttl_ms=ttl_ms)
        return result

    def warmup(self, entries: Iterable[tuple[Any, ...]] = ()) -> int:
        """Preload known results.

        Args:
            entries: Tuples of (function_name, content, value[, params[, ttl_ms]])

        Returns:
            Number of entries stored
        """
        count = 0
        for item in entries:
            self.set(*item)
            count += 1

        logger.debug("AI cache warmup complete (%d entries)", count)
        return count

    @property
    def default_ttl_ms(self) -> float:
        """Get the default TTL in milliseconds."""
        return self._default_ttl_ms

    @property
    def max_entries(self) -> int:
        """Get the capacity of the store."""
        return self._max_entries

    @property
    def repository(self) -> CacheStore:
        """Get the underlying repository (for testing)."""
        return self._repository

    def __len__(self) -> int:
        return self._repository.count_all()
