from dataclasses import dataclass

from ai_cache.entities import CacheStatsEntity


@dataclass
class StatsTracker:
    """Track hit/miss economics for cache lookups."""

    hits: int = 0
    misses: int = 0

    @property
    def total_requests(self) -> int:
        """Every lookup is either a hit or a miss."""
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate as a percentage."""
        if self.total_requests == 0:
            return 0.0
        return self.hits / self.total_requests * 100

    def record_hit(self) -> None:
        """Record a cache hit."""
        self.hits += 1

    def record_miss(self) -> None:
        """Record a cache miss."""
        self.misses += 1

    def reset(self) -> None:
        self.hits = 0
        self.misses = 0

    def snapshot(self, size: int) -> CacheStatsEntity:
        """Copy the counters into an immutable snapshot.

        Args:
            size: Live entry count read from the store
        """
        return CacheStatsEntity(
            hits=self.hits,
            misses=self.misses,
            total_requests=self.total_requests,
            hit_rate=self.hit_rate,
            size=size,
        )
