"""Cache statistics snapshot entity."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class CacheStatsEntity:
    """Point-in-time copy of the cache counters.

    Attributes:
        hits: Lookups that returned a fresh entry
        misses: Lookups that found nothing or an expired entry
        total_requests: hits + misses
        hit_rate: Percentage of hits (0-100), 0 when there were no requests
        size: Number of entries stored when the snapshot was taken
    """

    hits: int
    misses: int
    total_requests: int
    hit_rate: float
    size: int

    @property
    def hit_rate_status(self) -> str:
        """Coarse rating of the hit rate for dashboards."""
        if self.hit_rate >= 70:
            return "excellent"
        if self.hit_rate >= 50:
            return "good"
        if self.hit_rate >= 30:
            return "fair"
        return "poor"

    def to_dict(self) -> dict[str, float | int | str]:
        """Convert the snapshot to a dictionary."""
        data: dict[str, float | int | str] = dict(asdict(self))
        data["hit_rate_status"] = self.hit_rate_status
        return data
