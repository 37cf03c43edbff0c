"""Expiration and eviction policies.

Both are pure functions over entries so the service and the reaper share
one definition of "expired" and "oldest".
"""

from collections.abc import Iterable

from ai_cache.entities import CacheEntryEntity


def is_expired(now: float, entry: CacheEntryEntity) -> bool:
    """Return True once `now - written_at` exceeds the entry's TTL."""
    return entry.is_expired(now)


def select_eviction_candidate(entries: Iterable[tuple[str, CacheEntryEntity]]) -> str | None:
    """Pick the key with the oldest `written_at` (oldest-write eviction).

    Reads never refresh an entry, so this is not access-recency LRU.
    Ties go to the first entry found in iteration order.

    Returns:
        The key to evict, or None if there are no entries
    """
    oldest_key: str | None = None
    oldest_time = 0.0
    for key, entry in entries:
        if oldest_key is None or entry.written_at < oldest_time:
            oldest_key = key
            oldest_time = entry.written_at
    return oldest_key
