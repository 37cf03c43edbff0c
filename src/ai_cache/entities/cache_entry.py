"""Cache entry domain entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntryEntity:
    """Domain entity for one cached AI result.

    Entries are never changed in place; a second `set` on the same key
    replaces the whole entry.

    Attributes:
        payload: The cached result, opaque to the cache
        written_at: Insertion time in epoch milliseconds (reads never touch it)
        ttl_ms: Time-to-live in milliseconds
        content_digest: Digest of the original input content, for similarity lookups
    """

    payload: Any
    written_at: float
    ttl_ms: float
    content_digest: str

    def age_ms(self, now: float) -> float:
        """Milliseconds elapsed since the entry was written."""
        return now - self.written_at

    def is_expired(self, now: float) -> bool:
        """An entry stays fresh while its age is at most its TTL."""
        return self.age_ms(now) > self.ttl_ms
