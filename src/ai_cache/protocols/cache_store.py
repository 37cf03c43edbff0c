"""Cache storage protocol.

Defines the interface for the key-to-entry storage behind the AI cache.
The store knows nothing about TTLs, stats or eviction; those policies live
in the service layer.

Implementations can include:
- Process-local dictionary (default)
- Any other mapping-like backend with the same semantics
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from ai_cache.entities import CacheEntryEntity


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for cache entry storage backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        from ai_cache.protocols import CacheStore

        repo: CacheStore = InMemoryCacheRepository()
        ```
    """

    def get_entry(self, key: str) -> CacheEntryEntity | None:
        """Look up an entry by key.

        Args:
            key: The cache key

        Returns:
            The stored entry, or None if absent
        """
        ...

    def put_entry(self, key: str, entry: CacheEntryEntity) -> None:
        """Insert or overwrite the entry for a key.

        Args:
            key: The cache key
            entry: The entry to store
        """
        ...

    def contains(self, key: str) -> bool:
        """Check whether a key is stored (fresh or not).

        Args:
            key: The cache key

        Returns:
            True if present, False otherwise
        """
        ...

    def delete_by_key(self, key: str) -> bool:
        """Delete a specific entry by key.

        Args:
            key: The cache key to delete

        Returns:
            True if deleted, False otherwise
        """
        ...

    def items(self) -> Iterator[tuple[str, CacheEntryEntity]]:
        """Iterate over (key, entry) pairs in insertion order.

        Returns:
            Iterator over a snapshot of the stored pairs
        """
        ...

    def clear_all(self) -> int:
        """Remove every entry.

        Returns:
            Number of entries deleted
        """
        ...

    def count_all(self) -> int:
        """Count stored entries.

        Returns:
            Total number of stored entries
        """
        ...
