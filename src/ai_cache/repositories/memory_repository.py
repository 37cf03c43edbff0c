"""In-memory implementation of CacheStore.

A plain dict owned by one cache instance. Nothing is persisted and
nothing is shared across processes.
"""

from collections.abc import Iterator

from ai_cache.entities import CacheEntryEntity


class InMemoryCacheRepository:
    """Process-local entry store.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntryEntity] = {}

    @classmethod
    def create(cls) -> "InMemoryCacheRepository":
        """Factory method mirroring the other layers' constructors."""
        return cls()

    def get_entry(self, key: str) -> CacheEntryEntity | None:
        return self._entries.get(key)

    def put_entry(self, key: str, entry: CacheEntryEntity) -> None:
        self._entries[key] = entry

    def contains(self, key: str) -> bool:
        return key in self._entries

    def delete_by_key(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def items(self) -> Iterator[tuple[str, CacheEntryEntity]]:
        # Copy so callers may delete while iterating
        return iter(list(self._entries.items()))

    def clear_all(self) -> int:
        count = len(self._entries)
        self._entries.clear()
        return count

    def count_all(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
