"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the entry store without touching the cache service
- Unit testing with a controllable clock instead of sleeping
- Clear separation of concerns

Usage:
    ```python
    from ai_cache.protocols import CacheStore, Clock

    store: CacheStore = InMemoryCacheRepository()
    clock: Clock = system_clock
    ```
"""

from .cache_store import CacheStore
from .clock import Clock, system_clock

__all__ = [
    "CacheStore",
    "Clock",
    "system_clock",
]
