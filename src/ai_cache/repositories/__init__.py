"""Repository layer for data access.

This layer holds the storage backends behind the `CacheStore` protocol.
The repositories are protocol-based (structural typing), not
inheritance-based. Any class implementing the required methods will
satisfy the protocol.
"""

from ai_cache.protocols import CacheStore

from .memory_repository import InMemoryCacheRepository

__all__ = [
    "CacheStore",
    "InMemoryCacheRepository",
]
