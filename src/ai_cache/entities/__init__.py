"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.

Entities should have:
- No JSON serialization logic beyond plain dict conversion
- No Pydantic validation
- No external dependencies
"""

from .cache_entry import CacheEntryEntity
from .cache_stats import CacheStatsEntity
from .similar_content import SimilarContentEntity

__all__ = ["CacheEntryEntity", "CacheStatsEntity", "SimilarContentEntity"]
