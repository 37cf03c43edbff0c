import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Cache
    default_ttl_ms: int = int(os.getenv("AI_CACHE_DEFAULT_TTL_MS", "86400000"))  # 24 hours
    max_entries: int = int(os.getenv("AI_CACHE_MAX_ENTRIES", "1000"))
    cleanup_interval_ms: int = int(os.getenv("AI_CACHE_CLEANUP_INTERVAL_MS", "3600000"))  # 1 hour
    similarity_threshold: float = float(os.getenv("AI_CACHE_SIMILARITY_THRESHOLD", "0.8"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.default_ttl_ms <= 0:
            raise ValueError("AI_CACHE_DEFAULT_TTL_MS must be positive")

        if self.max_entries < 1:
            raise ValueError("AI_CACHE_MAX_ENTRIES must be at least 1")

        if self.cleanup_interval_ms <= 0:
            raise ValueError("AI_CACHE_CLEANUP_INTERVAL_MS must be positive")

        if not 0 <= self.similarity_threshold <= 1:
            raise ValueError(
                f"AI_CACHE_SIMILARITY_THRESHOLD must be between 0 and 1, "
                f"got {self.similarity_threshold}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
