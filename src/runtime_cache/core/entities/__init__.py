"""Runtime cache entities."""

from .cache_stats import CacheStats

__all__ = ["CacheStats"]
