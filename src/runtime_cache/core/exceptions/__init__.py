"""Runtime cache exceptions.

One exception per file following maximum separation architecture.
"""

from .base import RuntimeCacheError
from .cache_key_invalid import CacheKeyInvalid
from .reentrant_computation import ReentrantComputationError
from .configuration_error import RuntimeCacheConfigurationError

__all__ = [
    "RuntimeCacheError",
    "CacheKeyInvalid",
    "ReentrantComputationError",
    "RuntimeCacheConfigurationError",
]
