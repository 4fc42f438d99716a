"""Runtime cache core domain layer.

Value objects, entities, exceptions and the cache contract. No storage
logic and no external dependencies beyond typing helpers.
"""

from .entities import *
from .exceptions import *
from .protocols import *
from .value_objects import *

__all__ = [
    # Entities
    "CacheStats",

    # Exceptions
    "RuntimeCacheError",
    "CacheKeyInvalid",
    "ReentrantComputationError",
    "RuntimeCacheConfigurationError",

    # Protocols
    "RuntimeCache",

    # Value Objects
    "CacheKey",
    "CacheScope",
    "KeyEncoding",
    "KEY_SEPARATOR",
    "normalize_key",
]
