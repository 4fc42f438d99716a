"""
runtime-cache - get-or-compute memoization for the life of a process or an object.

Shared (process-wide) and per-instance caches, a mixin that wires both into
any class, and a decorator for functions and methods.
"""

from .__version__ import __version__

from .config import (
    LoggingConfig,
    RuntimeCacheSettings,
    bootstrap_logging,
    get_settings,
    setup_logging,
)

bootstrap_logging()

from .core import (
    # Entities
    CacheStats,

    # Exceptions
    RuntimeCacheError,
    CacheKeyInvalid,
    ReentrantComputationError,
    RuntimeCacheConfigurationError,

    # Protocols
    RuntimeCache,

    # Value Objects
    CacheKey,
    CacheScope,
    KeyEncoding,
    KEY_SEPARATOR,
    normalize_key,
)

from .infrastructure import (
    RuntimeCacheStore,
    SharedCacheRegistry,
    get_shared_registry,
    reset_shared_registry,
)

from .mixins import RuntimeCacheMixin
from .decorators import runtime_cached

__all__ = [
    # Configuration
    "LoggingConfig",
    "RuntimeCacheSettings",
    "bootstrap_logging",
    "get_settings",
    "setup_logging",

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

    # Stores and registry
    "RuntimeCacheStore",
    "SharedCacheRegistry",
    "get_shared_registry",
    "reset_shared_registry",

    # Composition
    "RuntimeCacheMixin",
    "runtime_cached",

    # Version
    "__version__",
]
