"""Runtime cache value objects.

Immutable values following maximum separation - one value object per file.
"""

from .cache_key import CacheKey, KEY_SEPARATOR, normalize_key
from .cache_scope import CacheScope
from .key_encoding import KeyEncoding

__all__ = [
    "CacheKey",
    "CacheScope",
    "KeyEncoding",
    "KEY_SEPARATOR",
    "normalize_key",
]
