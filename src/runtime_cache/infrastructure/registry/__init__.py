"""Shared runtime cache registry."""

from .shared_cache_registry import (
    SharedCacheRegistry,
    get_shared_registry,
    reset_shared_registry,
)

__all__ = [
    "SharedCacheRegistry",
    "get_shared_registry",
    "reset_shared_registry",
]
