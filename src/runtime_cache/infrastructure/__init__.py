"""Runtime cache infrastructure: in-memory stores and the shared registry."""

from .registry import SharedCacheRegistry, get_shared_registry, reset_shared_registry
from .stores import RuntimeCacheStore

__all__ = [
    "RuntimeCacheStore",
    "SharedCacheRegistry",
    "get_shared_registry",
    "reset_shared_registry",
]
