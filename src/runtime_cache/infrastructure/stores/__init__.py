"""Runtime cache stores."""

from .memory_runtime_store import RuntimeCacheStore

__all__ = ["RuntimeCacheStore"]
