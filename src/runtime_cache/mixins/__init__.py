"""Runtime cache mixins."""

from .runtime_cache_mixin import RuntimeCacheMixin

__all__ = ["RuntimeCacheMixin"]
