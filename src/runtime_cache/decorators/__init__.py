"""Runtime cache decorators."""

from .runtime_cached import runtime_cached

__all__ = ["runtime_cached"]
