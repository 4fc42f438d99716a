"""Runtime cache protocol interfaces."""

from .runtime_cache import RuntimeCache

__all__ = ["RuntimeCache"]
