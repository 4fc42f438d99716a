"""Reentrant computation exception.

ONLY recursion errors - raised when a producer asks its own store for the
key it is currently computing.

Following maximum separation architecture - one file = one purpose.
"""

from .base import RuntimeCacheError


class ReentrantComputationError(RuntimeCacheError, RuntimeError):
    """A producer requested the key it is computing on the same thread.

    Waiting for the in-flight result would never return, so the store fails
    fast instead.
    """

    def __init__(self, key: str, store_name: str):
        self.key = key
        self.store_name = store_name
        super().__init__(
            f"Producer for key '{key}' in store '{store_name}' requested its own key",
            error_code="CACHE_REENTRANT_COMPUTATION",
            details={"key": key, "store": store_name},
        )
