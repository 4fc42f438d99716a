"""Runtime cache protocol.

ONLY the get-or-compute contract - any object offering these operations
can stand in for a store, e.g. in the mixin or the decorator.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Callable, TypeVar
from typing_extensions import Protocol, runtime_checkable

V = TypeVar("V")


@runtime_checkable
class RuntimeCache(Protocol):
    """Runtime cache protocol.

    Defines the memoization contract:
    - get_or_compute runs the producer only on a miss
    - invalidate removes one key, silently if absent
    - invalidate_all empties the cache
    """

    def get_or_compute(self, key: Any, producer: Callable[[], V]) -> V:
        """Return the cached value for key, computing it on a miss.

        The producer is called at most once per key until the key is
        invalidated. If it raises, nothing is stored and the exception
        propagates.
        """
        ...

    def invalidate(self, key: Any) -> None:
        """Remove key from the cache; absent keys are a no-op."""
        ...

    def invalidate_all(self) -> None:
        """Remove every key from the cache."""
        ...
