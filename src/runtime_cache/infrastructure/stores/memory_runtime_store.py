"""Memory runtime cache store.

ONLY in-process storage - a get-or-compute mapping that lives as long as
its owner (the process for shared stores, an object for instance stores).

Following maximum separation architecture - one file = one purpose.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar, Union

from ...config.settings import RuntimeCacheSettings, get_settings
from ...core.entities.cache_stats import CacheStats
from ...core.exceptions.cache_key_invalid import CacheKeyInvalid
from ...core.exceptions.configuration_error import RuntimeCacheConfigurationError
from ...core.exceptions.reentrant_computation import ReentrantComputationError
from ...core.value_objects.cache_key import CacheKey
from ...core.value_objects.key_encoding import KeyEncoding

logger = logging.getLogger(__name__)

V = TypeVar("V")

_MISSING = object()


@dataclass
class _InFlight:
    """A producer currently running for one key."""

    owner: int
    done: threading.Event = field(default_factory=threading.Event)


class RuntimeCacheStore(Generic[V]):
    """Thread-safe in-memory get-or-compute store.

    Features:
    - Producer runs at most once per key until the key is invalidated
    - Producers run outside the lock; other keys are never blocked
    - Concurrent callers of a key being computed wait for that result
    - Failed producers store nothing, so the next call retries
    - No eviction, expiry or size bound
    """

    def __init__(
        self,
        name: str = "runtime",
        key_encoding: Union[KeyEncoding, str] = KeyEncoding.JOINED,
        track_stats: bool = True,
    ):
        """Initialize runtime cache store.

        Args:
            name: Label used in logs, stats and errors
            key_encoding: How raw keys are normalized
            track_stats: Whether to count hits, misses and computations
        """
        try:
            self._key_encoding = KeyEncoding(key_encoding)
        except ValueError:
            raise RuntimeCacheConfigurationError(
                "key_encoding",
                key_encoding,
                f"expected one of {[e.value for e in KeyEncoding]}",
            )

        self.name = name
        self._track_stats = track_stats
        self._entries: Dict[str, V] = {}
        self._in_flight: Dict[str, _InFlight] = {}
        self._lock = threading.Lock()
        self._stats = {
            "hits": 0,
            "misses": 0,
            "computations": 0,
            "failures": 0,
            "invalidations": 0,
        }

    @classmethod
    def from_settings(
        cls, name: str = "runtime", settings: Optional[RuntimeCacheSettings] = None
    ) -> "RuntimeCacheStore[V]":
        """Create a store configured from runtime cache settings."""
        settings = settings or get_settings()
        return cls(
            name=name,
            key_encoding=settings.key_encoding,
            track_stats=settings.track_stats,
        )

    @property
    def key_encoding(self) -> KeyEncoding:
        """Key encoding used by this store."""
        return self._key_encoding

    def normalize(self, key: Any) -> str:
        """Normalize a raw key with this store's encoding."""
        return CacheKey.from_raw(key, self._key_encoding).value

    def _count(self, counter: str) -> None:
        # Caller holds the lock
        if self._track_stats:
            self._stats[counter] += 1

    def get_or_compute(self, key: Any, producer: Callable[[], V]) -> V:
        """Get the value cached under key, running producer on a miss.

        Args:
            key: Scalar or list/tuple of scalars
            producer: Zero-argument callable computing the value

        Returns:
            The cached value, or the producer's freshly stored result

        Raises:
            CacheKeyInvalid: If the key cannot be normalized
            ReentrantComputationError: If producer asks for its own key
            Exception: Whatever the producer raises, unchanged
        """
        cache_key = self.normalize(key)
        me = threading.get_ident()

        while True:
            with self._lock:
                if cache_key in self._entries:
                    self._count("hits")
                    return self._entries[cache_key]

                pending = self._in_flight.get(cache_key)
                if pending is None:
                    pending = _InFlight(owner=me)
                    self._in_flight[cache_key] = pending
                    self._count("misses")
                    break

                if pending.owner == me:
                    raise ReentrantComputationError(cache_key, self.name)

            # Another thread is computing this key; if it fails we retry
            pending.done.wait()

        logger.debug(f"Runtime cache '{self.name}' miss for key '{cache_key}'")
        try:
            value = producer()
        except Exception as e:
            with self._lock:
                self._count("failures")
            logger.debug(
                f"Producer for key '{cache_key}' in runtime cache '{self.name}' "
                f"failed: {type(e).__name__}"
            )
            raise
        else:
            with self._lock:
                self._entries[cache_key] = value
                self._count("computations")
            return value
        finally:
            with self._lock:
                self._in_flight.pop(cache_key, None)
            pending.done.set()

    def invalidate(self, key: Any) -> None:
        """Remove key from the store; absent keys are a no-op.

        A key that cannot be normalized was never stored, so it is treated
        as absent.
        """
        try:
            cache_key = self.normalize(key)
        except CacheKeyInvalid as e:
            logger.debug(f"Runtime cache '{self.name}' ignored invalidation: {e.reason}")
            return

        with self._lock:
            if self._entries.pop(cache_key, _MISSING) is not _MISSING:
                self._count("invalidations")
                logger.debug(f"Runtime cache '{self.name}' invalidated key '{cache_key}'")

    def invalidate_all(self) -> None:
        """Remove every entry from the store."""
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()
            if self._track_stats:
                self._stats["invalidations"] += removed
        if removed:
            logger.debug(f"Runtime cache '{self.name}' cleared {removed} entries")

    def copy(self, name: Optional[str] = None) -> "RuntimeCacheStore[V]":
        """Create an independent store holding the same entries.

        Values are shared, the mapping is not. Counters start from zero.
        """
        clone = type(self)(
            name=name or self.name,
            key_encoding=self._key_encoding,
            track_stats=self._track_stats,
        )
        with self._lock:
            clone._entries = dict(self._entries)
        return clone

    def __copy__(self) -> "RuntimeCacheStore[V]":
        return self.copy()

    def __getstate__(self) -> Dict[str, Any]:
        # Locks and in-flight markers belong to this process and this object
        with self._lock:
            state = dict(self.__dict__)
            state["_entries"] = dict(self._entries)
            state["_stats"] = dict(self._stats)
        del state["_lock"]
        del state["_in_flight"]
        return state

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self.__dict__.update(state)
        self._in_flight = {}
        self._lock = threading.Lock()

    def keys(self) -> List[str]:
        """Get the normalized keys currently stored."""
        with self._lock:
            return list(self._entries)

    @property
    def stats(self) -> CacheStats:
        """Snapshot of the store's counters."""
        with self._lock:
            return CacheStats(name=self.name, entries=len(self._entries), **self._stats)

    def __contains__(self, key: Any) -> bool:
        cache_key = self.normalize(key)
        with self._lock:
            return cache_key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self.name!r}, "
            f"key_encoding={self._key_encoding.value!r}, entries={len(self)})"
        )

