"""Runtime cache mixin.

ONLY composition - gives any class a shared (process-wide) and a
per-instance get-or-compute cache without extra wiring.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Callable, ClassVar, Optional, TypeVar

from ..infrastructure.registry.shared_cache_registry import (
    SharedCacheRegistry,
    get_shared_registry,
)
from ..infrastructure.stores.memory_runtime_store import RuntimeCacheStore

V = TypeVar("V")

# Long, prefixed name so it will not clash with attributes of the host class
_INSTANCE_STORE_ATTR = "_runtime_cache_mixin_instance_store"


class RuntimeCacheMixin:
    """Mixin adding runtime caches to a class.

    Shared operations are classmethods and reach the store for
    ``runtime_cache_namespace`` in ``runtime_cache_registry`` (the process
    default registry when None). All classes using the default namespace
    see the same entries.

    Instance operations use a store owned by the object, created the first
    time the object uses it and discarded with the object.

    Example:
        class PriceService(RuntimeCacheMixin):
            def rate(self, currency):
                return self.get_or_compute(["rate", currency], lambda: fetch(currency))
    """

    runtime_cache_registry: ClassVar[Optional[SharedCacheRegistry]] = None
    runtime_cache_namespace: ClassVar[Optional[str]] = None

    @classmethod
    def shared_runtime_cache(cls) -> RuntimeCacheStore:
        """Get the shared store this class reads and writes."""
        registry = cls.runtime_cache_registry or get_shared_registry()
        return registry.get_store(cls.runtime_cache_namespace)

    @classmethod
    def get_or_compute_shared(cls, key: Any, producer: Callable[[], V]) -> V:
        """Get or compute a value in the shared cache.

        Any other caller using the same namespace and key gets the same
        value without running its own producer.
        """
        return cls.shared_runtime_cache().get_or_compute(key, producer)

    @classmethod
    def invalidate_shared(cls, key: Any) -> None:
        """Remove key from the shared cache."""
        cls.shared_runtime_cache().invalidate(key)

    @property
    def instance_runtime_cache(self) -> RuntimeCacheStore:
        """Get this object's own store, creating it on first access."""
        try:
            state = vars(self)
        except TypeError:
            raise TypeError(
                f"{type(self).__name__} has no __dict__; "
                f"RuntimeCacheMixin needs one to hold the instance cache"
            )

        store = state.get(_INSTANCE_STORE_ATTR)
        if store is None:
            registry = self.runtime_cache_registry or get_shared_registry()
            # setdefault keeps a single store if two threads race here
            store = state.setdefault(
                _INSTANCE_STORE_ATTR,
                RuntimeCacheStore.from_settings(
                    name=f"instance:{type(self).__name__}@{id(self):#x}",
                    settings=registry.settings,
                ),
            )
        return store

    def __copy__(self):
        """Shallow-copy the object with an instance cache of its own.

        The copy starts with the same entries, but later computations and
        invalidations on either object do not reach the other.
        """
        cls = type(self)
        clone = cls.__new__(cls)
        state = dict(vars(self))
        store = state.pop(_INSTANCE_STORE_ATTR, None)
        clone.__dict__.update(state)
        if store is not None:
            clone.__dict__[_INSTANCE_STORE_ATTR] = store.copy(
                name=f"instance:{cls.__name__}@{id(clone):#x}"
            )
        return clone

    def get_or_compute(self, key: Any, producer: Callable[[], V]) -> V:
        """Get or compute a value in this object's cache."""
        return self.instance_runtime_cache.get_or_compute(key, producer)

    def invalidate(self, key: Any) -> None:
        """Remove key from this object's cache."""
        self.instance_runtime_cache.invalidate(key)

    def invalidate_all(self) -> None:
        """Empty this object's cache."""
        self.instance_runtime_cache.invalidate_all()
