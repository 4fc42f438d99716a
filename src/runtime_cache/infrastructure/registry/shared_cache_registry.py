"""Shared cache registry.

ONLY shared-store ownership - holds the process-scoped runtime cache
stores, one per namespace, so that whoever uses the shared cache can see
which registry owns it and can reset it.

Following maximum separation architecture - one file = one purpose.
"""

import logging
import threading
from functools import lru_cache
from typing import Dict, List, Optional

from ...config.settings import RuntimeCacheSettings, get_settings
from ...core.exceptions.configuration_error import RuntimeCacheConfigurationError
from ..stores.memory_runtime_store import RuntimeCacheStore

logger = logging.getLogger(__name__)


class SharedCacheRegistry:
    """Registry of shared runtime cache stores keyed by namespace.

    Stores are created empty on first use and live as long as the registry.
    The process default registry comes from get_shared_registry(); tests and
    embedding applications can build their own and inject it.
    """

    def __init__(self, settings: Optional[RuntimeCacheSettings] = None):
        """Initialize registry.

        Args:
            settings: Settings for new stores; process settings if omitted
        """
        self._settings = settings or get_settings()
        self._stores: Dict[str, RuntimeCacheStore] = {}
        self._lock = threading.Lock()

    @property
    def settings(self) -> RuntimeCacheSettings:
        """Settings applied to stores created by this registry."""
        return self._settings

    def _resolve_namespace(self, namespace: Optional[str]) -> str:
        if namespace is None:
            return self._settings.default_namespace
        if not isinstance(namespace, str) or not namespace.strip():
            raise RuntimeCacheConfigurationError(
                "namespace", namespace, "namespace must be a non-empty string"
            )
        return namespace

    def get_store(self, namespace: Optional[str] = None) -> RuntimeCacheStore:
        """Get the store for namespace, creating it on first use."""
        namespace = self._resolve_namespace(namespace)
        with self._lock:
            store = self._stores.get(namespace)
            if store is None:
                store = RuntimeCacheStore.from_settings(
                    name=f"shared:{namespace}", settings=self._settings
                )
                self._stores[namespace] = store
                logger.debug(f"Created shared runtime cache namespace '{namespace}'")
            return store

    def has_store(self, namespace: Optional[str] = None) -> bool:
        """Check whether namespace has been used yet."""
        namespace = self._resolve_namespace(namespace)
        with self._lock:
            return namespace in self._stores

    def namespaces(self) -> List[str]:
        """Get the namespaces created so far."""
        with self._lock:
            return list(self._stores)

    def reset(self, namespace: Optional[str] = None) -> None:
        """Clear one namespace's store, or every store when namespace is None.

        Stores stay registered, so references held elsewhere keep pointing
        at the live (now empty) store.
        """
        with self._lock:
            if namespace is None:
                stores = list(self._stores.values())
            else:
                stores = [self._stores[namespace]] if namespace in self._stores else []

        for store in stores:
            store.invalidate_all()


@lru_cache(maxsize=1)
def get_shared_registry() -> SharedCacheRegistry:
    """Get the process-wide shared cache registry."""
    return SharedCacheRegistry()


def reset_shared_registry() -> None:
    """Drop the process-wide registry; the next lookup creates a fresh one."""
    get_shared_registry.cache_clear()
