"""Pytest configuration and fixtures for runtime-cache tests."""

import pytest
from unittest.mock import MagicMock

from runtime_cache import (
    KeyEncoding,
    RuntimeCacheSettings,
    RuntimeCacheStore,
    SharedCacheRegistry,
    get_settings,
    reset_shared_registry,
)


@pytest.fixture(autouse=True)
def isolated_process_state(monkeypatch):
    """Give every test fresh settings and a fresh process-wide registry."""
    for name in (
        "RUNTIME_CACHE_KEY_ENCODING",
        "RUNTIME_CACHE_DEFAULT_NAMESPACE",
        "RUNTIME_CACHE_TRACK_STATS",
        "RUNTIME_CACHE_CONFIGURE_LOGGING",
    ):
        monkeypatch.delenv(name, raising=False)

    get_settings.cache_clear()
    reset_shared_registry()
    yield
    reset_shared_registry()
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Default settings that ignore any local .env file."""
    return RuntimeCacheSettings(_env_file=None)


@pytest.fixture
def store():
    """Empty runtime cache store with the default (joined) encoding."""
    return RuntimeCacheStore(name="test")


@pytest.fixture
def prefixed_store():
    """Empty runtime cache store with length-prefixed keys."""
    return RuntimeCacheStore(name="test-prefixed", key_encoding=KeyEncoding.LENGTH_PREFIXED)


@pytest.fixture
def registry(settings):
    """Standalone shared cache registry, independent of the process default."""
    return SharedCacheRegistry(settings=settings)


@pytest.fixture
def producer():
    """Producer returning 42 that records its calls."""
    return MagicMock(return_value=42)
