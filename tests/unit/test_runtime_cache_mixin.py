"""Tests for RuntimeCacheMixin."""

import copy
import pickle
from unittest.mock import MagicMock

import pytest

from runtime_cache import (
    RuntimeCache,
    RuntimeCacheMixin,
    RuntimeCacheSettings,
    SharedCacheRegistry,
    get_shared_registry,
)


class Repository(RuntimeCacheMixin):
    """Host class using the default shared namespace."""

    def __init__(self, name):
        self.name = name


class OtherRepository(RuntimeCacheMixin):
    """Unrelated host class, also on the default namespace."""


class BillingRepository(RuntimeCacheMixin):
    """Host class with its own shared namespace."""

    runtime_cache_namespace = "billing"


class TestInstanceCache:
    """Test cases for per-instance get-or-compute."""

    def test_get_or_compute_scenario(self):
        """Test get / get / invalidate / get on one instance."""
        repo = Repository("a")
        first = MagicMock(return_value=42)
        second = MagicMock(return_value=99)

        assert repo.get_or_compute("x", first) == 42
        assert repo.get_or_compute("x", second) == 42
        second.assert_not_called()

        repo.invalidate("x")

        assert repo.get_or_compute("x", second) == 99
        first.assert_called_once()
        second.assert_called_once()

    def test_instances_are_independent(self):
        """Test the same key on two instances runs two producers."""
        a, b = Repository("a"), Repository("b")
        producer_a = MagicMock(return_value="a")
        producer_b = MagicMock(return_value="b")

        assert a.get_or_compute("k", producer_a) == "a"
        assert b.get_or_compute("k", producer_b) == "b"
        producer_a.assert_called_once()
        producer_b.assert_called_once()

    def test_instance_cache_separate_from_shared(self):
        """Test instance entries do not leak into the shared cache."""
        repo = Repository("a")
        repo.get_or_compute("k", lambda: "instance")

        assert Repository.get_or_compute_shared("k", lambda: "shared") == "shared"

    def test_invalidate_all(self):
        """Test invalidate_all forces every key to recompute."""
        repo = Repository("a")
        for key in ("a", "b", ["c", 1]):
            repo.get_or_compute(key, lambda: "old")

        repo.invalidate_all()

        producer = MagicMock(return_value="new")
        for key in ("a", "b", ["c", 1]):
            assert repo.get_or_compute(key, producer) == "new"
        assert producer.call_count == 3

    def test_invalidate_all_leaves_other_instances(self):
        """Test clearing one instance does not touch another."""
        a, b = Repository("a"), Repository("b")
        a.get_or_compute("k", lambda: 1)
        b.get_or_compute("k", lambda: 2)

        a.invalidate_all()

        assert "k" not in a.instance_runtime_cache
        assert b.get_or_compute("k", lambda: 3) == 2

    def test_invalidate_absent_key(self):
        """Test invalidating a missing key is a no-op."""
        repo = Repository("a")
        repo.get_or_compute("keep", lambda: 1)

        repo.invalidate("missing")

        assert repo.instance_runtime_cache.keys() == ["keep"]

    def test_invalidate_unordered_key_is_noop(self):
        """Test invalidating with a dict or set key neither fails nor clears."""
        repo = Repository("a")
        repo.get_or_compute("keep", lambda: 1)

        repo.invalidate({"id": 1})
        repo.invalidate({"a", "b"})
        Repository.invalidate_shared({"id": 1})

        assert repo.instance_runtime_cache.keys() == ["keep"]

    def test_instance_store_created_once(self):
        """Test the instance store is stable and satisfies the protocol."""
        repo = Repository("a")
        store = repo.instance_runtime_cache

        assert repo.instance_runtime_cache is store
        assert isinstance(store, RuntimeCache)
        assert store.name.startswith("instance:Repository@")

    def test_host_init_need_not_call_super(self):
        """Test the mixin works without cooperative __init__."""
        class Plain(RuntimeCacheMixin):
            def __init__(self):
                self.ready = True

        assert Plain().get_or_compute("k", lambda: 1) == 1

    def test_instance_store_uses_registry_settings(self):
        """Test the instance store follows the injected registry's settings."""
        prefixed = RuntimeCacheSettings(_env_file=None, key_encoding="length_prefixed")

        class Prefixed(RuntimeCacheMixin):
            runtime_cache_registry = SharedCacheRegistry(settings=prefixed)

        obj = Prefixed()
        obj.get_or_compute(["a", "b"], lambda: 1)

        assert obj.instance_runtime_cache.keys() == ["2#1:a1:b"]

    def test_copy_gets_own_cache(self):
        """Test a shallow copy does not share the instance cache."""
        original = Repository("a")
        original.get_or_compute("x", lambda: 1)

        clone = copy.copy(original)
        clone.invalidate_all()
        clone.get_or_compute("y", lambda: 2)

        assert clone.name == "a"
        assert clone.instance_runtime_cache is not original.instance_runtime_cache
        assert original.instance_runtime_cache.keys() == ["x"]
        assert original.get_or_compute("x", lambda: 99) == 1
        assert "y" not in original.instance_runtime_cache

    def test_copy_starts_with_cached_values(self):
        """Test a shallow copy keeps entries cached before the copy."""
        original = Repository("a")
        value = object()
        original.get_or_compute("x", lambda: value)

        clone = copy.copy(original)

        assert clone.get_or_compute("x", lambda: None) is value
        assert clone.instance_runtime_cache.name == f"instance:Repository@{id(clone):#x}"

    def test_copy_before_first_use(self):
        """Test copying an object that never touched its cache."""
        clone = copy.copy(Repository("a"))

        assert clone.get_or_compute("x", lambda: 1) == 1

    def test_deepcopy_gets_own_cache(self):
        """Test a deep copy has an independent, working instance cache."""
        original = Repository("a")
        original.get_or_compute("x", lambda: ["value"])

        clone = copy.deepcopy(original)
        clone.invalidate("x")

        assert clone.get_or_compute("x", lambda: "fresh") == "fresh"
        assert original.get_or_compute("x", lambda: "other") == ["value"]

    def test_pickle_round_trip(self):
        """Test a host object with a populated cache can be pickled."""
        original = Repository("a")
        original.get_or_compute(["user", 1], lambda: "alice")

        restored = pickle.loads(pickle.dumps(original))

        assert restored.name == "a"
        assert restored.get_or_compute(["user", 1], lambda: "other") == "alice"
        restored.invalidate_all()
        assert original.get_or_compute(["user", 1], lambda: "other") == "alice"


class TestSharedCache:
    """Test cases for shared (process-wide) get-or-compute."""

    def test_visible_across_instances(self):
        """Test a shared entry computed by one instance serves others."""
        producer = MagicMock(return_value="config")
        other = MagicMock(return_value="other")

        assert Repository("a").get_or_compute_shared("cfg", producer) == "config"
        assert Repository("b").get_or_compute_shared("cfg", other) == "config"
        other.assert_not_called()

    def test_visible_from_class_and_other_classes(self):
        """Test class-level and unrelated-class calls see the same entry."""
        Repository.get_or_compute_shared("cfg", lambda: "config")
        other = MagicMock(return_value="other")

        assert OtherRepository.get_or_compute_shared("cfg", other) == "config"
        assert Repository("x").get_or_compute_shared("cfg", other) == "config"
        other.assert_not_called()
        assert "cfg" in get_shared_registry().get_store()

    def test_namespace_isolates_class(self):
        """Test a class with its own namespace does not share entries."""
        Repository.get_or_compute_shared("cfg", lambda: "default")

        assert BillingRepository.get_or_compute_shared("cfg", lambda: "billing") == "billing"
        assert get_shared_registry().has_store("billing")

    def test_invalidate_shared(self):
        """Test shared invalidation forces recomputation for everyone."""
        Repository.get_or_compute_shared("cfg", lambda: "old")

        OtherRepository.invalidate_shared("cfg")

        assert Repository("a").get_or_compute_shared("cfg", lambda: "new") == "new"

    def test_invalidate_shared_absent_key(self):
        """Test shared invalidation of a missing key is a no-op."""
        Repository.invalidate_shared("missing")
        assert len(Repository.shared_runtime_cache()) == 0

    def test_invalidate_all_keeps_shared_entries(self):
        """Test instance invalidate_all does not clear the shared cache."""
        repo = Repository("a")
        repo.get_or_compute_shared("cfg", lambda: "shared")
        repo.get_or_compute("cfg", lambda: "instance")

        repo.invalidate_all()

        assert repo.get_or_compute_shared("cfg", lambda: "other") == "shared"

    def test_injected_registry(self, registry):
        """Test a class can use an explicit registry instead of the default."""
        class Injected(RuntimeCacheMixin):
            runtime_cache_registry = registry

        Injected.get_or_compute_shared("k", lambda: "injected")

        assert "k" in registry.get_store()
        assert "k" not in get_shared_registry().get_store()

    def test_failure_in_shared_producer_retries(self):
        """Test a failed shared computation leaves no entry."""
        producer = MagicMock(side_effect=[KeyError("missing"), "ok"])

        with pytest.raises(KeyError):
            Repository.get_or_compute_shared("k", producer)

        assert Repository.get_or_compute_shared("k", producer) == "ok"
