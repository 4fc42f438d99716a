"""Runtime cached decorator.

ONLY function memoization - routes calls of a decorated function or
method through a runtime cache store.

Following maximum separation architecture - one file = one purpose.
"""

import functools
from typing import Any, Callable, List, Optional, TypeVar, Union

from ..core.value_objects.cache_scope import CacheScope
from ..infrastructure.registry.shared_cache_registry import (
    SharedCacheRegistry,
    get_shared_registry,
)
from ..infrastructure.stores.memory_runtime_store import RuntimeCacheStore
from ..mixins.runtime_cache_mixin import RuntimeCacheMixin

F = TypeVar("F", bound=Callable[..., Any])


def runtime_cached(
    func: Optional[F] = None,
    *,
    scope: Union[CacheScope, str] = CacheScope.INSTANCE,
    key: Optional[Callable[..., Any]] = None,
    namespace: Optional[str] = None,
    registry: Optional[SharedCacheRegistry] = None,
):
    """Memoize a function in a runtime cache.

    With ``scope=INSTANCE`` (the default) the decorated callable must be a
    method of a RuntimeCacheMixin subclass and results live in the
    instance cache. With ``scope=SHARED`` results live in the shared store
    for ``namespace``.

    The default key is the function's qualified name followed by the
    positional arguments (minus ``self`` for instance scope) and
    ``name=value`` pairs for keyword arguments in sorted order. A custom
    ``key`` callable receives the same arguments as the function and its
    result is used as the raw key unchanged.

    The wrapper exposes ``cache_key(*args, **kwargs)`` and
    ``invalidate(*args, **kwargs)``.

    Example:
        class Catalog(RuntimeCacheMixin):
            @runtime_cached
            def product(self, sku):
                return load_product(sku)

        @runtime_cached(scope="shared")
        def exchange_rate(currency):
            return fetch_rate(currency)
    """
    scope = CacheScope(scope)

    def decorator(fn: F) -> F:
        qualified_name = f"{fn.__module__}.{fn.__qualname__}"

        def cache_key(*args, **kwargs) -> Any:
            if key is not None:
                return key(*args, **kwargs)

            arguments = args[1:] if scope is CacheScope.INSTANCE else args
            parts: List[Any] = [qualified_name, *arguments]
            parts.extend(f"{name}={kwargs[name]}" for name in sorted(kwargs))
            return parts

        def resolve_store(args) -> RuntimeCacheStore:
            if scope is CacheScope.SHARED:
                return (registry or get_shared_registry()).get_store(namespace)

            if not args or not isinstance(args[0], RuntimeCacheMixin):
                raise TypeError(
                    f"{qualified_name} uses instance-scoped runtime caching and "
                    f"must be a method of a RuntimeCacheMixin subclass"
                )
            return args[0].instance_runtime_cache

        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            return resolve_store(args).get_or_compute(
                cache_key(*args, **kwargs),
                lambda: fn(*args, **kwargs),
            )

        def invalidate(*args, **kwargs) -> None:
            resolve_store(args).invalidate(cache_key(*args, **kwargs))

        wrapper.cache_key = cache_key
        wrapper.invalidate = invalidate
        return wrapper

    if func is not None:
        return decorator(func)
    return decorator
