"""Declarative caching decorators backed by a BoundedCache."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from flycache.cache.bounded import BoundedCache

F = TypeVar("F", bound=Callable[..., Any])


def _resolve_key(func: Callable[..., Any], key: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    sig = inspect.signature(func)
    bound = sig.bind(*args, **kwargs)
    bound.apply_defaults()
    return key.format(**bound.arguments)


def cacheable(cache: BoundedCache[str, Any], key: str) -> Callable[[F], F]:
    """Cache the return value, skip execution on cache hit.

    The `key` parameter supports format-string interpolation with function
    argument names. For example, `key="user:{user_id}"` will expand
    `{user_id}` from the function's arguments. A cached ``None`` is a hit.

    Args:
        cache: Cache to read from and populate.
        key: Key template with {param} placeholders.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            resolved_key = _resolve_key(func, key, args, kwargs)

            cached, found = cache.try_get(resolved_key)
            if found:
                return cached

            result = func(*args, **kwargs)
            cache.put(resolved_key, result)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


def cache_put(cache: BoundedCache[str, Any], key: str) -> Callable[[F], F]:
    """Always execute the function and cache the result.

    Unlike :func:`cacheable`, the decorated function is always invoked.
    This is useful for update operations where you want to refresh the
    cached value.

    Args:
        cache: Cache to populate.
        key: Key template with {param} placeholders.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = func(*args, **kwargs)
            cache.put(_resolve_key(func, key, args, kwargs), result)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


def cache_evict(
    cache: BoundedCache[str, Any],
    key: str = "",
    all_entries: bool = False,
) -> Callable[[F], F]:
    """Evict a cache entry (or all entries) after the function returns.

    Args:
        cache: Cache to evict from.
        key: Key template with {param} placeholders. Ignored when *all_entries* is ``True``.
        all_entries: When ``True``, clear the entire cache after execution.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = func(*args, **kwargs)
            if all_entries:
                cache.clear()
            else:
                cache.remove(_resolve_key(func, key, args, kwargs))
            return result

        return wrapper  # type: ignore[return-value]

    return decorator
