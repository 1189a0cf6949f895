# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Fixed-capacity key/value cache with a pluggable eviction policy."""

from __future__ import annotations

import functools
import weakref
from collections.abc import Callable, Hashable, Iterator
from typing import Any, Generic, TypeVar

from flycache.kernel.exceptions import (
    CacheUsageException,
    InvalidCapacityException,
    KeyNotFoundException,
    ReentrantCallException,
)
from flycache.logging.structlog_adapter import get_logger
from flycache.policy.ports import EvictionPolicy
from flycache.policy.registry import PolicyKind, create_policy, policy_name

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

EvictionCallback = Callable[[Any, Any], None]

_logger = get_logger(__name__)

_F = TypeVar("_F", bound=Callable[..., Any])

# id(policy) -> weak reference to the cache the policy is bound to
_policy_owners: dict[int, weakref.ref[Any]] = {}


def _guarded(func: _F) -> _F:
    """Reject the call while the eviction callback is running."""

    @functools.wraps(func)
    def wrapper(self: BoundedCache[Any, Any], *args: Any, **kwargs: Any) -> Any:
        if self._notifying:
            raise ReentrantCallException(func.__name__)
        return func(self, *args, **kwargs)

    return wrapper  # type: ignore[return-value]


def _claim_policy(policy: EvictionPolicy[Any], cache: BoundedCache[Any, Any]) -> None:
    """Record *cache* as the owner of *policy*, refusing a policy already owned.

    Ownership ends when the owning cache is garbage-collected. Tracked by
    identity, so policies need neither hashing nor weakref support.
    """
    slot = id(policy)
    owner_ref = _policy_owners.get(slot)
    owner = owner_ref() if owner_ref is not None else None
    if owner is not None and owner._policy is policy:
        raise CacheUsageException(
            "Eviction policy is already bound to another cache",
            code="CACHE_POLICY_SHARED",
            context={"policy": policy_name(policy)},
        )

    def _release(ref: weakref.ref[Any]) -> None:
        if _policy_owners.get(slot) is ref:
            del _policy_owners[slot]

    _policy_owners[slot] = weakref.ref(cache, _release)


class BoundedCache(Generic[K, V]):
    """In-memory cache holding at most ``capacity`` distinct keys.

    Values live in the cache's own mapping; the eviction policy tracks the
    same key set and decides which key goes when a new key arrives at full
    capacity. Every mutation updates the policy first and the mapping
    second, so the two never disagree between calls.

    Reads through ``get``/``try_get`` and overwrites through ``put`` count
    as a use and are reported to the policy via ``touch``. ``contains``,
    ``len()`` and iteration do not.

    The eviction callback runs synchronously once the entry has left both
    structures, so ``contains``/``size``/iteration inside it see the
    post-removal state. Calling ``put``, ``get``, ``try_get``, ``remove``
    or ``clear`` on the same cache from inside the callback is forbidden
    and raises ReentrantCallException.

    Not thread-safe: callers sharing a cache across threads must wrap the
    whole instance in a lock.

    Args:
        capacity: Maximum number of distinct keys, at least 1.
        policy: An empty policy instance not bound to any other live cache,
            a PolicyKind, a policy name, or None for NoPolicy.
        on_evict: Optional ``callback(key, value)`` invoked for every entry
            removed by eviction, ``remove`` or ``clear``.
    """

    def __init__(
        self,
        capacity: int,
        policy: EvictionPolicy[K] | PolicyKind | str | None = None,
        on_evict: EvictionCallback | None = None,
    ) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise InvalidCapacityException(capacity)

        if policy is None:
            policy = create_policy(PolicyKind.NONE)
        elif isinstance(policy, str):
            policy = create_policy(policy)
        elif len(policy) != 0:
            raise CacheUsageException(
                "Eviction policy must be empty when bound to a cache",
                code="CACHE_POLICY_NOT_EMPTY",
                context={"policy": policy_name(policy), "tracked": len(policy)},
            )
        _claim_policy(policy, self)

        self._capacity = capacity
        self._policy: EvictionPolicy[K] = policy
        self._items: dict[K, V] = {}
        self._on_evict = on_evict
        self._notifying = False

        _logger.debug("cache_created", capacity=capacity, policy=policy_name(policy))

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def policy(self) -> EvictionPolicy[K]:
        """The bound policy. Mutating it directly breaks the cache."""
        return self._policy

    # -- mutation ------------------------------------------------------------

    @_guarded
    def put(self, key: K, value: V) -> None:
        """Insert or overwrite *key*, evicting one entry if the cache is full."""
        if key in self._items:
            self._policy.touch(key)
            self._items[key] = value
            return

        if len(self._items) >= self._capacity:
            victim = self._policy.replacement_candidate()
            _logger.debug("cache_evicted", key=victim, admitted=key, policy=policy_name(self._policy))
            self._unlink(victim)

        self._policy.insert(key)
        self._items[key] = value

    @_guarded
    def remove(self, key: K) -> bool:
        """Remove *key*. Returns whether it was present."""
        if key not in self._items:
            return False
        _logger.debug("cache_entry_removed", key=key)
        self._unlink(key)
        return True

    @_guarded
    def clear(self) -> None:
        """Remove every entry, notifying the eviction callback for each."""
        removed = list(self._items.items())
        self._policy.clear()
        self._items.clear()
        _logger.debug("cache_cleared", removed=len(removed))

        for key, value in removed:
            self._notify(key, value)

    # -- lookup --------------------------------------------------------------

    @_guarded
    def try_get(self, key: K) -> tuple[V | None, bool]:
        """Return ``(value, True)`` on a hit, ``(None, False)`` on a miss."""
        if key not in self._items:
            return None, False
        self._policy.touch(key)
        return self._items[key], True

    @_guarded
    def get(self, key: K) -> V:
        """Return the value for *key*. Raises KeyNotFoundException if absent."""
        if key not in self._items:
            raise KeyNotFoundException(key)
        self._policy.touch(key)
        return self._items[key]

    def contains(self, key: K) -> bool:
        """Membership test that does not count as a use."""
        return key in self._items

    def size(self) -> int:
        return len(self._items)

    def items(self) -> Iterator[tuple[K, V]]:
        """Iterate over a snapshot of the current (key, value) pairs.

        Does not touch the policy; later mutations do not affect an
        iterator already obtained.
        """
        return iter(list(self._items.items()))

    # -- dunder --------------------------------------------------------------

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return self.items()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(policy={policy_name(self._policy)!r}, "
            f"size={len(self._items)}, capacity={self._capacity})"
        )

    # -- internals -----------------------------------------------------------

    def _unlink(self, key: K) -> None:
        self._policy.erase(key)
        value = self._items.pop(key)
        self._notify(key, value)

    def _notify(self, key: K, value: V) -> None:
        if self._on_evict is None:
            return
        self._notifying = True
        try:
            self._on_evict(key, value)
        finally:
            self._notifying = False
