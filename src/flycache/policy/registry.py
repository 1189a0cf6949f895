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
"""Runtime selection of eviction policies by name."""

from __future__ import annotations

import enum
from collections.abc import Callable
from typing import Any

from flycache.kernel.exceptions import UnknownPolicyException
from flycache.policy.adapters import FIFOPolicy, LIFOPolicy, LRUPolicy, NoPolicy
from flycache.policy.ports import EvictionPolicy


class PolicyKind(str, enum.Enum):
    """Built-in eviction policies."""

    NONE = "none"
    FIFO = "fifo"
    LIFO = "lifo"
    LRU = "lru"


_FACTORIES: dict[PolicyKind, Callable[[], EvictionPolicy[Any]]] = {
    PolicyKind.NONE: NoPolicy,
    PolicyKind.FIFO: FIFOPolicy,
    PolicyKind.LIFO: LIFOPolicy,
    PolicyKind.LRU: LRUPolicy,
}


def resolve_kind(kind: PolicyKind | str) -> PolicyKind:
    """Normalize a policy name (case-insensitive) to a PolicyKind."""
    if isinstance(kind, PolicyKind):
        return kind
    try:
        return PolicyKind(str(kind).strip().lower())
    except ValueError:
        raise UnknownPolicyException(kind, [k.value for k in PolicyKind]) from None


def create_policy(kind: PolicyKind | str) -> EvictionPolicy[Any]:
    """Build a fresh, empty policy of the given kind."""
    return _FACTORIES[resolve_kind(kind)]()


def policy_name(policy: Any) -> str:
    """Short display name of a policy instance."""
    return str(getattr(policy, "name", type(policy).__name__))
