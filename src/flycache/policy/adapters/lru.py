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
"""Least-recently-used eviction policy."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

from flycache.kernel.exceptions import EmptyPolicyException
from flycache.policy.sequence import KeySequence

K = TypeVar("K", bound=Hashable)


class LRUPolicy(Generic[K]):
    """Evicts the key that has gone longest without an insert or touch.

    The recency sequence runs from least to most recently used; a touch
    relocates the key to the most-recent end in amortized O(1).
    """

    name = "lru"

    def __init__(self) -> None:
        self._recency: KeySequence[K] = KeySequence()

    def insert(self, key: K) -> None:
        self._recency.append(key)

    def touch(self, key: K) -> None:
        self._recency.move_to_end(key)

    def erase(self, key: K) -> None:
        self._recency.discard(key)

    def replacement_candidate(self) -> K:
        if not self._recency:
            raise EmptyPolicyException(self.name)
        return self._recency.oldest()

    def clear(self) -> None:
        self._recency.clear()

    def __len__(self) -> int:
        return len(self._recency)

    def __contains__(self, key: object) -> bool:
        return key in self._recency

    def __iter__(self) -> Iterator[K]:
        """Keys in eviction order, least recently used first."""
        return iter(self._recency)
