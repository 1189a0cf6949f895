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
"""Baseline policy with no ordering."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

from flycache.kernel.exceptions import EmptyPolicyException

K = TypeVar("K", bound=Hashable)


class NoPolicy(Generic[K]):
    """Tracks keys in an unordered set and nominates any one of them.

    Which key is nominated follows the set's iteration order and is not
    guaranteed to be stable. Touches are ignored.
    """

    name = "none"

    def __init__(self) -> None:
        self._keys: set[K] = set()

    def insert(self, key: K) -> None:
        self._keys.add(key)

    def touch(self, key: K) -> None:
        pass

    def erase(self, key: K) -> None:
        self._keys.discard(key)

    def replacement_candidate(self) -> K:
        if not self._keys:
            raise EmptyPolicyException(self.name)
        return next(iter(self._keys))

    def clear(self) -> None:
        self._keys.clear()

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._keys))
