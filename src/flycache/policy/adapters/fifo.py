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
"""First-in, first-out eviction policy."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

from flycache.kernel.exceptions import EmptyPolicyException
from flycache.policy.sequence import KeySequence

K = TypeVar("K", bound=Hashable)


class FIFOPolicy(Generic[K]):
    """Evicts the oldest inserted key. Access does not affect the order."""

    name = "fifo"

    def __init__(self) -> None:
        self._queue: KeySequence[K] = KeySequence()

    def insert(self, key: K) -> None:
        self._queue.append(key)

    def touch(self, key: K) -> None:
        pass

    def erase(self, key: K) -> None:
        self._queue.discard(key)

    def replacement_candidate(self) -> K:
        if not self._queue:
            raise EmptyPolicyException(self.name)
        return self._queue.oldest()

    def clear(self) -> None:
        self._queue.clear()

    def __len__(self) -> int:
        return len(self._queue)

    def __contains__(self, key: object) -> bool:
        return key in self._queue

    def __iter__(self) -> Iterator[K]:
        """Keys in eviction order, next victim first."""
        return iter(self._queue)
