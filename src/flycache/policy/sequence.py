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
"""Ordered key storage with O(1) removal from any position."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Any, Generic, TypeVar

K = TypeVar("K", bound=Hashable)

# Marks a vacated slot. Keys may legitimately be None, so a private object is used.
_VACANT: Any = object()

# Compaction is skipped for small sequences.
_MIN_COMPACT = 32


class KeySequence(Generic[K]):
    """Dense list of key slots plus a key -> slot index.

    Keys are appended at the "newest" end. Removing a key from the middle
    leaves a vacant slot behind instead of shifting the list; vacancies at
    either end are trimmed straight away so both ends always hold live
    keys, and the list is compacted once vacancies outnumber live keys.
    All operations are amortized O(1).
    """

    __slots__ = ("_slots", "_index", "_head", "_vacant")

    def __init__(self) -> None:
        self._slots: list[Any] = []
        self._index: dict[K, int] = {}
        self._head = 0
        self._vacant = 0

    def append(self, key: K) -> bool:
        """Add *key* at the newest end. Returns False if it is already present."""
        if key in self._index:
            return False
        self._index[key] = len(self._slots)
        self._slots.append(key)
        return True

    def discard(self, key: K) -> bool:
        """Remove *key* wherever it is. Returns False if it was not present."""
        slot = self._index.pop(key, None)
        if slot is None:
            return False

        if not self._index:
            self.clear()
            return True

        self._slots[slot] = _VACANT
        self._vacant += 1
        self._trim()
        dead = self._head + self._vacant
        if dead > _MIN_COMPACT and dead > len(self._index):
            self._compact()
        return True

    def move_to_end(self, key: K) -> bool:
        """Relocate a present *key* to the newest end. Returns False if absent."""
        if key not in self._index:
            return False
        if self._index[key] == len(self._slots) - 1:
            return True
        self.discard(key)
        self.append(key)
        return True

    def oldest(self) -> K:
        """Key at the oldest end. Raises IndexError when empty."""
        if not self._index:
            raise IndexError("oldest() on an empty KeySequence")
        return self._slots[self._head]

    def newest(self) -> K:
        """Key at the newest end. Raises IndexError when empty."""
        if not self._index:
            raise IndexError("newest() on an empty KeySequence")
        return self._slots[-1]

    def clear(self) -> None:
        self._slots.clear()
        self._index.clear()
        self._head = 0
        self._vacant = 0

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[K]:
        """Iterate from oldest to newest over a snapshot of the live keys."""
        return iter([k for k in self._slots[self._head :] if k is not _VACANT])

    def __repr__(self) -> str:
        return f"KeySequence({list(self)!r})"

    # -- internals -----------------------------------------------------------

    def _trim(self) -> None:
        while self._slots[-1] is _VACANT:
            self._slots.pop()
            self._vacant -= 1
        while self._slots[self._head] is _VACANT:
            self._head += 1
            self._vacant -= 1

    def _compact(self) -> None:
        live = [k for k in self._slots[self._head :] if k is not _VACANT]
        self._slots = live
        self._index = {k: i for i, k in enumerate(live)}
        self._head = 0
        self._vacant = 0
