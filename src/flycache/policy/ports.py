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
"""Eviction policy protocol."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Protocol, TypeVar, runtime_checkable

K = TypeVar("K", bound=Hashable)


@runtime_checkable
class EvictionPolicy(Protocol[K]):
    """Key-ordering contract a BoundedCache delegates eviction decisions to.

    A policy tracks keys only, never values. ``insert``, ``touch`` and
    ``erase`` are fail-soft: inserting a tracked key, or touching/erasing
    an untracked one, is a no-op. ``replacement_candidate`` raises
    EmptyPolicyException when nothing is tracked.
    """

    def insert(self, key: K) -> None: ...

    def touch(self, key: K) -> None: ...

    def erase(self, key: K) -> None: ...

    def replacement_candidate(self) -> K: ...

    def clear(self) -> None: ...

    def __len__(self) -> int: ...

    def __contains__(self, key: object) -> bool: ...

    def __iter__(self) -> Iterator[K]: ...
