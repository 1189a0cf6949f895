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
"""Tests for runtime policy selection."""

import pytest

from flycache.kernel.exceptions import UnknownPolicyException
from flycache.policy import FIFOPolicy, LIFOPolicy, LRUPolicy, NoPolicy, PolicyKind, create_policy
from flycache.policy.registry import policy_name


class TestCreatePolicy:
    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (PolicyKind.NONE, NoPolicy),
            (PolicyKind.FIFO, FIFOPolicy),
            (PolicyKind.LIFO, LIFOPolicy),
            (PolicyKind.LRU, LRUPolicy),
        ],
    )
    def test_from_kind(self, kind, expected):
        assert isinstance(create_policy(kind), expected)

    @pytest.mark.parametrize("name", ["lru", "LRU", " Lru "])
    def test_from_name_is_case_insensitive(self, name):
        assert isinstance(create_policy(name), LRUPolicy)

    def test_returns_fresh_instances(self):
        assert create_policy("fifo") is not create_policy("fifo")

    def test_unknown_name(self):
        with pytest.raises(UnknownPolicyException) as exc_info:
            create_policy("mru")
        assert exc_info.value.code == "CACHE_UNKNOWN_POLICY"
        assert exc_info.value.context["available"] == ["none", "fifo", "lifo", "lru"]


class TestPolicyName:
    def test_builtin(self):
        assert policy_name(LRUPolicy()) == "lru"

    def test_custom_policy_falls_back_to_class_name(self):
        class RandomPolicy:
            pass

        assert policy_name(RandomPolicy()) == "RandomPolicy"
