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
"""Tests for the eviction policy adapters."""

import pytest

from flycache.kernel.exceptions import EmptyPolicyException
from flycache.policy import EvictionPolicy, FIFOPolicy, LIFOPolicy, LRUPolicy, NoPolicy

ALL_POLICIES = [NoPolicy, FIFOPolicy, LIFOPolicy, LRUPolicy]


@pytest.mark.parametrize("policy_cls", ALL_POLICIES)
class TestPolicyContract:
    def test_satisfies_protocol(self, policy_cls):
        assert isinstance(policy_cls(), EvictionPolicy)

    def test_empty_candidate_raises(self, policy_cls):
        policy = policy_cls()
        with pytest.raises(EmptyPolicyException) as exc_info:
            policy.replacement_candidate()
        assert exc_info.value.code == "POLICY_EMPTY"
        assert exc_info.value.context["policy"] == policy_cls.name

    def test_insert_is_idempotent(self, policy_cls):
        policy = policy_cls()
        policy.insert("a")
        policy.insert("a")
        assert len(policy) == 1
        policy.erase("a")
        assert len(policy) == 0
        assert "a" not in policy

    def test_touch_untracked_is_noop(self, policy_cls):
        policy = policy_cls()
        policy.touch("ghost")
        assert len(policy) == 0
        policy.insert("a")
        policy.touch("ghost")
        assert list(policy) == ["a"]

    def test_erase_untracked_is_noop(self, policy_cls):
        policy = policy_cls()
        policy.insert("a")
        policy.erase("ghost")
        assert list(policy) == ["a"]

    def test_candidate_is_tracked_and_not_removed(self, policy_cls):
        policy = policy_cls()
        for k in (1, 2, 3):
            policy.insert(k)
        candidate = policy.replacement_candidate()
        assert candidate in {1, 2, 3}
        assert candidate in policy
        assert len(policy) == 3

    def test_clear(self, policy_cls):
        policy = policy_cls()
        for k in range(5):
            policy.insert(k)
        policy.clear()
        assert len(policy) == 0
        with pytest.raises(EmptyPolicyException):
            policy.replacement_candidate()


class TestFIFOPolicy:
    def test_candidate_is_oldest(self):
        policy = FIFOPolicy()
        for k in ("a", "b", "c"):
            policy.insert(k)
        assert policy.replacement_candidate() == "a"

    def test_touch_does_not_reorder(self):
        policy = FIFOPolicy()
        for k in ("a", "b", "c"):
            policy.insert(k)
        policy.touch("a")
        assert policy.replacement_candidate() == "a"
        assert list(policy) == ["a", "b", "c"]

    def test_erase_out_of_order(self):
        policy = FIFOPolicy()
        for k in ("a", "b", "c"):
            policy.insert(k)
        policy.erase("b")
        assert list(policy) == ["a", "c"]
        policy.erase("a")
        assert policy.replacement_candidate() == "c"


class TestLIFOPolicy:
    def test_candidate_is_newest(self):
        policy = LIFOPolicy()
        for k in ("a", "b", "c"):
            policy.insert(k)
        assert policy.replacement_candidate() == "c"

    def test_touch_does_not_reorder(self):
        policy = LIFOPolicy()
        for k in ("a", "b", "c"):
            policy.insert(k)
        policy.touch("a")
        assert policy.replacement_candidate() == "c"

    def test_iterates_in_eviction_order(self):
        policy = LIFOPolicy()
        for k in ("a", "b", "c"):
            policy.insert(k)
        assert list(policy) == ["c", "b", "a"]

    def test_erase_newest_exposes_previous(self):
        policy = LIFOPolicy()
        for k in ("a", "b", "c"):
            policy.insert(k)
        policy.erase("c")
        assert policy.replacement_candidate() == "b"


class TestLRUPolicy:
    def test_candidate_is_least_recent(self):
        policy = LRUPolicy()
        for k in ("a", "b", "c"):
            policy.insert(k)
        assert policy.replacement_candidate() == "a"

    def test_touch_moves_to_most_recent(self):
        policy = LRUPolicy()
        for k in ("a", "b", "c"):
            policy.insert(k)
        policy.touch("a")
        assert policy.replacement_candidate() == "b"
        assert list(policy) == ["b", "c", "a"]

    def test_reinsert_does_not_refresh(self):
        policy = LRUPolicy()
        policy.insert("a")
        policy.insert("b")
        policy.insert("a")
        assert policy.replacement_candidate() == "a"

    def test_erase_then_insert_is_most_recent(self):
        policy = LRUPolicy()
        for k in ("a", "b"):
            policy.insert(k)
        policy.erase("a")
        policy.insert("a")
        assert list(policy) == ["b", "a"]


class TestNoPolicy:
    def test_touch_has_no_effect(self):
        policy = NoPolicy()
        for k in range(3):
            policy.insert(k)
        before = set(policy)
        policy.touch(1)
        assert set(policy) == before

    def test_candidate_drains_every_key(self):
        policy = NoPolicy()
        keys = {"x", "y", "z"}
        for k in keys:
            policy.insert(k)
        seen = set()
        while len(policy):
            victim = policy.replacement_candidate()
            assert victim in policy
            seen.add(victim)
            policy.erase(victim)
        assert seen == keys
