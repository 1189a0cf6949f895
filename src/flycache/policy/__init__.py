"""FlyCache Policy — pluggable eviction policies for BoundedCache."""

from flycache.policy.adapters import FIFOPolicy, LIFOPolicy, LRUPolicy, NoPolicy
from flycache.policy.ports import EvictionPolicy
from flycache.policy.registry import PolicyKind, create_policy
from flycache.policy.sequence import KeySequence

__all__ = [
    "EvictionPolicy",
    "FIFOPolicy",
    "KeySequence",
    "LIFOPolicy",
    "LRUPolicy",
    "NoPolicy",
    "PolicyKind",
    "create_policy",
]
