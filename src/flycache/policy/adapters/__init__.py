"""Eviction policy adapters — concrete key-ordering strategies."""

from flycache.policy.adapters.fifo import FIFOPolicy
from flycache.policy.adapters.lifo import LIFOPolicy
from flycache.policy.adapters.lru import LRUPolicy
from flycache.policy.adapters.none import NoPolicy

__all__ = ["FIFOPolicy", "LIFOPolicy", "LRUPolicy", "NoPolicy"]
