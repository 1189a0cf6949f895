"""FlyCache Cache — bounded key/value cache with pluggable eviction."""

from flycache.cache.bounded import BoundedCache, EvictionCallback
from flycache.cache.decorators import cache_evict, cache_put, cacheable
from flycache.cache.factory import build_cache

__all__ = [
    "BoundedCache",
    "EvictionCallback",
    "build_cache",
    "cache_evict",
    "cache_put",
    "cacheable",
]
