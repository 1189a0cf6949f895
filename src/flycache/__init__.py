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
"""FlyCache — bounded in-memory key/value cache with pluggable eviction policies."""

from flycache.cache import BoundedCache, build_cache, cache_evict, cache_put, cacheable
from flycache.core.config import Config, PropertyBindingError
from flycache.kernel.exceptions import (
    EmptyPolicyException,
    FlyCacheException,
    InvalidCapacityException,
    KeyNotFoundException,
    ReentrantCallException,
    UnknownPolicyException,
)
from flycache.logging import configure_logging, reset_logging
from flycache.policy import (
    EvictionPolicy,
    FIFOPolicy,
    LIFOPolicy,
    LRUPolicy,
    NoPolicy,
    PolicyKind,
    create_policy,
)

__version__ = "0.1.0"

__all__ = [
    "BoundedCache",
    "Config",
    "EmptyPolicyException",
    "EvictionPolicy",
    "FIFOPolicy",
    "FlyCacheException",
    "InvalidCapacityException",
    "KeyNotFoundException",
    "LIFOPolicy",
    "LRUPolicy",
    "NoPolicy",
    "PolicyKind",
    "PropertyBindingError",
    "ReentrantCallException",
    "UnknownPolicyException",
    "build_cache",
    "cache_evict",
    "cache_put",
    "cacheable",
    "configure_logging",
    "create_policy",
    "reset_logging",
]
