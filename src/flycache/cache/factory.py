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
"""Build caches from configuration."""

from __future__ import annotations

from typing import Any

from flycache.cache.bounded import BoundedCache, EvictionCallback
from flycache.config.properties.cache import CacheProperties
from flycache.core.config import Config, PropertyBindingError
from flycache.kernel.exceptions import InvalidCapacityException
from flycache.logging.configure import configure_logging

_CAPACITY_KEY = "flycache.cache.capacity"


def build_cache(config: Config, on_evict: EvictionCallback | None = None) -> BoundedCache[Any, Any]:
    """Create a BoundedCache from the ``flycache.cache`` section of *config*.

    Logging is configured first when ``flycache.logging.enabled`` is set.
    Raises InvalidCapacityException or UnknownPolicyException when the
    configured values are unusable, whether they come from files or from
    environment overrides.
    """
    configure_logging(config)

    try:
        props = config.bind(CacheProperties)
    except PropertyBindingError as exc:
        if exc.key == _CAPACITY_KEY:
            raise InvalidCapacityException(exc.value) from exc
        raise

    return BoundedCache(props.capacity, policy=props.policy, on_evict=on_evict)
