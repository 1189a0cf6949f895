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
"""Unified exception hierarchy for FlyCache.

All library exceptions inherit from FlyCacheException, so callers can
catch a single base type or target a specific failure.

Categories:
- CacheConfigurationException: invalid construction arguments, non-recoverable
- CacheLookupException: lookups of absent keys, recoverable
- CacheUsageException: programmer errors (misuse of the policy or cache contract)
"""

from __future__ import annotations

from typing import Any


# =============================================================================
# Base Exception
# =============================================================================


class FlyCacheException(Exception):
    """Base exception for all FlyCache errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CACHE_KEY_NOT_FOUND").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Configuration Exceptions
# =============================================================================


class CacheConfigurationException(FlyCacheException):
    """The cache cannot be built from the given arguments."""


class InvalidCapacityException(CacheConfigurationException):
    """Capacity is not a positive integer."""

    def __init__(self, capacity: Any) -> None:
        super().__init__(
            f"Cache capacity must be an integer >= 1, got {capacity!r}",
            code="CACHE_INVALID_CAPACITY",
            context={"capacity": capacity},
        )


class UnknownPolicyException(CacheConfigurationException):
    """No eviction policy is registered under the requested name."""

    def __init__(self, policy: Any, available: list[str]) -> None:
        super().__init__(
            f"Unknown eviction policy {policy!r}; expected one of {', '.join(available)}",
            code="CACHE_UNKNOWN_POLICY",
            context={"policy": policy, "available": available},
        )


# =============================================================================
# Lookup Exceptions
# =============================================================================


class CacheLookupException(FlyCacheException):
    """A lookup could not be satisfied."""


class KeyNotFoundException(CacheLookupException, KeyError):
    """The requested key is not held by the cache."""

    def __init__(self, key: Any) -> None:
        super().__init__(
            f"Key not found in cache: {key!r}",
            code="CACHE_KEY_NOT_FOUND",
            context={"key": key},
        )

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


# =============================================================================
# Usage Exceptions
# =============================================================================


class CacheUsageException(FlyCacheException):
    """The cache or policy contract was violated by the caller."""


class EmptyPolicyException(CacheUsageException):
    """A replacement candidate was requested from a policy tracking no keys."""

    def __init__(self, policy: str) -> None:
        super().__init__(
            f"No keys available for replacement ({policy})",
            code="POLICY_EMPTY",
            context={"policy": policy},
        )


class ReentrantCallException(CacheUsageException):
    """The cache was mutated from inside its own eviction callback."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"'{operation}' called on the cache from within its eviction callback",
            code="CACHE_REENTRANT_CALL",
            context={"operation": operation},
        )
