"""Tests for FlyCache kernel exception hierarchy."""

from flycache.kernel.exceptions import (
    CacheConfigurationException,
    CacheLookupException,
    CacheUsageException,
    EmptyPolicyException,
    FlyCacheException,
    InvalidCapacityException,
    KeyNotFoundException,
    ReentrantCallException,
    UnknownPolicyException,
)


class TestFlyCacheException:
    def test_basic_creation(self):
        exc = FlyCacheException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_code_and_context(self):
        exc = FlyCacheException("bad", code="X_001", context={"key": "k"})
        assert exc.code == "X_001"
        assert exc.context["key"] == "k"

    def test_context_defaults_to_empty_dict(self):
        exc = FlyCacheException("test")
        exc.context["key"] = "value"
        exc2 = FlyCacheException("test2")
        assert exc2.context == {}


class TestExceptionHierarchy:
    def test_categories_are_flycache(self):
        assert issubclass(CacheConfigurationException, FlyCacheException)
        assert issubclass(CacheLookupException, FlyCacheException)
        assert issubclass(CacheUsageException, FlyCacheException)

    def test_configuration_errors(self):
        assert issubclass(InvalidCapacityException, CacheConfigurationException)
        assert issubclass(UnknownPolicyException, CacheConfigurationException)

    def test_lookup_errors(self):
        assert issubclass(KeyNotFoundException, CacheLookupException)
        assert issubclass(KeyNotFoundException, KeyError)

    def test_usage_errors(self):
        assert issubclass(EmptyPolicyException, CacheUsageException)
        assert issubclass(ReentrantCallException, CacheUsageException)


class TestErrorDetails:
    def test_invalid_capacity(self):
        exc = InvalidCapacityException(0)
        assert exc.code == "CACHE_INVALID_CAPACITY"
        assert exc.context == {"capacity": 0}
        assert "0" in str(exc)

    def test_key_not_found_message_is_not_quoted_twice(self):
        exc = KeyNotFoundException("user:1")
        assert str(exc) == "Key not found in cache: 'user:1'"
        assert exc.code == "CACHE_KEY_NOT_FOUND"

    def test_empty_policy(self):
        exc = EmptyPolicyException("lru")
        assert exc.code == "POLICY_EMPTY"
        assert "lru" in str(exc)

    def test_reentrant_call(self):
        exc = ReentrantCallException("put")
        assert exc.code == "CACHE_REENTRANT_CALL"
        assert exc.context == {"operation": "put"}
