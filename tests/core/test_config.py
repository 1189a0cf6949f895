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
"""Tests for configuration loading, placeholders and binding."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from flycache.core.config import Config, PropertyBindingError, config_properties


class TestConfig:
    def test_load_from_dict(self):
        config = Config({"app": {"name": "test-service", "port": 8080}})
        assert config.get("app.name") == "test-service"
        assert config.get("app.port") == 8080

    def test_get_with_default(self):
        config = Config({})
        assert config.get("missing.key", "default") == "default"

    def test_falsy_values_are_returned(self):
        config = Config({"flycache": {"cache": {"capacity": 0}}})
        assert config.get("flycache.cache.capacity", 10) == 0

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("FLYCACHE_CACHE_POLICY", "fifo")
        config = Config({"flycache": {"cache": {"policy": "lru"}}})
        assert config.get("flycache.cache.policy") == "fifo"

    def test_get_section(self):
        config = Config({"flycache": {"logging": {"level": {"root": "DEBUG"}}}})
        assert config.get_section("flycache.logging.level") == {"root": "DEBUG"}
        assert config.get_section("flycache.missing") == {}


class TestConfigFiles:
    def test_load_yaml_with_defaults(self, tmp_path: Path):
        path = tmp_path / "flycache.yaml"
        path.write_text("flycache:\n  cache:\n    capacity: 64\n")
        config = Config.from_file(path)
        assert config.get("flycache.cache.capacity") == 64
        assert config.get("flycache.cache.policy") == "lru"
        assert config.loaded_sources[0].startswith("flycache-defaults.yaml")
        assert str(path) in config.loaded_sources

    def test_load_toml(self, tmp_path: Path):
        path = tmp_path / "flycache.toml"
        path.write_text('[flycache.cache]\ncapacity = 32\npolicy = "lifo"\n')
        config = Config.from_file(path, load_defaults=False)
        assert config.get("flycache.cache.capacity") == 32
        assert config.get("flycache.cache.policy") == "lifo"

    def test_profile_overlay(self, tmp_path: Path):
        (tmp_path / "flycache.yaml").write_text("flycache:\n  cache:\n    capacity: 8\n    policy: fifo\n")
        (tmp_path / "flycache-prod.yaml").write_text("flycache:\n  cache:\n    capacity: 4096\n")
        config = Config.from_file(tmp_path / "flycache.yaml", active_profiles=["prod"], load_defaults=False)
        assert config.get("flycache.cache.capacity") == 4096
        assert config.get("flycache.cache.policy") == "fifo"

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.get("flycache.cache.capacity") == 128


class TestPlaceholders:
    def test_resolve_env_var(self, monkeypatch):
        monkeypatch.setenv("CACHE_SIZE", "256")
        config = Config({"flycache": {"cache": {"capacity": "${CACHE_SIZE}"}}})
        assert config.get("flycache.cache.capacity") == "256"

    def test_resolve_config_reference(self):
        config = Config({"base": "lru", "flycache": {"cache": {"policy": "${base}"}}})
        assert config.get("flycache.cache.policy") == "lru"

    def test_resolve_with_default(self):
        config = Config({"key": "${MISSING_VAR_FOR_TEST:fifo}"})
        assert config.get("key") == "fifo"

    def test_unresolvable(self):
        config = Config({"key": "${MISSING_VAR_FOR_TEST}"})
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            config.get("key")

    def test_max_recursion_guard(self):
        config = Config({"a": "${b}", "b": "${a}"})
        with pytest.raises(ValueError, match="[Mm]ax.*recursion"):
            config.get("a")


class TestBind:
    def test_bind_to_dataclass(self):
        @config_properties(prefix="store")
        @dataclass
        class StoreConfig:
            size: int = 5
            ratio: float = 0.5
            strict: bool = False

        config = Config({"store": {"size": "20", "ratio": "0.25", "strict": "yes"}})
        bound = config.bind(StoreConfig)
        assert bound.size == 20
        assert bound.ratio == 0.25
        assert bound.strict is True

    def test_bind_uses_defaults(self):
        @config_properties(prefix="store")
        @dataclass
        class StoreConfig:
            size: int = 5

        assert Config({}).bind(StoreConfig).size == 5

    def test_bind_bad_number(self):
        @config_properties(prefix="store")
        @dataclass
        class StoreConfig:
            size: int = 5

        with pytest.raises(PropertyBindingError, match="store.size") as exc_info:
            Config({"store": {"size": "lots"}}).bind(StoreConfig)
        assert exc_info.value.key == "store.size"
        assert exc_info.value.value == "lots"
        assert isinstance(exc_info.value, ValueError)

    def test_bind_undecorated(self):
        @dataclass
        class Plain:
            size: int = 5

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)
