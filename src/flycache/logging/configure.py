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
"""Configuration-driven logging setup."""

from __future__ import annotations

from flycache.config.properties.logging import LoggingProperties
from flycache.core.config import Config
from flycache.logging.port import LoggingPort
from flycache.logging.structlog_adapter import StructlogAdapter

_active: LoggingPort | None = None


def configure_logging(config: Config, adapter: LoggingPort | None = None) -> LoggingPort | None:
    """Apply *config* to FlyCache's log output if ``flycache.logging.enabled`` is true.

    The previously applied adapter is reset first, so repeated calls do not
    stack handlers. Returns the applied adapter (a StructlogAdapter unless
    one is given), or None when logging is left to the host application.
    """
    global _active

    if not config.bind(LoggingProperties).enabled:
        return None

    if _active is not None:
        _active.reset()
    _active = adapter if adapter is not None else StructlogAdapter()
    _active.configure(config)
    return _active


def reset_logging() -> None:
    """Undo the last configure_logging() call."""
    global _active

    if _active is not None:
        _active.reset()
        _active = None
