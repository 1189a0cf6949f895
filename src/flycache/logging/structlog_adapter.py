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
"""Structured event logging for FlyCache, rendered with structlog.

Library modules obtain their logger from :func:`get_logger`. Events are
handed to the stdlib logger of the same name with the event dict as the
record message, so host applications keep full control through stdlib
levels and handlers. :class:`StructlogAdapter` installs a handler on the
``flycache`` logger that renders those records as console lines or JSON.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

from flycache.config.properties.logging import LoggingProperties
from flycache.core.config import Config

LIBRARY_LOGGER = "flycache"

# Applied to every event before it becomes a stdlib record.
_EVENT_PROCESSORS: list[structlog.types.Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


def get_logger(name: str) -> Any:
    """Return a structlog BoundLogger writing to the stdlib logger *name*.

    Independent of structlog's global configuration. Events below the
    logger's effective level are dropped before any processing.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_EVENT_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


class StructlogAdapter:
    """Renders FlyCache events through one handler on the library logger.

    While configured the ``flycache`` logger does not propagate, so events
    are not printed twice by handlers on the root logger.

    Args:
        stream: Where rendered lines go. Defaults to ``sys.stdout`` at
            configure time.
        logger_name: Logger the handler is attached to.
    """

    def __init__(self, stream: IO[str] | None = None, logger_name: str = LIBRARY_LOGGER) -> None:
        self._stream = stream
        self._logger_name = logger_name
        self._handler: logging.Handler | None = None
        self._root_level: str = "INFO"
        self._format: str = "console"
        self._module_levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        """Install the rendering handler from the flycache.logging section."""
        props = config.bind(LoggingProperties)
        level_section = dict(props.level)
        self._root_level = str(level_section.pop("root", "INFO")).upper()
        self._module_levels = {k: str(v).upper() for k, v in level_section.items()}
        self._format = str(props.format).lower()

        self._install_handler()
        self.set_level(self._logger_name, self._root_level)
        for module, level in self._module_levels.items():
            self.set_level(module, level)

    def get_logger(self, name: str) -> Any:
        return get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        """Set the log level for a specific stdlib logger."""
        log_level = getattr(logging, level.upper(), logging.INFO)
        logging.getLogger(name).setLevel(log_level)

    def reset(self) -> None:
        """Remove the handler and restore propagation on the library logger."""
        if self._handler is None:
            return
        library_logger = logging.getLogger(self._logger_name)
        library_logger.removeHandler(self._handler)
        library_logger.propagate = True
        self._handler = None

    def _install_handler(self) -> None:
        self.reset()

        renderer: structlog.types.Processor
        if self._format == "json":
            renderer = structlog.processors.JSONRenderer()
        else:
            renderer = structlog.dev.ConsoleRenderer(colors=False)

        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[structlog.stdlib.add_logger_name, structlog.stdlib.add_log_level],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.TimeStamper(fmt="iso"),
                renderer,
            ],
        )
        handler = logging.StreamHandler(self._stream or sys.stdout)
        handler.setFormatter(formatter)

        library_logger = logging.getLogger(self._logger_name)
        library_logger.addHandler(handler)
        library_logger.propagate = False
        self._handler = handler
