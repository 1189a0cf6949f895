"""FlyCache Logging — structured events and their output adapters."""

from flycache.logging.configure import configure_logging, reset_logging
from flycache.logging.port import LoggingPort
from flycache.logging.structlog_adapter import StructlogAdapter, get_logger

__all__ = ["LoggingPort", "StructlogAdapter", "configure_logging", "get_logger", "reset_logging"]
