"""FlyCache Core — configuration."""

from flycache.core.config import Config, PropertyBindingError, config_properties

__all__ = ["Config", "PropertyBindingError", "config_properties"]
