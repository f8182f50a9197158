"""Configuration loading, schema, and defaults."""

from lmdiff.config.loader import ConfigError, load_config
from lmdiff.config.schema import LmdiffConfig, OutputConfig, ReviewConfig

__all__ = [
    "ConfigError",
    "LmdiffConfig",
    "OutputConfig",
    "ReviewConfig",
    "load_config",
]
