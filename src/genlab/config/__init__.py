"""Configuration module."""

from genlab.config.loader import get_default_config, load_config
from genlab.config.models import (
    CacheConfig,
    ConfigError,
    GenlabConfig,
    LoggingConfig,
)
from genlab.config.paths import get_config_path, get_genlab_home

__all__ = [
    "CacheConfig",
    "ConfigError",
    "GenlabConfig",
    "LoggingConfig",
    "get_config_path",
    "get_default_config",
    "get_genlab_home",
    "load_config",
]
