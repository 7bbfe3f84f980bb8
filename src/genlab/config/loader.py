"""Configuration loading from TOML files and environment variables."""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from genlab.config.models import ConfigError, GenlabConfig
from genlab.config.paths import get_config_path

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "GENLAB_LOG_LEVEL"


def _get_default_config_paths() -> list[Path]:
    """Get ordered list of default config file locations."""
    return [
        Path("config.toml"),  # Current directory
        get_config_path(),  # ~/.genlab/config.toml (or GENLAB_HOME)
    ]


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides on top of file values."""
    if level := os.environ.get(LOG_LEVEL_ENV_VAR):
        section = config.setdefault("logging", {})
        if not isinstance(section, dict):
            raise ConfigError("[logging] must be a table")
        section["level"] = level
    return config


def load_config(path: Path | None = None, apply_env: bool = True) -> GenlabConfig:
    """Load configuration from a TOML file.

    Args:
        path: Explicit path to config file. If None, searches default
            locations and falls back to defaults when nothing is found.
        apply_env: Apply environment overrides such as GENLAB_LOG_LEVEL.
            Disable to validate the file contents alone.

    Returns:
        Validated GenlabConfig instance.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
        ConfigError: If the file is not valid TOML.
        pydantic.ValidationError: If values fail validation.
    """
    config_path: Path | None = None

    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        for default_path in _get_default_config_paths():
            expanded = default_path.expanduser()
            if expanded.exists():
                config_path = expanded
                break

    if config_path is None:
        logger.debug("No config file found, using defaults")
        return get_default_config()

    try:
        with config_path.open("rb") as f:
            raw_config = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    if apply_env:
        raw_config = _apply_env_overrides(raw_config)

    return GenlabConfig.model_validate(raw_config)


def get_default_config() -> GenlabConfig:
    """Get the default configuration, honoring environment overrides."""
    return GenlabConfig.model_validate(_apply_env_overrides({}))
