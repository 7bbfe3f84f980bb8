"""Centralized path management for genlab.

The base directory defaults to ~/.genlab and can be overridden with the
GENLAB_HOME environment variable.
"""

import os
from functools import lru_cache
from pathlib import Path

ENV_VAR = "GENLAB_HOME"


@lru_cache(maxsize=1)
def get_genlab_home() -> Path:
    """Get the base directory for genlab files.

    Resolution order:
    1. GENLAB_HOME environment variable (if set)
    2. Platform default (~/.genlab)
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser().resolve()

    return Path.home() / ".genlab"


def get_config_path() -> Path:
    """Get the default config file path."""
    return get_genlab_home() / "config.toml"
