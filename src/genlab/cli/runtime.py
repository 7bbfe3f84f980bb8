"""Config and logging bootstrap shared by CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError

from genlab.cli.console import console, error
from genlab.config import ConfigError, GenlabConfig, load_config
from genlab.logging import configure_logging


def load_runtime_config(ctx: typer.Context, path: Path | None) -> GenlabConfig:
    """Load config and configure logging, exiting with code 1 on failure.

    ``--verbose`` on the root command forces DEBUG; otherwise the configured
    level is used.
    """
    try:
        config = load_config(path)
    except FileNotFoundError as e:
        error(str(e))
        raise typer.Exit(1) from None
    except ConfigError as e:
        error(str(e))
        raise typer.Exit(1) from None
    except ValidationError as e:
        error("Configuration validation failed:")
        for err in e.errors():
            loc = ".".join(str(x) for x in err["loc"])
            console.print(f"  [yellow]{loc}[/yellow]: {err['msg']}")
        raise typer.Exit(1) from None

    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    configure_logging("DEBUG" if verbose else config.logging.level)
    return config
