"""CLI command modules."""

from genlab.cli.commands import config, demo, run

__all__ = [
    "config",
    "demo",
    "run",
]
