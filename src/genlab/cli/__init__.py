"""Command-line interface."""

from genlab.cli.app import app

__all__ = ["app"]
