"""Shared console utilities for CLI commands."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Shared console instance for all CLI commands
console = Console()


def error(msg: str) -> None:
    """Print an error message in red."""
    console.print(f"[red]{escape(msg)}[/red]")


def success(msg: str) -> None:
    """Print a success message in green."""
    console.print(f"[green]{escape(msg)}[/green]")


def dim(msg: str) -> None:
    """Print a dimmed message."""
    console.print(f"[dim]{escape(msg)}[/dim]")


def heading(msg: str) -> None:
    """Print a section heading."""
    console.print(f"[bold]=== {escape(msg)} ===[/bold]")


def create_table(title: str, columns: list[tuple[str, str]]) -> Table:
    """Create a styled table from (name, style) column pairs."""
    table = Table(title=title)
    for name, style in columns:
        table.add_column(name, style=style)
    return table
