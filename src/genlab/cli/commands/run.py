"""Dispatch ad-hoc tasks through the priority scheduler."""

from pathlib import Path
from typing import Annotated

import typer

from genlab.cli.console import console, dim, error, success


def parse_task_spec(spec: str) -> tuple[str, int]:
    """Split a NAME:PRIORITY argument. The last colon separates the priority.

    Raises:
        ValueError: If the name is empty or the priority is not an integer.
    """
    name, sep, raw_priority = spec.rpartition(":")
    if not sep or not name:
        raise ValueError(f"Invalid task spec {spec!r}, expected NAME:PRIORITY")
    try:
        priority = int(raw_priority)
    except ValueError:
        raise ValueError(
            f"Invalid priority {raw_priority!r} in task spec {spec!r}"
        ) from None
    return name, priority


def register(app: typer.Typer) -> None:
    """Register the run command."""

    @app.command()
    def run(
        ctx: typer.Context,
        tasks: Annotated[
            list[str],
            typer.Argument(help="Tasks as NAME:PRIORITY (higher runs first)"),
        ],
        config: Annotated[
            Path | None,
            typer.Option("--config", "-c", help="Path to configuration file"),
        ] = None,
    ) -> None:
        """Queue tasks and print them in dispatch order."""
        from genlab.cli.runtime import load_runtime_config
        from genlab.scheduling import PriorityScheduler

        load_runtime_config(ctx, config)

        try:
            parsed = [parse_task_spec(spec) for spec in tasks]
        except ValueError as e:
            error(str(e))
            raise typer.Exit(1) from None

        scheduler: PriorityScheduler[str, int] = PriorityScheduler(
            on_empty=lambda: dim("Queue drained")
        )
        for name, priority in parsed:
            scheduler.add_task(name, priority)

        dispatched = 0

        def show(task: str) -> None:
            nonlocal dispatched
            dispatched += 1
            console.print(f"{dispatched}. {task}", markup=False)

        while scheduler.execute_next(show):
            pass

        success(f"Dispatched {dispatched} task(s)")
