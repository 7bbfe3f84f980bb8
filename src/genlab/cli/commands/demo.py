"""Walkthrough of the cache and scheduler."""

from pathlib import Path
from typing import Annotated

import typer

from genlab.cli.console import console, dim, heading


def register(app: typer.Typer) -> None:
    """Register the demo command."""

    @app.command()
    def demo(
        ctx: typer.Context,
        ttl: Annotated[
            float | None,
            typer.Option(
                "--ttl",
                help="Cache TTL in seconds (default: cache.default_ttl_seconds)",
            ),
        ] = None,
        config: Annotated[
            Path | None,
            typer.Option("--config", "-c", help="Path to configuration file"),
        ] = None,
    ) -> None:
        """Memoize square(4) twice, then dispatch two prioritized tasks."""
        from genlab.caching import FunctionCache
        from genlab.cli.runtime import load_runtime_config
        from genlab.scheduling import PriorityScheduler

        config_obj = load_runtime_config(ctx, config)
        ttl_seconds = ttl if ttl is not None else config_obj.cache.default_ttl_seconds

        heading("FUNCTION CACHE")
        cache: FunctionCache[int, int] = FunctionCache(**config_obj.cache_kwargs())

        def square(x: int) -> int:
            console.print("Calculating...")
            return x * x

        console.print(cache.execute(4, square, ttl_seconds))
        console.print(cache.execute(4, square, ttl_seconds))

        console.print()
        heading("TASK SCHEDULER")
        scheduler: PriorityScheduler[str, int] = PriorityScheduler(
            on_empty=lambda: dim("No tasks to execute")
        )
        scheduler.add_task("Low priority task", 1)
        scheduler.add_task("High priority task", 10)

        scheduler.execute_next(console.print)
        scheduler.execute_next(console.print)
