"""Main CLI application."""

from typing import Annotated

import typer

from genlab.cli.commands import config, demo, run

app = typer.Typer(
    name="genlab",
    help="genlab - priority scheduler and TTL function cache",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """genlab - priority scheduler and TTL function cache."""
    ctx.obj = {"verbose": verbose}


config.register(app)
demo.register(app)
run.register(app)


if __name__ == "__main__":
    app()
