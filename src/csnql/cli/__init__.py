"""
csnql CLI Package.

- schema.py: inspect command
- query.py: select command
- common.py: Shared helpers

Entry point: ``csnql`` (see ``main``).
"""

from __future__ import annotations

import logging
import sys

import typer

from csnql._version import get_version
from csnql.cli.query import select_command
from csnql.cli.schema import inspect_command


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        typer.echo(f"csnql {get_version()}")
        raise typer.Exit()


app = typer.Typer(
    help="csnql – inspect CSN schema documents and render SELECT queries",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """csnql CLI main callback for global options."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


app.command(name="inspect")(inspect_command)
app.command(name="select")(select_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main", "version_callback"]


if __name__ == "__main__":
    main(sys.argv[1:])
