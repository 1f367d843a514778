"""
Query commands for csnql CLI.

- select: Render a SELECT statement
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from csnql.cli.common import load_schema
from csnql.query import Select


def select_command(
    source: Annotated[
        str | None, typer.Argument(help="Table or entity name to select from")
    ] = None,
    column: list[str] | None = typer.Option(
        None, "--column", "-c", help="Column to select (repeatable)"
    ),
    where: Annotated[
        str | None,
        typer.Option("--where", "-w", help="Filter tokens, separated by whitespace"),
    ] = None,
    entity: Annotated[
        str | None,
        typer.Option("--entity", "-e", help="Select all elements of an entity in the schema"),
    ] = None,
    csn_path: Annotated[Path | None, typer.Option("--csn", help="CSN file")] = None,
    manifest: Annotated[str, typer.Option("--manifest", "-m")] = "csnql.toml",
) -> None:
    """
    Render a SELECT statement as SQL.
    """
    if entity and source:
        typer.echo("Pass either SOURCE or --entity, not both", err=True)
        raise typer.Exit(code=1)

    if entity:
        definitions = load_schema(csn_path, manifest)
        found = definitions.get_entity(entity)
        if found is None:
            typer.echo(f"Entity not found: {entity}", err=True)
            raise typer.Exit(code=1)
        select = Select.from_entity(found)
    elif source:
        select = Select.from_(source)
    else:
        typer.echo("Missing SOURCE or --entity", err=True)
        raise typer.Exit(code=1)

    if column:
        select = select.columns(column)
    if where:
        select = select.filter(where.split())

    typer.echo(select.to_sql())
