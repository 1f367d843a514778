"""
Schema commands for csnql CLI.

- inspect: Show the services, entities and elements of a CSN document
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from csnql.cli.common import load_schema
from csnql.core.ir import Definitions, Element, Entity

console = Console()


def _describe_element(element: Element) -> str:
    parts = [f"[bold]{escape(element.name)}[/bold]", element.type_tag]
    length = getattr(element.kind, "length", None)
    if length is not None:
        parts.append(f"({length})")
    if element.key:
        parts.append("[yellow]key[/yellow]")
    default = element.kind.default_value
    if default is not None:
        parts.append(f"default={escape(repr(default))}")
    return " ".join(parts)


def _entity_tree(entity: Entity) -> Tree:
    tree = Tree(f"[cyan]entity[/cyan] {escape(entity.name)}")
    for element in entity.elements:
        tree.add(_describe_element(element))
    return tree


def _schema_tree(definitions: Definitions, title: str) -> Tree:
    tree = Tree(f"[bold]{escape(title)}[/bold]")
    for service in definitions.services:
        tree.add(f"[magenta]service[/magenta] {escape(service.name)}")
    for entity in definitions.entities:
        tree.add(_entity_tree(entity))
    return tree


def inspect_command(
    csn_path: Annotated[
        Path | None, typer.Argument(help="CSN file (default: [schema] path in csnql.toml)")
    ] = None,
    manifest: Annotated[str, typer.Option("--manifest", "-m")] = "csnql.toml",
    entity: Annotated[
        str | None, typer.Option("--entity", "-e", help="Inspect a specific entity")
    ] = None,
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: 'tree' or 'json'")
    ] = "tree",
) -> None:
    """
    Inspect services, entities and elements of a CSN document.
    """
    if format not in ("tree", "json"):
        typer.echo(f"Unknown format: {format}", err=True)
        raise typer.Exit(code=1)

    definitions = load_schema(csn_path, manifest)

    if entity:
        found = definitions.get_entity(entity)
        if found is None:
            typer.echo(f"Entity not found: {entity}", err=True)
            raise typer.Exit(code=1)
        if format == "json":
            typer.echo(json.dumps(found.model_dump(mode="json"), indent=2))
        else:
            console.print(_entity_tree(found))
        return

    if format == "json":
        typer.echo(json.dumps(definitions.model_dump(mode="json"), indent=2))
    else:
        console.print(_schema_tree(definitions, str(csn_path or manifest)))
        console.print(
            f"\n[dim]{len(definitions.services)} service(s), "
            f"{len(definitions.entities)} entity(ies)[/dim]"
        )
