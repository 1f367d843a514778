"""Shared CLI helpers."""

from __future__ import annotations

from pathlib import Path

import typer

from csnql.core.csn_loader import load_definitions_file
from csnql.core.errors import CsnqlError
from csnql.core.ir import Definitions
from csnql.core.manifest import load_manifest


def resolve_schema_path(csn_path: Path | None, manifest: str) -> Path:
    """Return the CSN file to read.

    An explicit path wins; otherwise the ``[schema] path`` of the manifest
    is used. Exits with code 1 if neither resolves to a file.
    """
    if csn_path is None:
        try:
            csn_path = load_manifest(Path(manifest).resolve()).schema_path
        except CsnqlError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(code=1)

    if not csn_path.is_file():
        typer.echo(f"CSN file not found: {csn_path}", err=True)
        raise typer.Exit(code=1)
    return csn_path


def load_schema(csn_path: Path | None, manifest: str) -> Definitions:
    """Load Definitions for a CLI command, exiting with code 1 on failure."""
    path = resolve_schema_path(csn_path, manifest)
    try:
        return load_definitions_file(path)
    except CsnqlError as e:
        typer.echo(f"Failed to load {path}: {e}", err=True)
        raise typer.Exit(code=1)
