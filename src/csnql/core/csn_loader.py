"""Canonical CSN loader.

Single implementation of the text → JSON → Definitions pipeline. All code
that needs the schema model of a CSN document should import from here.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .classifier import classify_definitions
from .errors import JsonSyntaxError
from .ir.definitions import Definitions

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> None:
    # NaN, Infinity and -Infinity are Python extensions, not JSON
    raise JsonSyntaxError(f"Invalid JSON constant: {name}")


def _reject_lone_surrogates(document: Any) -> None:
    try:
        json.dumps(document, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError as e:
        raise JsonSyntaxError(f"Invalid unicode escape in string: {e}") from e


def load_definitions(csn: str) -> Definitions:
    """Parse CSN text into Definitions.

    The whole document must be valid JSON before any definition is built.
    The first failure aborts the parse; no partial result is returned.

    Args:
        csn: Complete CSN document text.

    Returns:
        Definitions in document order.

    Raises:
        JsonSyntaxError: If the text is not valid JSON.
        StructuralError: If "definitions" or an entity's "elements" is missing.
        TypeTagError: If an element does not decode.
    """
    try:
        document = json.loads(csn, parse_constant=_reject_constant)
        _reject_lone_surrogates(document)
    except json.JSONDecodeError as e:
        raise JsonSyntaxError(str(e)) from e
    except RecursionError as e:
        raise JsonSyntaxError(f"recursion limit exceeded: {e}") from e

    definitions = classify_definitions(document)
    logger.debug(
        f"Loaded {len(definitions.services)} service(s) and "
        f"{len(definitions.entities)} entity(ies)"
    )
    return definitions


def load_definitions_file(path: Path) -> Definitions:
    """Read a UTF-8 CSN file and parse it. See :func:`load_definitions`."""
    logger.debug(f"Reading CSN from {path}")
    try:
        csn = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise JsonSyntaxError(f"Invalid UTF-8 in {path}: {e}") from e
    return load_definitions(csn)
