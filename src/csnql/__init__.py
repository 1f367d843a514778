"""
csnql - typed loader for core schema notation (CSN) documents.

Parses the JSON schema interchange format into an immutable model of
services, entities and elements, and renders SELECT queries over it.
"""

from __future__ import annotations

from ._version import __version__

# Re-export commonly used types for convenience
from .core import ir
from .core.csn_loader import load_definitions, load_definitions_file
from .core.errors import (
    CsnqlError,
    DeserializationError,
    JsonSyntaxError,
    ManifestError,
    StructuralError,
    TypeTagError,
)
from .core.ir import Definitions, Element, Entity, Service
from .query import Select

__all__ = [
    "__version__",
    "ir",
    "load_definitions",
    "load_definitions_file",
    "Definitions",
    "Element",
    "Entity",
    "Service",
    "Select",
    "CsnqlError",
    "DeserializationError",
    "JsonSyntaxError",
    "ManifestError",
    "StructuralError",
    "TypeTagError",
]
