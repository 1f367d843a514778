"""
csnql schema model types.

Types are organized into submodules and re-exported from this package.
"""

# Definitions
from .definitions import (
    Definition,
    Definitions,
    Entity,
    Service,
)

# Elements
from .elements import (
    BOOLEAN_TAG,
    INTEGER_TAG,
    STRING_TAG,
    TYPE_TAGS,
    UUID_TAG,
    BooleanKind,
    DefaultValue,
    Element,
    ElementKind,
    IntegerKind,
    StringKind,
    UUIDKind,
    Val,
)

__all__ = [
    # Definitions
    "Definition",
    "Definitions",
    "Entity",
    "Service",
    # Elements
    "BOOLEAN_TAG",
    "INTEGER_TAG",
    "STRING_TAG",
    "TYPE_TAGS",
    "UUID_TAG",
    "BooleanKind",
    "DefaultValue",
    "Element",
    "ElementKind",
    "IntegerKind",
    "StringKind",
    "UUIDKind",
    "Val",
]
