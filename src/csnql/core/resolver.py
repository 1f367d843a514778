"""
Element type resolution.

Decodes a single element description into one of the element kinds by
exact match on its "type" tag.
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from .errors import TypeTagError
from .ir.elements import ElementKind

_ELEMENT_KIND_ADAPTER: TypeAdapter[Any] = TypeAdapter(ElementKind)


def resolve_element_kind(value: Any) -> ElementKind:
    """
    Decode an element description into its kind.

    Sibling fields that are not part of the kind (``key``, annotations)
    are ignored.

    Args:
        value: Decoded JSON for one element, e.g.
            ``{"type": "cds.String", "length": 255, "default": {"val": "n/a"}}``

    Returns:
        UUIDKind, BooleanKind, IntegerKind or StringKind

    Raises:
        TypeTagError: If the tag is unknown or missing, or the payload does
            not match the kind
    """
    try:
        return _ELEMENT_KIND_ADAPTER.validate_python(value)
    except ValidationError as e:
        raise TypeTagError(str(e)) from e
