"""
Defensive accessors over a decoded JSON value tree.

Values come straight from ``json.loads``, so any node may be an object,
array, string, number, boolean or null. These helpers never raise on an
unexpected shape except where a field is required.
"""

from __future__ import annotations

from typing import Any

from .errors import StructuralError


def get_field(value: Any, field_name: str) -> Any | None:
    """
    Read a field of an object node.

    Returns None when ``value`` is not an object or has no such field.
    """
    if isinstance(value, dict):
        return value.get(field_name)
    return None


def get_required_object(value: Any, field_name: str, description: str) -> dict[str, Any]:
    """
    Read a field that must hold an object.

    Args:
        value: Node to read from
        field_name: Field to extract
        description: Error description when the field is missing or not an object

    Returns:
        The field's object value

    Raises:
        StructuralError: If ``value`` is not an object or the field is not an object
    """
    field_value = get_field(value, field_name)
    if not isinstance(field_value, dict):
        raise StructuralError(description)
    return field_value
