"""
Definition classification.

Walks the top-level "definitions" object of a CSN document and builds
Service and Entity definitions from the entries it recognizes.
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import MISSING_DEFINITIONS, MISSING_ELEMENTS
from .ir.definitions import Definitions, Entity, Service
from .ir.elements import Element
from .navigator import get_field, get_required_object
from .resolver import resolve_element_kind

logger = logging.getLogger(__name__)

SERVICE_KIND = "service"
ENTITY_KIND = "entity"


def classify_definitions(document: Any) -> Definitions:
    """
    Build Definitions from a decoded CSN document.

    Entries whose "kind" is neither "service" nor "entity" (types,
    actions, aspects, ...) are skipped.

    Raises:
        StructuralError: If "definitions" is missing, or an entity has no "elements"
        TypeTagError: If any element fails to decode
    """
    source = get_required_object(document, "definitions", MISSING_DEFINITIONS)

    definitions: list[Service | Entity] = []
    for name, value in source.items():
        kind = get_field(value, "kind")
        if kind == SERVICE_KIND:
            definitions.append(Service(name=name))
        elif kind == ENTITY_KIND:
            definitions.append(_build_entity(name, value))
        else:
            logger.debug(f"Skipping definition {name!r} of kind {kind!r}")

    return Definitions(definitions=tuple(definitions))


def _build_entity(name: str, value: Any) -> Entity:
    source = get_required_object(value, "elements", MISSING_ELEMENTS)

    elements = [
        Element(
            name=element_name,
            key=get_field(element_value, "key") is True,
            kind=resolve_element_kind(element_value),
        )
        for element_name, element_value in source.items()
    ]
    return Entity(name=name, elements=tuple(elements))
