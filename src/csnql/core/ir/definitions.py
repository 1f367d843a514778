"""
Definition types for the csnql schema model.

This module contains services, entities, and the Definitions aggregate
returned by a parse.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .elements import Element


class Service(BaseModel):
    """
    A named grouping boundary for entities.

    Attributes:
        name: Definition name, the raw source key
    """

    kind: Literal["service"] = "service"
    name: str

    model_config = ConfigDict(frozen=True)


class Entity(BaseModel):
    """
    A named record type composed of elements.

    Attributes:
        name: Definition name, the raw source key (e.g. "CatalogService.Books")
        elements: Elements in source order
    """

    kind: Literal["entity"] = "entity"
    name: str
    elements: tuple[Element, ...] = ()

    model_config = ConfigDict(frozen=True)

    def element(self, name: str) -> Element | None:
        """Get element by name."""
        for element in self.elements:
            if element.name == name:
                return element
        return None

    @property
    def keys(self) -> tuple[Element, ...]:
        """Elements flagged as key."""
        return tuple(e for e in self.elements if e.key)


Definition = Annotated[Service | Entity, Field(discriminator="kind")]


class Definitions(BaseModel):
    """
    Result of parsing a CSN document.

    A read-only sequence of Service and Entity definitions in the order
    the source enumerates them.
    """

    definitions: tuple[Definition, ...] = ()

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_str(cls, csn: str) -> Definitions:
        """Parse CSN text. See :func:`csnql.core.csn_loader.load_definitions`."""
        from csnql.core.csn_loader import load_definitions

        return load_definitions(csn)

    @classmethod
    def from_file(cls, path: Path) -> Definitions:
        """Parse a CSN file. See :func:`csnql.core.csn_loader.load_definitions_file`."""
        from csnql.core.csn_loader import load_definitions_file

        return load_definitions_file(path)

    def __iter__(self) -> Iterator[Service | Entity]:  # type: ignore[override]
        return iter(self.definitions)

    def __len__(self) -> int:
        return len(self.definitions)

    def __getitem__(self, index: int) -> Service | Entity:
        return self.definitions[index]

    def get(self, name: str) -> Service | Entity | None:
        """Get definition by name."""
        for definition in self.definitions:
            if definition.name == name:
                return definition
        return None

    @property
    def services(self) -> list[Service]:
        return [d for d in self.definitions if isinstance(d, Service)]

    @property
    def entities(self) -> list[Entity]:
        return [d for d in self.definitions if isinstance(d, Entity)]

    def get_entity(self, name: str) -> Entity | None:
        """Get entity by name."""
        for entity in self.entities:
            if entity.name == name:
                return entity
        return None
