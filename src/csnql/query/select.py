"""
SELECT builder.

Assembles a SELECT statement from a source name, optional column list and
optional filter tokens. Tokens are joined verbatim; no quoting, escaping
or validation is applied.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Protocol

from csnql.core.ir.definitions import Entity


class CQN(Protocol):
    """A query that can render itself as SQL text."""

    def to_sql(self) -> str: ...


@dataclass(frozen=True)
class Select:
    """
    Fluent SELECT query.

    Example:
        Select.from_("example_entity").columns(["col1", "col2"]).filter(["a", ">", "2"])
    """

    source: str
    column_names: tuple[str, ...] = ()
    filter_tokens: tuple[str, ...] = ()

    @classmethod
    def from_(cls, source: str) -> Select:
        return cls(source=source)

    @classmethod
    def from_entity(cls, entity: Entity) -> Select:
        """Select every element of an entity."""
        return cls(source=entity.name, column_names=tuple(e.name for e in entity.elements))

    def columns(self, columns: Iterable[str]) -> Select:
        return replace(self, column_names=self.column_names + tuple(columns))

    def filter(self, tokens: Iterable[str]) -> Select:
        return replace(self, filter_tokens=self.filter_tokens + tuple(tokens))

    def to_sql(self) -> str:
        if self.column_names:
            sql = f"SELECT {','.join(self.column_names)} FROM {self.source}"
        else:
            sql = f"SELECT * FROM {self.source}"
        if self.filter_tokens:
            sql += f"\n  WHERE {' '.join(self.filter_tokens)}"
        return sql
