"""
Element types for the csnql schema model.

An element is a named, typed field of an entity. Its type is one of a
closed set of primitive kinds, selected by the exact "type" tag of the
source element. Each kind may carry a default value.
"""

from __future__ import annotations

from typing import Annotated, Any, Generic, Literal, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
)

T = TypeVar("T")

UUID_TAG = "cds.UUID"
BOOLEAN_TAG = "cds.Boolean"
INTEGER_TAG = "cds.Integer"
STRING_TAG = "cds.String"

TYPE_TAGS = (UUID_TAG, BOOLEAN_TAG, INTEGER_TAG, STRING_TAG)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1


# =============================================================================
# Default Values
# =============================================================================


class Val(BaseModel, Generic[T]):
    """
    Literal default value, decoded from ``{"val": <literal>}``.

    Examples:
        - {"val": "myDefaultName"}: Val[StrictStr](val="myDefaultName")
        - {"val": 0}: Val[StrictInt](val=0)
    """

    val: T

    model_config = ConfigDict(frozen=True, extra="forbid")


# Only literal defaults are modelled for now. Further default-expression
# forms join Val in a union here.
DefaultValue = Val


# =============================================================================
# Element Kinds
# =============================================================================


class _PrimitiveKind(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def default_value(self) -> Any:
        """Literal default, or None when the element has no default."""
        default = getattr(self, "default", None)
        return default.val if default is not None else None


class UUIDKind(_PrimitiveKind):
    """UUID element; defaults are strings."""

    type: Literal["cds.UUID"] = UUID_TAG
    default: DefaultValue[StrictStr] | None = None


class BooleanKind(_PrimitiveKind):
    """Boolean element; defaults are JSON booleans."""

    type: Literal["cds.Boolean"] = BOOLEAN_TAG
    default: DefaultValue[StrictBool] | None = None


class IntegerKind(_PrimitiveKind):
    """Integer element; defaults are signed 64-bit integers."""

    type: Literal["cds.Integer"] = INTEGER_TAG
    default: DefaultValue[StrictInt] | None = None

    @field_validator("default")
    @classmethod
    def validate_default_range(
        cls, v: DefaultValue[StrictInt] | None
    ) -> DefaultValue[StrictInt] | None:
        """Reject defaults outside the signed 64-bit range."""
        if v is not None and not INT64_MIN <= v.val <= INT64_MAX:
            raise ValueError(f"Integer default {v.val} is out of 64-bit range")
        return v


class StringKind(_PrimitiveKind):
    """String element with an optional maximum length."""

    type: Literal["cds.String"] = STRING_TAG
    default: DefaultValue[StrictStr] | None = None
    length: int | None = Field(default=None, ge=0, strict=True)

    @field_validator("length")
    @classmethod
    def validate_length_range(cls, v: int | None) -> int | None:
        """Reject lengths beyond the unsigned 64-bit range."""
        if v is not None and v > UINT64_MAX:
            raise ValueError(f"String length {v} is out of 64-bit range")
        return v


ElementKind = Annotated[
    UUIDKind | BooleanKind | IntegerKind | StringKind,
    Field(discriminator="type"),
]


class Element(BaseModel):
    """
    A single element of an entity.

    Attributes:
        name: Element identifier, the raw source key
        key: True only when the source marks the element with ``"key": true``
        kind: Decoded element kind
    """

    name: str
    key: bool = False
    kind: ElementKind

    model_config = ConfigDict(frozen=True)

    @property
    def type_tag(self) -> str:
        return self.kind.type
