"""
Error types for csnql schema loading and configuration.
"""

MISSING_DEFINITIONS = "Cannot find definitions"
MISSING_ELEMENTS = "Cannot find elements"


class CsnqlError(Exception):
    """Base exception for all csnql errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DeserializationError(CsnqlError):
    """
    Raised when a CSN document cannot be turned into Definitions.

    Carries a single human-readable description. Subclasses record where
    the failure originated, but the description is the only diagnostic
    surface.
    """

    @property
    def description(self) -> str:
        return self.message


class JsonSyntaxError(DeserializationError):
    """
    Raised when the source text is not valid JSON.

    The description is the JSON parser's message, including its
    line/column information, unchanged.
    """

    pass


class StructuralError(DeserializationError):
    """
    Raised when a required object-shaped field is missing or mistyped.

    Examples:
    - No top-level "definitions" object
    - An entity without an "elements" object
    """

    pass


class TypeTagError(DeserializationError):
    """
    Raised when an element does not decode into a known element kind.

    Examples:
    - Unknown or missing "type" tag
    - "default" not shaped like {"val": <literal>}
    - Literal of the wrong type for the element kind
    - Negative or non-integer "length"
    """

    pass


class ManifestError(CsnqlError):
    """Raised when csnql.toml is missing or invalid."""

    pass
