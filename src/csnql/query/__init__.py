"""Query rendering on top of the schema model."""

from .select import CQN, Select

__all__ = ["CQN", "Select"]
