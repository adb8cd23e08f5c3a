"""
Conversion Errors
"""
from typing import Any, Optional


class ConversionError(ValueError):
    """Base class for failures while converting recipe text."""


class UnknownUnitError(ConversionError):
    """Raised when a canonical unit name is not in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unit '{name}' does not exist")


class UnknownIngredientError(ConversionError):
    """Raised when a cup measure cannot be matched to an ingredient density."""

    def __init__(self, phrase: str, original_string: Optional[str] = None):
        self.phrase = phrase
        self.original_string = original_string
        super().__init__(f"conversion to grams failed: unknown ingredient '{phrase}'")


class DomainMismatchError(ConversionError):
    """Raised when converting directly between a mass and a volume unit."""

    def __init__(self, from_unit: Any, to_unit: Any):
        self.from_unit = from_unit
        self.to_unit = to_unit
        super().__init__(
            f"cannot convert {from_unit.name} ({from_unit.domain.value}) "
            f"to {to_unit.name} ({to_unit.domain.value})"
        )


class InvalidGasMarkError(ConversionError):
    """Raised for gas marks outside the supported table."""

    def __init__(self, mark: float):
        self.mark = mark
        super().__init__(f"invalid gas mark '{mark}'")
