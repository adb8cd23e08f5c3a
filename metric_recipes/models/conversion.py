"""
Unit Conversion Models
"""
import math
from typing import Optional, Tuple

from metric_recipes.models.errors import DomainMismatchError
from metric_recipes.models.unit import (
    IMPERIAL_TO_METRIC,
    Unit,
    UnitRegistry,
    UnitSystem,
    get_unit_registry,
)


def smart_round(value: float, unit: str) -> float:
    """Round conversion values to sensible precision based on unit and magnitude."""
    if unit in ['ml', 'g', 'millilitre', 'gram', 'mg', 'milligram', 'cc', 'cubic centimeter']:
        # Small metric units read best as whole numbers
        if 0 < abs(value) < 1:
            return round(value, 1)
        return float(math.floor(value + 0.5))
    elif unit in ['kg', 'l', 'kilogram', 'litre', 'cl', 'dl', 'centilitre', 'declilitre']:
        return round(value, 2)
    else:
        return round(value, 2)


def readability_score(value: float) -> float:
    """
    Score how easy a value is to read; higher is better.

    Fractional values score a flat 0.5, which keeps 1000g -> 1kg but 500g
    as 500g. Larger values are mildly penalized by their magnitude.
    """
    value = abs(value)
    if value < 1:
        return 0.5
    return 1 - 0.1 * math.log10(value)


class UnitConverter:
    """Handles unit conversions between registered units."""

    def __init__(self, registry: Optional[UnitRegistry] = None):
        self.registry = registry or get_unit_registry()

    def convert(self, from_unit: Unit, amount: float, to_unit: Unit) -> float:
        """
        Convert an amount from one unit to another in the same domain.

        Raises DomainMismatchError for mass <-> volume conversions, which need
        an ingredient density (see IngredientLUT).
        """
        if not self.registry.can_convert(from_unit, to_unit):
            raise DomainMismatchError(from_unit, to_unit)

        if amount == 0:
            return 0
        if from_unit.system == to_unit.system:
            return amount * (from_unit.value / to_unit.value)

        # Canonical unit of the source system, then across systems
        amount *= from_unit.value
        rate = IMPERIAL_TO_METRIC[from_unit.domain]
        if from_unit.system == UnitSystem.METRIC:
            rate = 1 / rate
        amount *= rate
        return amount / to_unit.value

    def convert_named(self, from_name: str, amount: float, to_name: str) -> float:
        """Same as convert(), with canonical unit names."""
        return self.convert(self.registry.named(from_name), amount, self.registry.named(to_name))

    def convert_best(
        self,
        unit: Unit,
        amount: float,
        system: Optional[UnitSystem] = None,
        everyday_only: bool = False,
        any_system: bool = False,
    ) -> Tuple[Unit, float]:
        """
        Convert to whichever unit gives the most readable value.

        Candidates are the units of the same domain in `system` (defaults to
        the unit's own system; `any_system` searches both). The current unit
        and amount are the starting candidate and are only replaced by a
        strictly better score, so the current unit wins ties.
        """
        if system is None and not any_system:
            system = unit.system

        best_unit, best_value = unit, amount
        best_score = readability_score(amount)

        for candidate in self.registry.possible_conversions(unit, system):
            if everyday_only and not candidate.everyday:
                continue
            value = self.convert(unit, amount, candidate)
            score = readability_score(value)
            if score > best_score:
                best_unit, best_value, best_score = candidate, value, score

        return best_unit, best_value

