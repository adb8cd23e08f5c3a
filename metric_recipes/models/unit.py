"""
Unit Models and Registry
"""
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from metric_recipes.models.errors import UnknownUnitError
from metric_recipes.utils.number_parsing import format_number
from metric_recipes.utils.text import pluralize

logger = logging.getLogger(__name__)


class UnitDomain(Enum):
    """Thing that the unit measures."""
    MASS = "mass"
    VOLUME = "volume"


class UnitSystem(Enum):
    """Family a unit belongs to."""
    METRIC = "metric"
    IMPERIAL = "imperial"


# Multiplier from the imperial unit with value=1 to the metric unit with value=1
IMPERIAL_TO_METRIC = {
    UnitDomain.MASS: 453.592,         # lb -> gram
    UnitDomain.VOLUME: 1 / 33.8140226,  # fl oz -> litre
}

# Values are relative to the unit with value=1 in the same domain and system.
# The first altname is the unit's short form.
UNIT_DATA = {
    UnitDomain.MASS: {
        UnitSystem.METRIC: [
            {'name': 'milligram', 'value': 1 / 1000, 'altnames': ['mg']},
            {'name': 'gram', 'value': 1, 'altnames': ['g']},
            {'name': 'kilogram', 'value': 1000, 'altnames': ['kg']},
        ],
        UnitSystem.IMPERIAL: [
            {'name': 'ounce', 'value': 1 / 16, 'altnames': ['oz']},
            {'name': 'pound', 'value': 1, 'altnames': ['lb']},
        ],
    },
    UnitDomain.VOLUME: {
        UnitSystem.METRIC: [
            {'name': 'cubic centimeter', 'value': 1 / 1000,
             'altnames': ['cc', 'cubic centimetre', 'cubic cm'], 'everyday': False},
            {'name': 'millilitre', 'value': 1 / 1000, 'altnames': ['ml', 'milliliter']},
            {'name': 'centilitre', 'value': 1 / 100, 'altnames': ['cl', 'centiliter'], 'everyday': False},
            {'name': 'declilitre', 'value': 1 / 10, 'altnames': ['dl', 'deciliter'], 'everyday': False},
            {'name': 'litre', 'value': 1, 'altnames': ['l', 'liter']},
        ],
        UnitSystem.IMPERIAL: [
            {'name': 'teaspoon', 'value': 1 / 6, 'altnames': ['tsp', 'tspn', 't']},
            # US tablespoon (UK is 0.51, Australian 0.68)
            {'name': 'tablespoon', 'value': 1 / 2, 'altnames': ['tbsp', 'tbs', 'tbspn', 'T']},
            {'name': 'dessert spoon', 'value': 0.4, 'altnames': ['dsp', 'desert spoon']},
            {'name': 'fluid ounce', 'value': 1,
             'altnames': ['fl oz', 'floz', 'oz fl', 'fl ounce', 'fluid oz', 'fl. oz', 'fl-oz']},
            {'name': 'cup', 'value': 8, 'altnames': ['c']},
            {'name': 'pint', 'value': 16, 'altnames': ['pnt']},
            {'name': 'quart', 'value': 32, 'altnames': ['qt', 'qrt']},
            {'name': 'gallon', 'value': 128, 'altnames': ['gal', 'glln', 'galln']},
            # Typically butter; one stick is half a cup
            {'name': 'stick', 'value': 4, 'altnames': ['stk']},
        ],
    },
}


@dataclass(frozen=True)
class Unit:
    """A measurement unit such as 'gram' or 'cup'."""
    name: str
    altnames: Tuple[str, ...]
    value: float
    domain: UnitDomain
    system: UnitSystem
    everyday: bool = field(default=True, compare=False)

    @property
    def short_form(self) -> str:
        """Shortest spelling of the unit, e.g. 'g' for gram."""
        return self.altnames[0] if self.altnames else self.name

    @property
    def plural_name(self) -> str:
        return pluralize(self.name)

    def is_metric(self) -> bool:
        return self.system == UnitSystem.METRIC

    def label(self, amount: float, short: bool = False, plural: Optional[bool] = None) -> str:
        """Unit text for an amount. Short forms are never pluralized."""
        if short:
            return self.short_form
        if plural is None:
            plural = amount != 1
        return self.plural_name if plural else self.name

    def render(self, amount: float, short: bool = False, space: bool = True,
               plural: Optional[bool] = None) -> str:
        separator = ' ' if space else ''
        return f"{format_number(amount)}{separator}{self.label(amount, short, plural)}"

    def __str__(self) -> str:
        return self.name


class UnitRegistry:
    """
    Catalogue of known units with alias resolution.

    Every canonical name and alias (plus plurals) is registered in a single
    lookup table, and one regex alternation matches any of those spellings.
    The alternation is ordered longest-first so that e.g. 'tablespoons'
    always wins over 't'.
    """

    def __init__(self, unit_data: Dict = None):
        unit_data = UNIT_DATA if unit_data is None else unit_data

        self._units: List[Unit] = []
        self._by_name: Dict[str, Unit] = {}
        self._by_spelling: Dict[str, Unit] = {}
        self._by_spelling_lower: Dict[str, Unit] = {}
        self._short_forms: Dict[str, Unit] = {}

        for domain, systems in unit_data.items():
            for system, entries in systems.items():
                for entry in entries:
                    unit = Unit(
                        name=entry['name'],
                        altnames=tuple(entry.get('altnames', [])),
                        value=entry['value'],
                        domain=domain,
                        system=system,
                        everyday=entry.get('everyday', True),
                    )
                    self._register(unit)

        spellings = sorted(self._by_spelling, key=lambda s: (-len(s), s))
        self.pattern = '(?:' + '|'.join(re.escape(s) for s in spellings) + ')'
        self.regex = re.compile(r'(?<![A-Za-z])' + self.pattern + r'(?![A-Za-z])', re.IGNORECASE)

        logger.debug(f"Registered {len(self._units)} units, {len(spellings)} spellings")

    def _register(self, unit: Unit):
        self._units.append(unit)
        self._by_name[unit.name] = unit

        spellings = [unit.name, *unit.altnames]
        for spelling in spellings:
            for form in (spelling, pluralize(spelling)):
                self._by_spelling.setdefault(form, unit)
                self._by_spelling_lower.setdefault(form.lower(), unit)

        if unit.altnames:
            short = unit.altnames[0]
            self._short_forms[short] = unit
            self._short_forms[pluralize(short)] = unit

    @property
    def units(self) -> List[Unit]:
        return list(self._units)

    def named(self, name: str) -> Unit:
        """Return a unit by canonical name, raising UnknownUnitError otherwise."""
        unit = self._by_name.get(name)
        if unit is None:
            raise UnknownUnitError(name)
        return unit

    def resolve(self, spelling: str) -> Optional[Unit]:
        """Resolve an exact unit spelling ('tbsp', 'grams', 'T'), or None."""
        spelling = re.sub(r'\s+', ' ', spelling.strip())
        unit = self._by_spelling.get(spelling)
        if unit is None:
            unit = self._by_spelling_lower.get(spelling.lower())
        return unit

    def from_string(self, text: str) -> Optional[Unit]:
        """Return the first unit mentioned in arbitrary text, or None."""
        text = re.sub(r'liter', 'litre', text, flags=re.IGNORECASE)
        match = self.regex.search(text)
        if match is None:
            return None
        return self.resolve(match.group(0))

    def is_short_form(self, spelling: str) -> bool:
        """True for abbreviated spellings such as 'ml', 'lbs' or 'fl oz'."""
        spelling = spelling.strip()
        return spelling in self._short_forms or spelling.lower() in self._short_forms

    def possible_conversions(self, unit: Unit, system: Optional[UnitSystem] = None) -> List[Unit]:
        """Units in the same domain, optionally restricted to one system."""
        return [
            candidate for candidate in self._units
            if candidate.domain == unit.domain and (system is None or candidate.system == system)
        ]

    def can_convert(self, from_unit: Unit, to_unit: Unit) -> bool:
        """Units convert without a density only within one domain."""
        return from_unit.domain == to_unit.domain

    def base_unit(self, domain: UnitDomain, system: UnitSystem) -> Unit:
        """The unit with value=1 for a domain and system (gram, litre, pound, fluid ounce)."""
        for unit in self._units:
            if unit.domain == domain and unit.system == system and unit.value == 1:
                return unit
        raise UnknownUnitError(f"{system.value} {domain.value} base unit")


@lru_cache(maxsize=None)
def get_unit_registry() -> UnitRegistry:
    """Process-wide registry built from UNIT_DATA."""
    return UnitRegistry()
