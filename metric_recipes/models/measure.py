"""
Measures found in recipe text
"""
import logging
import re
from dataclasses import dataclass, replace
from typing import Iterator, List, Optional

from metric_recipes.models.conversion import UnitConverter
from metric_recipes.models.errors import UnknownIngredientError
from metric_recipes.models.unit import Unit, UnitDomain, UnitRegistry, get_unit_registry
from metric_recipes.utils.ingredient_lookup import IngredientLUT
from metric_recipes.utils.number_parsing import NUMBER_PATTERN, is_pure_number, parse_fraction

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT_WORDS = 5


@dataclass(frozen=True)
class Measure:
    """
    A unit and amount located in a piece of text.

    `original_string` is the matched quantity and unit ('1 1/2 cups') and is
    what gets replaced. `context` is the match plus the words following it
    ('1 1/2 cups plain flour, sifted') and is used to find the ingredient for
    cup conversions. `start` and `end` locate `original_string` in the scanned
    text.
    """
    unit: Unit
    amount: float
    original_string: str
    context: str
    short_form: bool = False
    space_before_unit: bool = True
    plural: Optional[bool] = None
    start: int = 0
    end: int = 0

    def with_unit_and_amount(self, unit: Unit, amount: float, **flags) -> 'Measure':
        """Converted copy of this measure; the original is left untouched."""
        return replace(self, unit=unit, amount=amount, **flags)

    def to_grams(self, converter: UnitConverter, lut: IngredientLUT) -> float:
        """
        Weight of this measure in grams.

        Volume measures ('1 cup sugar') need the ingredient density, which is
        looked up from the context. Raises UnknownIngredientError if the
        ingredient is not known.
        """
        gram = converter.registry.named('gram')
        if self.unit.domain == UnitDomain.MASS:
            return converter.convert(self.unit, self.amount, gram)

        grams_per_cup = lut.cup_to_grams(self.context)
        if grams_per_cup is None:
            raise UnknownIngredientError(self.context.strip(), self.original_string)
        cups = converter.convert(self.unit, self.amount, converter.registry.named('cup'))
        return cups * grams_per_cup

    def __str__(self) -> str:
        return self.unit.render(
            self.amount,
            short=self.short_form,
            space=self.space_before_unit,
            plural=self.plural,
        )


class MeasureScanner:
    """Scans arbitrary text for quantities followed by a unit ('2 cups sugar', '5oz', '16-oz')."""

    def __init__(self, registry: Optional[UnitRegistry] = None, context_words: int = DEFAULT_CONTEXT_WORDS):
        self.registry = registry or get_unit_registry()
        self.context_words = context_words

        # The trailing words are a lookahead so that a following measure is
        # still found: '1 cup flour and 2 cups sugar' yields both. Punctuation
        # attached to the unit ('3 c. flour') belongs to the first of them.
        # The second number of a range ('1-2 cups') is not a measure.
        pattern = (
            r'(?<![0-9A-Za-z./⁄])(?<!\d-)'
            r'((' + NUMBER_PATTERN + r')(\s*|-)(' + self.registry.pattern + r'))'
            r'(?![A-Za-z])'
            r'(?=(\S*(?:\s+\S+){0,' + str(context_words) + r'}))'
        )
        self.regex = re.compile(pattern, re.IGNORECASE)

    def find_all(self, text: str) -> Iterator[Measure]:
        """
        Yield every measure in the text, in order of appearance.

        Candidates whose number does not parse or whose unit does not
        resolve are skipped. Each call starts a fresh scan.
        """
        for match in self.regex.finditer(text):
            original_string, number, separator, unit_text, trailing = match.groups()

            amount = parse_fraction(number)
            if not is_pure_number(amount):
                logger.debug(f"Skipping '{original_string}': '{number}' is not a number")
                continue

            unit = self.registry.resolve(unit_text)
            if unit is None:
                logger.debug(f"Skipping '{original_string}': unknown unit '{unit_text}'")
                continue

            yield Measure(
                unit=unit,
                amount=float(amount),
                original_string=original_string,
                context=original_string + trailing,
                short_form=self.registry.is_short_form(unit_text),
                space_before_unit=separator not in ('', '-'),
                start=match.start(1),
                end=match.end(1),
            )


def find_measures(text: str, scanner: Optional[MeasureScanner] = None) -> List[Measure]:
    """All measures in the text as a list."""
    scanner = scanner or MeasureScanner()
    return list(scanner.find_all(text))
