"""
Converter Agent - Rewrites imperial measures in recipe text as metric
"""
import math
from dataclasses import dataclass
from typing import List, Optional

from metric_recipes.agents.base import AgentResult, AgentStatus, BaseAgent
from metric_recipes.config.settings import ConversionOptions, Settings
from metric_recipes.models.conversion import UnitConverter, smart_round
from metric_recipes.models.errors import ConversionError
from metric_recipes.models.measure import Measure, MeasureScanner
from metric_recipes.models.unit import UnitRegistry, UnitSystem, get_unit_registry
from metric_recipes.utils.ingredient_lookup import LIQUID, IngredientLUT, get_ingredient_lut

# Converted by ingredient density rather than by volume
DENSITY_UNITS = ('cup', 'stick')

# Kept in the text and annotated with their metric volume
SPOON_UNITS = ('tablespoon', 'teaspoon', 'dessert spoon')


@dataclass
class MeasureConversion:
    """One substitution made in the text."""
    original: str
    converted: str
    unit: str


@dataclass
class ConversionFailure:
    """A measure that was left unconverted."""
    original: str
    reason: str


class ConverterAgent(BaseAgent):
    """Agent responsible for converting the measures found in a piece of text."""

    def __init__(
        self,
        settings: Settings,
        options: Optional[ConversionOptions] = None,
        registry: Optional[UnitRegistry] = None,
        lut: Optional[IngredientLUT] = None,
    ):
        super().__init__(settings, options)
        self.registry = registry or get_unit_registry()
        self.lut = lut or get_ingredient_lut()
        self.unit_converter = UnitConverter(self.registry)
        self.scanner = MeasureScanner(self.registry, self.options.context_words)

    def convert(self, text: str) -> AgentResult[str]:
        """
        Convert every imperial measure in the text.

        Each measure is replaced at the position where it was found, so a
        measure left unconverted never shifts a later identical one.

        Returns:
            AgentResult with the converted text, PARTIAL when some measures
            were left unconverted
        """
        try:
            conversions: List[MeasureConversion] = []
            failures: List[ConversionFailure] = []
            pieces: List[str] = []
            position = 0

            for measure in self.scanner.find_all(text):
                try:
                    replacement = self.convert_measure(measure)
                except ConversionError as e:
                    if self.options.fail_fast:
                        return self._handle_error(e, f"Error converting '{measure.original_string}'")
                    self.logger.warning(f"Leaving '{measure.original_string}' unconverted: {e}")
                    failures.append(ConversionFailure(measure.original_string, str(e)))
                    continue

                if replacement is None:
                    continue

                pieces.append(text[position:measure.start])
                pieces.append(replacement)
                position = measure.end

                self.logger.debug(f"Converted '{measure.original_string}' -> '{replacement}'")
                conversions.append(MeasureConversion(measure.original_string, replacement, measure.unit.name))

            pieces.append(text[position:])
            self._log_success(f"Converted {len(conversions)} measures, skipped {len(failures)}")

            return AgentResult(
                success=True,
                data=''.join(pieces),
                status=AgentStatus.PARTIAL if failures else AgentStatus.SUCCESS,
                metadata={
                    'conversions': conversions,
                    'failures': failures,
                    'conversions_made': len(conversions),
                }
            )

        except Exception as e:
            return self._handle_error(e, "Error converting recipe text")

    def convert_measure(self, measure: Measure) -> Optional[str]:
        """
        Replacement text for one measure, or None to leave it unchanged.

        Raises ConversionError (e.g. UnknownIngredientError) when the
        measure cannot be converted.
        """
        unit = measure.unit
        if unit.is_metric():
            return None

        if unit.name in DENSITY_UNITS:
            return self._with_original(self._convert_by_density(measure), measure)

        if unit.name in SPOON_UNITS:
            if not self.options.convert_spoons:
                return None
            return self._annotate_spoon(measure)

        return self._with_original(self._convert_to_best_metric(measure), measure)

    def _convert_by_density(self, measure: Measure) -> Measure:
        """Cups and sticks become grams, or millilitres for liquids."""
        grams = measure.to_grams(self.unit_converter, self.lut)
        cups = self.unit_converter.convert(measure.unit, measure.amount, self.registry.named('cup'))

        if grams and math.isclose(grams, cups * LIQUID):
            target = self.registry.named('millilitre')
        else:
            target = self.registry.named('gram')

        return measure.with_unit_and_amount(
            target,
            smart_round(grams, target.short_form),
            short_form=True,
            space_before_unit=False,
            plural=None,
        )

    def _annotate_spoon(self, measure: Measure) -> str:
        """'1 teaspoon' becomes '1 teaspoon (4g)'; liquids and unknown ingredients get ml."""
        # The number is always millilitres; only the label follows the ingredient
        ml = int(self.unit_converter.convert(measure.unit, measure.amount, self.registry.named('millilitre')))

        grams_per_cup = self.lut.cup_to_grams(measure.context)
        if grams_per_cup is not None and not self.lut.is_liquid(grams_per_cup):
            suffix = 'g'
        else:
            suffix = 'ml'
        return f"{measure.original_string} ({ml}{suffix})"

    def _convert_to_best_metric(self, measure: Measure) -> Measure:
        """Any other imperial unit goes through the metric base unit to the most readable metric unit."""
        base = self.registry.base_unit(measure.unit.domain, UnitSystem.METRIC)
        amount = self.unit_converter.convert(measure.unit, measure.amount, base)
        unit, value = self.unit_converter.convert_best(base, amount, UnitSystem.METRIC, everyday_only=True)

        # Copy the style of the matched text: '15 oz' -> '425g', '1 1/2 pounds' -> '680 grams'
        return measure.with_unit_and_amount(
            unit,
            smart_round(value, unit.short_form),
            space_before_unit=not measure.short_form,
            plural=None,
        )

    def _with_original(self, converted: Measure, measure: Measure) -> str:
        if self.options.print_original:
            return f"{converted} ({measure.original_string})"
        return str(converted)
