"""
Recipe Text Processing Orchestrator
"""
import time
from dataclasses import dataclass, field
from typing import List, Optional

from metric_recipes.agents.base import AgentStatus
from metric_recipes.agents.converter import ConversionFailure, ConverterAgent, MeasureConversion
from metric_recipes.agents.temperature import TemperatureAgent
from metric_recipes.config.settings import ConversionOptions, Settings
from metric_recipes.models.errors import ConversionError
from metric_recipes.models.unit import UnitRegistry
from metric_recipes.utils.ingredient_lookup import IngredientLUT


@dataclass
class ProcessingResult:
    """Result of converting a piece of recipe text."""
    success: bool
    text: Optional[str] = None
    conversions: List[MeasureConversion] = field(default_factory=list)
    failures: List[ConversionFailure] = field(default_factory=list)
    partial: bool = False
    temperatures_converted: bool = False
    error: Optional[str] = None
    processing_time_ms: int = 0


class RecipeTextOrchestrator:
    """Runs measure conversion followed by oven temperature conversion."""

    def __init__(
        self,
        settings: Settings,
        options: Optional[ConversionOptions] = None,
        registry: Optional[UnitRegistry] = None,
        lut: Optional[IngredientLUT] = None,
    ):
        self.settings = settings
        self.options = options or settings.conversion
        self.converter = ConverterAgent(settings, self.options, registry=registry, lut=lut)
        self.temperature = TemperatureAgent(settings, self.options)

    def process_text(self, text: str) -> ProcessingResult:
        """Convert the measures and oven temperatures in plain text."""
        start_time = time.time()

        # Step 1: Measures
        convert_result = self.converter.convert(text)
        if not convert_result.success:
            return ProcessingResult(
                False,
                error=f"Conversion failed: {convert_result.error}",
                processing_time_ms=round((time.time() - start_time) * 1000),
            )

        # Step 2: Oven temperatures, once over the converted text
        temperature_result = self.temperature.convert(convert_result.data)
        if not temperature_result.success:
            return ProcessingResult(
                False,
                error=f"Temperature conversion failed: {temperature_result.error}",
                processing_time_ms=round((time.time() - start_time) * 1000),
            )

        return ProcessingResult(
            success=True,
            text=temperature_result.data,
            conversions=convert_result.metadata['conversions'],
            failures=convert_result.metadata['failures'],
            partial=convert_result.status == AgentStatus.PARTIAL,
            temperatures_converted=temperature_result.metadata['changed'],
            processing_time_ms=round((time.time() - start_time) * 1000),
        )


def convert_recipe_text(text: str, options: Optional[ConversionOptions] = None,
                        settings: Optional[Settings] = None) -> str:
    """
    Convert arbitrary US-centric recipe text to metric.

    Cups are American (240ml). Measures that cannot be converted are left as
    they are, unless `options.fail_fast` is set, in which case a
    ConversionError is raised.
    """
    settings = settings or Settings()
    result = RecipeTextOrchestrator(settings, options).process_text(text)
    if not result.success:
        raise ConversionError(result.error)
    return result.text
