"""
Metric Recipes - convert US-centric recipe text to metric
"""
from metric_recipes.config.settings import ConversionOptions, Settings
from metric_recipes.orchestrators.orchestrator import (
    ProcessingResult,
    RecipeTextOrchestrator,
    convert_recipe_text,
)
from metric_recipes.utils.ingredient_lookup import cup_to_grams
from metric_recipes.utils.number_parsing import parse_fraction
from metric_recipes.utils.oven_temperatures import convert_oven_temperatures

__version__ = "1.0.0"

__all__ = [
    "ConversionOptions",
    "ProcessingResult",
    "RecipeTextOrchestrator",
    "Settings",
    "convert_oven_temperatures",
    "convert_recipe_text",
    "cup_to_grams",
    "parse_fraction",
]
