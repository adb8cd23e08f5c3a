"""
Oven temperature conversion

Rewrites Fahrenheit temperatures and gas marks in text as Celsius, e.g.
"Preheat the oven to 350 degrees F." -> "Preheat the oven to 175 degrees C."
"""
import logging
import re
from typing import Union

from metric_recipes.models.errors import InvalidGasMarkError
from metric_recipes.utils.number_parsing import format_number, parse_fraction, round5

logger = logging.getLogger(__name__)

# Values without a unit above this are assumed to be Fahrenheit
FAHRENHEIT_THRESHOLD = 250

# Maximum Celsius temperature for each gas mark ('typical' value in comments)
CELSIUS_FOR_GAS_MARK = [
    0,    # 1/4 = 107, 1/2 = 121
    140,  # 1: 135
    150,  # 2: 149
    160,  # 3: 163
    180,  # 4: 177
    190,  # 5: 191
    200,  # 6: 204
    210,  # 7: 218
    220,  # 8: 232
    240,  # 9: 246
    260,  # 10: 270 (omitted in most tables)
    280,  # rare
    290,  # rare
]

_TEMPERATURE_RE = re.compile(
    r"(?<![0-9A-Za-z.])(\d+)(\s*)(°|'|degrees?)?(\s*)(Fahrenheit|Celsius|Centigrade|F|C)?(?![A-Za-z])",
    re.IGNORECASE,
)
_OVEN_TO_RE = re.compile(r"\boven\s*to\s*(\d+)\s*(°|'|degrees?)?", re.IGNORECASE)
_GAS_MARK_RE = re.compile(r"gas\s*mark\s*(\d+(?:\s*/\s*\d+)?|[¼½])(?![0-9A-Za-z])", re.IGNORECASE)


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32) * 5 / 9


def gas_mark_to_celsius(mark: float) -> int:
    """Maximum Celsius temperature for a gas mark (0 to 12, plus 1/4 and 1/2)."""
    if mark < 0 or mark >= len(CELSIUS_FOR_GAS_MARK):
        raise InvalidGasMarkError(mark)
    if mark <= 0.25:
        return 107
    if mark <= 0.5:
        return 121
    if not float(mark).is_integer():
        raise InvalidGasMarkError(mark)
    return CELSIUS_FOR_GAS_MARK[int(mark)]


def celsius_to_gas_mark(celsius: float) -> Union[int, float]:
    """Lowest gas mark whose maximum temperature covers `celsius`."""
    if celsius <= 110:
        return 0.25
    if celsius <= 130:
        return 0.5
    for gas_mark, max_temp in enumerate(CELSIUS_FOR_GAS_MARK):
        if celsius <= max_temp:
            return gas_mark
    # Hotter than any listed mark
    return len(CELSIUS_FOR_GAS_MARK)


def format_gas_mark(mark: Union[int, float]) -> str:
    if mark == 0.25:
        return '1/4'
    if mark == 0.5:
        return '1/2'
    return format_number(mark)


def _with_gas_mark(celsius_text: str, celsius: int, gas_mark: bool) -> str:
    if not gas_mark:
        return celsius_text
    return f"{celsius_text} (gas mark {format_gas_mark(celsius_to_gas_mark(celsius))})"


def convert_oven_temperatures(text: str, gas_mark: bool = False) -> str:
    """
    Convert Fahrenheit temperatures and gas marks in the text to Celsius.

    Three rules are tried in order and the first one that converts anything
    wins:
      1. a number with a degree mark and/or unit ('390'F', '350 degrees F',
         '370°'). Fahrenheit is converted; a number without a unit is only
         converted above 250, since such values cannot be Celsius in a recipe.
      2. 'oven to 350' without any unit, again only above 250.
      3. 'gas mark 4'.
    Results are rounded to a multiple of five. With `gas_mark` the converted
    temperature is followed by its gas mark.
    """
    matched = False

    def replace_temperature(match: re.Match) -> str:
        nonlocal matched
        temp, space1, degree, space2, unit = match.groups()
        degree = degree or ''
        if not degree and not unit:
            return match.group(0)

        is_fahrenheit = unit is not None and unit.lower().startswith('f')
        if not is_fahrenheit and not (unit is None and int(temp) > FAHRENHEIT_THRESHOLD):
            return match.group(0)

        celsius = round5(fahrenheit_to_celsius(int(temp)))
        matched = True
        if unit is None:
            if degree.lower().startswith('degree'):
                converted = f"{celsius}{space1}{degree} C"
            else:
                converted = f"{celsius}°C"
        else:
            new_unit = 'C' if len(unit) == 1 else 'Celsius'
            converted = f"{celsius}{space1}{degree}{space2}{new_unit}"
        return _with_gas_mark(converted, celsius, gas_mark)

    text = _TEMPERATURE_RE.sub(replace_temperature, text)
    if matched:
        return text

    def replace_oven_to(match: re.Match) -> str:
        nonlocal matched
        temp = int(match.group(1))
        if temp <= FAHRENHEIT_THRESHOLD:
            return match.group(0)
        celsius = round5(fahrenheit_to_celsius(temp))
        matched = True
        return _with_gas_mark(f"oven to {celsius}°C", celsius, gas_mark)

    text = _OVEN_TO_RE.sub(replace_oven_to, text)
    if matched:
        return text

    def replace_gas_mark(match: re.Match) -> str:
        mark = parse_fraction(match.group(1))
        try:
            celsius = round5(gas_mark_to_celsius(float(mark)))
        except (InvalidGasMarkError, ValueError) as e:
            logger.warning(f"Leaving '{match.group(0)}' unconverted: {e}")
            return match.group(0)
        return f"{celsius}°C"

    return _GAS_MARK_RE.sub(replace_gas_mark, text)
