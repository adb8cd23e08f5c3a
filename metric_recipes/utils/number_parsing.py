"""
Number and fraction parsing

Replaces fractions such as '1 1/2', '1½', '1&frac12;' or '³⁄₄' with decimals
so that quantities in recipe text can be read as plain numbers.
"""
import html
import math
import re
from typing import Dict

FRACTION_GLYPHS: Dict[str, str] = {
    '¼': '1/4',
    '½': '1/2',
    '¾': '3/4',
    '⅐': '1/7',
    '⅑': '1/9',
    '⅒': '1/10',
    '⅓': '1/3',
    '⅔': '2/3',
    '⅕': '1/5',
    '⅖': '2/5',
    '⅗': '3/5',
    '⅘': '4/5',
    '⅙': '1/6',
    '⅚': '5/6',
    '⅛': '1/8',
    '⅜': '3/8',
    '⅝': '5/8',
    '⅞': '7/8',
}

SUPERSCRIPT_DIGITS = '⁰¹²³⁴⁵⁶⁷⁸⁹'
SUBSCRIPT_DIGITS = '₀₁₂₃₄₅₆₇₈₉'

_SUPERSCRIPT_TABLE = str.maketrans(SUPERSCRIPT_DIGITS, '0123456789')
_SUBSCRIPT_TABLE = str.maketrans(SUBSCRIPT_DIGITS, '0123456789')

_GLYPH_CLASS = '[' + ''.join(FRACTION_GLYPHS) + ']'
_GLYPH_RE = re.compile(r'(?:([0-9])\s*)?(' + _GLYPH_CLASS + ')')
_SCRIPT_FRACTION_RE = re.compile(
    r'([' + SUPERSCRIPT_DIGITS + r'0-9]+)\s*/\s*([' + SUBSCRIPT_DIGITS + r'0-9]+)'
)
_DECIMAL_RE = re.compile(
    r'([0-9]+)/([0-9]+)'
    r'|([0-9]+(?:\.[0-9]+)?)(?:\s+([0-9]+)/([0-9]+))?'
)
_PURE_NUMBER_RE = re.compile(r'[0-9]+(?:\.[0-9]+)?')

# Regex source matching any quantity parse_fraction can turn into a number
_SCRIPT_FRACTION = (
    r'[' + SUPERSCRIPT_DIGITS + r'0-9]+\s*[/⁄]\s*[' + SUBSCRIPT_DIGITS + r'0-9]+'
)
NUMBER_PATTERN = (
    r'(?:[0-9]+(?:\.[0-9]+)?(?:\s*(?:' + _SCRIPT_FRACTION + '|' + _GLYPH_CLASS + r'))?'
    r'|' + _SCRIPT_FRACTION +
    r'|' + _GLYPH_CLASS + r')'
)


def format_number(value: float) -> str:
    """Render a number the way it should appear in text ('2', not '2.0')."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def is_pure_number(text: str) -> bool:
    """True if the text is nothing but a plain decimal number."""
    return _PURE_NUMBER_RE.fullmatch(text) is not None


def _replace_glyph(match: re.Match) -> str:
    whole, glyph = match.group(1), match.group(2)
    fraction = FRACTION_GLYPHS[glyph]
    return f"{whole} {fraction}" if whole else fraction


def _normalize_script_fraction(match: re.Match) -> str:
    numerator = match.group(1).translate(_SUPERSCRIPT_TABLE)
    denominator = match.group(2).translate(_SUBSCRIPT_TABLE)
    return f"{numerator}/{denominator}"


def _to_decimal(match: re.Match) -> str:
    numerator, denominator, number, mixed_num, mixed_den = match.groups()
    try:
        if numerator is not None:
            return format_number(int(numerator) / int(denominator))
        if mixed_num is not None:
            return format_number(int(float(number)) + int(mixed_num) / int(mixed_den))
    except ZeroDivisionError:
        return match.group(0)
    return number


def parse_fraction(text: str) -> str:
    """
    Replace every fraction in the text with its decimal form.

    Handles HTML entities, precomposed Unicode fractions, super-/sub-script
    numerals around a fraction slash, ASCII fractions and mixed numbers.
    Text that is not a number is returned untouched (apart from stripping).

    Examples:
        '1&frac12;'      -> '1.5'
        '³⁄₄'            -> '0.75'
        'a 1/2 cup'      -> 'a 0.5 cup'
        '1 - 1 1/2 cups' -> '1 - 1.5 cups'
    """
    text = html.unescape(text)
    text = _GLYPH_RE.sub(_replace_glyph, text)
    text = text.replace('⁄', '/')
    text = _SCRIPT_FRACTION_RE.sub(_normalize_script_fraction, text)
    return _DECIMAL_RE.sub(_to_decimal, text).strip()


def round5(value: float) -> int:
    """
    Round to a multiple of five, e.g. 177 -> 175, 203.11 -> 205.

    Zero stays zero; anything else below five becomes five so that small
    values are never rounded away. Midpoints round up (7.5 -> 10).
    """
    if value == 0:
        return 0
    if value < 5:
        return 5
    return int(math.floor(value / 5 + 0.5) * 5)
