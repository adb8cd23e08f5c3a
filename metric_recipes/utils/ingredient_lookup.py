"""
Cup to grams lookup for ingredients

The curated table in data/cup_conversions.tsv maps ingredients and their
modifiers ('sifted', 'packed', 'chopped' ...) to grams per US cup. It is
expanded into a nested lookup table that tolerates word order, plurals,
punctuation and American/British naming.
"""
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Union

import pandas as pd

from metric_recipes.data.american_terms import british_to_american
from metric_recipes.models.errors import UnknownIngredientError
from metric_recipes.utils.text import extract_words, normalize_phrase, pluralize

logger = logging.getLogger(__name__)

# ml per cup for liquids
LIQUID = 240

WILDCARD = '*'

DEFAULT_TABLE_PATH = Path(__file__).parent.parent / "data" / "cup_conversions.tsv"

# Plurals that are not produced by pluralize() but occur in the wild
IRREGULAR_PLURALS = {
    'barley': ['barlies'],
    'parsley': ['parslies'],
}

RawEntry = Union[float, Dict[str, 'RawEntry']]


@dataclass(frozen=True)
class Leaf:
    """Grams per cup for a fully resolved ingredient."""
    grams_per_cup: float


@dataclass(frozen=True)
class Branch:
    """Modifier keyword -> node. WILDCARD holds the default when no modifier matches."""
    entries: Mapping[str, 'Node']

    def default(self) -> Optional[float]:
        node = self.entries.get(WILDCARD)
        if isinstance(node, Leaf):
            return node.grams_per_cup
        if isinstance(node, Branch):
            return node.default()
        return None


Node = Union[Leaf, Branch]


def load_cup_conversions(path: Path = DEFAULT_TABLE_PATH) -> Dict[str, RawEntry]:
    """
    Load the curated table into nested dicts.

    Each row has an ingredient list, a ' > ' separated modifier path (empty
    for ingredients without variants) and the grams per cup.
    """
    df = pd.read_csv(path, sep='\t', dtype=str, keep_default_na=False, encoding='utf-8')

    raw: Dict[str, RawEntry] = {}
    for row in df.itertuples(index=False):
        ingredient = row.ingredient.strip()
        grams = float(row.grams_per_cup)
        modifiers = [part.strip() for part in row.modifiers.split('>') if part.strip()]

        if not modifiers:
            raw[ingredient] = grams
            continue

        node = raw.setdefault(ingredient, {})
        for modifier in modifiers[:-1]:
            node = node.setdefault(modifier, {})
        node[modifiers[-1]] = grams

    logger.debug(f"Loaded {len(df)} cup conversion rows from {path}")
    return raw


def _split(keys: str) -> List[str]:
    return [key.strip() for key in keys.split(',') if key.strip()]


def _make_variant_table(raw: RawEntry, ingredient: str) -> Node:
    if not isinstance(raw, dict):
        return Leaf(float(raw))

    out: Dict[str, Node] = {}
    explicit = set()

    for variants, raw_value in raw.items():
        value = _make_variant_table(raw_value, ingredient)

        if variants.startswith(WILDCARD) and variants != WILDCARD:
            variants = variants[1:]
            out[WILDCARD] = value

        for variant in _split(variants):
            if variant == WILDCARD:
                out[WILDCARD] = value
                continue

            key = normalize_phrase(variant)
            out[key] = value
            explicit.add(key)

            # 'icing' sugar is also 'powdered' or 'confectioners' sugar
            full_name = f"{variant} {ingredient}"
            for american in british_to_american(full_name)[1:]:
                american = normalize_phrase(american)
                suffix = ' ' + normalize_phrase(ingredient)
                if not american.endswith(suffix):
                    continue
                translated = american[:-len(suffix)]
                if translated and translated not in explicit:
                    out[translated] = value

    # Variants without any modifier collapse to a plain value
    if list(out) == [WILDCARD]:
        return out[WILDCARD]
    return Branch(MappingProxyType(out))


def make_cup_lut(raw_data: Mapping[str, RawEntry]) -> Branch:
    """
    Expand the curated table into the lookup structure.

     - bare values become {'*': value}
     - comma separated ingredients and modifiers share one table
     - a modifier starting with '*' is also the default ('*') entry
     - American names are added for ingredients and modifiers
     - plural forms are added for ingredients
    """
    out: Dict[str, Node] = {}
    explicit = set()

    for ingredients, raw_value in raw_data.items():
        for ingredient in _split(ingredients):
            if isinstance(raw_value, dict):
                table = _make_variant_table(raw_value, ingredient)
            else:
                table = _make_variant_table({WILDCARD: raw_value}, ingredient)

            own_forms = [ingredient, pluralize(ingredient), *IRREGULAR_PLURALS.get(ingredient, [])]
            american_forms = []
            for american in british_to_american(ingredient)[1:]:
                american_forms.extend([american, pluralize(american)])

            for form in own_forms:
                key = normalize_phrase(form)
                out[key] = table
                explicit.add(key)
            for form in american_forms:
                key = normalize_phrase(form)
                if key not in explicit:
                    out[key] = table

    return Branch(MappingProxyType(out))


def _remove_words(words: List[str], to_remove: List[str]) -> Optional[List[str]]:
    """Remove each word once, in any order. None if any word is missing."""
    remaining = list(words)
    for word in to_remove:
        try:
            remaining.remove(word)
        except ValueError:
            return None
    return remaining


class IngredientLUT:
    """Grams-per-cup lookup for free-text ingredient phrases."""

    def __init__(self, raw_data: Optional[Mapping[str, RawEntry]] = None):
        if raw_data is None:
            raw_data = load_cup_conversions()
        self.root = make_cup_lut(raw_data)
        logger.debug(f"Built cup lookup table with {len(self.root.entries)} ingredient keys")

    @classmethod
    def from_tsv(cls, path: Path) -> 'IngredientLUT':
        return cls(load_cup_conversions(path))

    def ingredients(self) -> List[str]:
        return list(self.root.entries)

    @staticmethod
    def is_liquid(grams_per_cup: Optional[float]) -> bool:
        return grams_per_cup == LIQUID

    def cup_to_grams(self, phrase: str) -> Optional[float]:
        """
        Grams per cup for an ingredient phrase, or None if unknown.

        Ingredient and modifier words are removed from the phrase regardless
        of order ('halved nuts' or 'nuts (halved)'). The combination removing
        the most words wins, so 'pastry flour' matches flour -> pastry
        rather than just flour. On equal word counts the entry listed first
        in the table wins.
        """
        words = extract_words(phrase)
        if 'melted' in words:
            return LIQUID

        best_words = 0
        best_match: Optional[float] = None

        def search(remaining: List[str], node: Branch, matched: int):
            nonlocal best_words, best_match

            for key, child in node.entries.items():
                # Try wildcard last
                if key == WILDCARD:
                    continue

                key_words = key.split(' ')
                reduced = _remove_words(remaining, key_words)
                if reduced is None:
                    continue

                count = matched + len(key_words)
                if isinstance(child, Leaf):
                    if count > best_words:
                        best_words, best_match = count, child.grams_per_cup
                else:
                    search(reduced, child, count)

            default = node.default()
            if default is not None and matched > best_words:
                best_words, best_match = matched, default

        search(words, self.root, 0)
        return best_match

    def lookup_or_raise(self, phrase: str) -> float:
        grams = self.cup_to_grams(phrase)
        if grams is None:
            raise UnknownIngredientError(phrase.strip())
        return grams


@lru_cache(maxsize=None)
def get_ingredient_lut() -> IngredientLUT:
    """Process-wide lookup table built from the bundled data."""
    return IngredientLUT()


def cup_to_grams(phrase: str) -> Optional[float]:
    return get_ingredient_lut().cup_to_grams(phrase)
