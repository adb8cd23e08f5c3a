"""
Text helpers shared by the unit registry and the ingredient lookup
"""
import re
from typing import List

# Words that are never pluralized with a plain suffix
UNCOUNTABLE = {
    'rice', 'couscous', 'molasses', 'mincemeat', 'miso', 'mirin', 'mentsuyu',
    'panko', 'polenta', 'cornmeal', 'water', 'oil', 'vinegar', 'wine', 'milk',
    'buttermilk', 'broth', 'stock', 'honey', 'salt', 'treacle', 'lard',
}

_VOWELS = 'aeiou'


def pluralize(phrase: str) -> str:
    """Return the regular plural of a word or phrase (last word is inflected)."""
    if not phrase:
        return phrase

    head, _, word = phrase.rpartition(' ')
    prefix = f"{head} " if head else ""
    lower = word.lower()

    if lower in UNCOUNTABLE or not lower.isalpha():
        return phrase
    if len(word) > 1 and lower.endswith('y') and lower[-2] not in _VOWELS:
        return prefix + word[:-1] + 'ies'
    if lower.endswith(('s', 'x', 'ch', 'sh')) and len(word) > 2:
        # 'breadcrumbs' is already plural; 'glass' is not
        if lower.endswith('s') and not lower.endswith('ss'):
            return phrase
        return prefix + word + 'es'
    if lower.endswith('o') and len(word) > 3 and lower[-2] not in _VOWELS:
        return prefix + word + 'es'
    return prefix + word + 's'


def extract_words(text: str) -> List[str]:
    """Lowercase words with everything but letters removed; empty words dropped."""
    words = []
    for token in text.lower().split():
        token = re.sub(r'[^a-z]', '', token)
        if token:
            words.append(token)
    return words


def normalize_phrase(text: str) -> str:
    """Normalize case, punctuation and spacing of an ingredient phrase."""
    return ' '.join(extract_words(text))
