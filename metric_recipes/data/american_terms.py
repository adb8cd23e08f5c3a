"""
American and British ingredient names
"""
from typing import Dict, List

AMERICAN_TO_BRITISH: Dict[str, str] = {
    'eggplant': 'aubergine',
    'canadian bacon': 'back bacon',
    'beet': 'beetroot',
    'hard candy': 'boiled sweet',
    'fava bean': 'broad bean',
    'cotton candy': 'candyfloss',
    'cilantro': 'coriander',
    'cornstarch': 'cornflour',
    'zucchini': 'courgette',
    'heavy cream': 'double cream',
    'graham crackers': 'digestive biscuits',
    'ginger snap': 'ginger nut',
    'bell pepper': 'green pepper',
    'powdered sugar': 'icing sugar',
    'confectioners sugar': 'icing sugar',
    'powder sugar': 'icing sugar',
    'baked potato': 'jacket potato',
    'light cream': 'single cream',
    'white raisin': 'sultana',
    'molasses': 'treacle',
    'all-purpose flour': 'plain flour',
    'ap flour': 'plain flour',
    'canola oil': 'rapeseed oil',
    'kentucky beans': 'runner beans',
    'navy beans': 'haricot beans',
    'pie shell': 'pastry case',
    'saran wrap': 'cling film',
    'plastic wrap': 'cling film',
    'popsicle': 'ice lolly',
    'potato chips': 'crisps',
    'superfine granulated sugar': 'caster sugar',
    'tomato paste': 'tomato puree',
    'wax paper': 'greaseproof paper',
}

BRITISH_TO_AMERICAN: Dict[str, List[str]] = {}
for _american, _british in AMERICAN_TO_BRITISH.items():
    BRITISH_TO_AMERICAN.setdefault(_british, []).append(_american)


def british_to_american(term: str) -> List[str]:
    """The term followed by its American equivalents, if any."""
    return [term, *BRITISH_TO_AMERICAN.get(term, [])]


def american_to_british(term: str) -> str:
    """British name for an American term; other terms are returned unchanged."""
    return AMERICAN_TO_BRITISH.get(term, term)
