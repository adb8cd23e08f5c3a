#!/usr/bin/env python3
"""
Unit tests for the cup to grams ingredient lookup
"""
import pytest
from metric_recipes.models.errors import UnknownIngredientError
from metric_recipes.utils.ingredient_lookup import (
    LIQUID,
    Branch,
    IngredientLUT,
    Leaf,
    cup_to_grams,
    get_ingredient_lut,
    load_cup_conversions,
    make_cup_lut,
)

class TestCupToGrams:
    """Test ingredient phrase lookup against the bundled table."""

    def setup_method(self):
        """Set up test environment."""
        self.lut = get_ingredient_lut()

    def test_modifier_match(self):
        """Test modifiers are matched regardless of word order and punctuation."""
        assert self.lut.cup_to_grams("pastry flour") == 130
        assert self.lut.cup_to_grams("flour, pastry") == 130
        assert self.lut.cup_to_grams("masa corn flour") == 114

    def test_unknown_ingredient(self):
        """Test unknown phrases give None."""
        assert self.lut.cup_to_grams("unknown_xyz_ingredient") is None
        assert self.lut.cup_to_grams("") is None

    def test_default_variant(self):
        """Test the wildcard entry is used when no modifier matches."""
        assert self.lut.cup_to_grams("flour") == 120
        assert self.lut.cup_to_grams("2 cups sugar") == 200
        assert self.lut.cup_to_grams("1 cup cornstarch") == 120

    def test_nested_modifiers(self):
        """Test modifiers nested below other modifiers."""
        assert self.lut.cup_to_grams("1 cup brown sugar, packed") == 220
        assert self.lut.cup_to_grams("brown sugar") == 180
        assert self.lut.cup_to_grams("all purpose flour") == 120
        assert self.lut.cup_to_grams("well sifted all-purpose flour") == 110

    def test_plurals(self):
        """Test plural ingredient names."""
        assert self.lut.cup_to_grams("walnuts, chopped") == 125
        assert self.lut.cup_to_grams("pecans (halved)") == 100

    def test_american_names(self):
        """Test American names map to the British entries."""
        assert self.lut.cup_to_grams("powdered sugar") == 120
        assert self.lut.cup_to_grams("icing sugar") == 120
        assert self.lut.cup_to_grams("confectioners sugar") == 128
        assert self.lut.cup_to_grams("all-purpose flour") == 120

    def test_explicit_entry_beats_translation(self):
        """Test a translated name never replaces an entry listed in the table."""
        assert self.lut.cup_to_grams("molasses") == 325
        assert self.lut.cup_to_grams("black treacle") == 325
        assert self.lut.cup_to_grams("golden syrup") == 340

    def test_melted(self):
        """Test melted ingredients are liquids."""
        assert self.lut.cup_to_grams("butter, melted") == LIQUID
        assert self.lut.cup_to_grams("butter") == 225

    def test_liquids(self):
        """Test liquid detection."""
        assert self.lut.is_liquid(self.lut.cup_to_grams("whole milk"))
        assert self.lut.is_liquid(self.lut.cup_to_grams("chicken broth"))
        assert not self.lut.is_liquid(self.lut.cup_to_grams("salt"))

    def test_lookup_or_raise(self):
        """Test the raising variant."""
        assert self.lut.lookup_or_raise("honey") == 340
        with pytest.raises(UnknownIngredientError) as exc_info:
            self.lut.lookup_or_raise("unobtainium")
        assert exc_info.value.phrase == "unobtainium"

    def test_module_function(self):
        """Test the shared lookup table."""
        assert cup_to_grams("pastry flour") == 130
        assert get_ingredient_lut() is get_ingredient_lut()

class TestTieBreak:
    """Test equal word counts are resolved by table order."""

    def test_first_key_wins(self):
        """Test the first listed ingredient wins a tie."""
        lut = IngredientLUT({'apple': 100, 'pear': 200})
        assert lut.cup_to_grams("apple pear") == 100

        lut = IngredientLUT({'pear': 200, 'apple': 100})
        assert lut.cup_to_grams("apple pear") == 200

    def test_more_words_beat_order(self):
        """Test a longer match wins regardless of order."""
        lut = IngredientLUT({'nut': {'*whole': 140, 'chopped': 130}, 'peanut': 150})
        assert lut.cup_to_grams("chopped nut and peanut") == 130

class TestMakeCupLut:
    """Test building the lookup structure."""

    def test_bare_value_becomes_leaf(self):
        """Test ingredients without variants are leaves."""
        root = make_cup_lut({'honey': 340})
        assert isinstance(root, Branch)
        assert root.entries['honey'] == Leaf(340)

    def test_wildcard_prefix(self):
        """Test '*name' registers both the name and the default."""
        root = make_cup_lut({'flour': {'*white': 120, 'pastry': 130}})
        flour = root.entries['flour']
        assert isinstance(flour, Branch)
        assert flour.entries['white'] == Leaf(120)
        assert flour.entries['*'] == Leaf(120)
        assert flour.entries['pastry'] == Leaf(130)
        assert flour.default() == 120

    def test_comma_separated_keys(self):
        """Test synonyms share one table."""
        root = make_cup_lut({'butter, margarine': 225, 'nut': {'chopped, diced': 130}})
        assert root.entries['butter'] == Leaf(225)
        assert root.entries['margarine'] == Leaf(225)
        nut = root.entries['nut']
        assert nut.entries['chopped'] is nut.entries['diced']

    def test_plurals_registered(self):
        """Test regular and irregular plurals."""
        root = make_cup_lut({'walnut': 100, 'parsley': 30})
        assert root.entries['walnuts'] is root.entries['walnut']
        assert 'parslies' in root.entries

    def test_american_ingredient_names(self):
        """Test American synonyms of ingredients."""
        root = make_cup_lut({'cornflour': 120})
        assert root.entries['cornstarch'] is root.entries['cornflour']

    def test_read_only(self):
        """Test the structure cannot be modified."""
        root = make_cup_lut({'honey': 340})
        with pytest.raises(TypeError):
            root.entries['honey'] = Leaf(1)

class TestLoadCupConversions:
    """Test loading the curated table from TSV."""

    def test_load_tsv(self, tmp_path):
        """Test rows with and without modifier paths."""
        path = tmp_path / "cups.tsv"
        path.write_text(
            "ingredient\tmodifiers\tgrams_per_cup\n"
            "honey\t\t340\n"
            "sugar\t*white\t200\n"
            "sugar\tbrown > *\t180\n"
            "sugar\tbrown > packed\t220\n",
            encoding='utf-8',
        )

        raw = load_cup_conversions(path)
        assert raw == {
            'honey': 340.0,
            'sugar': {'*white': 200.0, 'brown': {'*': 180.0, 'packed': 220.0}},
        }

        lut = IngredientLUT.from_tsv(path)
        assert lut.cup_to_grams("packed brown sugar") == 220
        assert lut.cup_to_grams("white sugar") == 200
        assert 'sugars' in lut.ingredients()
