#!/usr/bin/env python3
"""
Unit tests for text helpers and ingredient name tables
"""
from metric_recipes.data.american_terms import american_to_british, british_to_american
from metric_recipes.utils.text import extract_words, normalize_phrase, pluralize

class TestPluralize:
    """Test rule-based pluralization."""

    def test_regular_words(self):
        """Test plain suffix rules."""
        assert pluralize("cup") == "cups"
        assert pluralize("tablespoon") == "tablespoons"
        assert pluralize("berry") == "berries"
        assert pluralize("day") == "days"
        assert pluralize("glass") == "glasses"
        assert pluralize("box") == "boxes"
        assert pluralize("inch") == "inches"
        assert pluralize("potato") == "potatoes"

    def test_phrases(self):
        """Test the last word of a phrase is inflected."""
        assert pluralize("fluid ounce") == "fluid ounces"
        assert pluralize("brown sugar") == "brown sugars"

    def test_unchanged(self):
        """Test uncountable, already plural and non-word input."""
        assert pluralize("rice") == "rice"
        assert pluralize("breadcrumbs") == "breadcrumbs"
        assert pluralize("1/2") == "1/2"
        assert pluralize("") == ""

class TestWordHelpers:
    """Test word extraction and phrase normalization."""

    def test_extract_words(self):
        """Test punctuation is stripped and case lowered."""
        assert extract_words("All-Purpose  Flour!") == ["allpurpose", "flour"]
        assert extract_words("- , 2") == []

    def test_normalize_phrase(self):
        """Test phrases are joined with single spaces."""
        assert normalize_phrase("  Brown, SUGAR ") == "brown sugar"

class TestAmericanTerms:
    """Test British and American ingredient names."""

    def test_british_to_american(self):
        """Test all American synonyms are listed after the term."""
        assert british_to_american("icing sugar") == [
            "icing sugar", "powdered sugar", "confectioners sugar", "powder sugar",
        ]
        assert british_to_american("flour") == ["flour"]

    def test_american_to_british(self):
        """Test American names map to British ones."""
        assert american_to_british("cilantro") == "coriander"
        assert american_to_british("salt") == "salt"
