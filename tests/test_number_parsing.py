#!/usr/bin/env python3
"""
Unit tests for fraction parsing and number helpers
"""
import pytest
from metric_recipes.utils.number_parsing import format_number, is_pure_number, parse_fraction, round5

class TestParseFraction:
    """Test fraction to decimal conversion."""

    def test_html_entity(self):
        """Test HTML entities for fraction glyphs are decoded."""
        assert parse_fraction("1&frac12;") == "1.5"
        assert parse_fraction("&#189;") == "0.5"
        assert parse_fraction("&#xBD;") == "0.5"

    def test_superscript_subscript_fraction(self):
        """Test super/subscript digits around a fraction slash."""
        assert parse_fraction("³⁄₄") == "0.75"
        assert parse_fraction("1 ³⁄₄") == "1.75"

    def test_unicode_glyphs(self):
        """Test precomposed fraction glyphs, with and without a whole number."""
        assert parse_fraction("½") == "0.5"
        assert parse_fraction("2½") == "2.5"
        assert parse_fraction("2 ¼") == "2.25"
        assert parse_fraction("⅛") == "0.125"

    def test_ascii_fractions(self):
        """Test plain and mixed ASCII fractions."""
        assert parse_fraction("1/2") == "0.5"
        assert parse_fraction("1 1/2") == "1.5"
        assert parse_fraction("3 / 4") == "0.75"

    def test_every_occurrence_is_converted(self):
        """Test multiple fractions in one string."""
        assert parse_fraction("a 1/2 cup") == "a 0.5 cup"
        assert parse_fraction("1 - 1 1/2 cups") == "1 - 1.5 cups"

    def test_decimals_unchanged(self):
        """Test plain numbers pass through."""
        assert parse_fraction("2") == "2"
        assert parse_fraction("1.5") == "1.5"
        assert parse_fraction("  3 ") == "3"

    def test_malformed_left_as_is(self):
        """Test division by zero does not raise."""
        assert parse_fraction("1/0") == "1/0"
        assert parse_fraction("no numbers here") == "no numbers here"

    @pytest.mark.parametrize("text", [
        "1&frac12; cups", "³⁄₄", "2 ¼ cups and 1/3 cup", "1.5", "1/0", "plain text",
    ])
    def test_idempotent(self, text):
        """Test parsing already parsed text changes nothing."""
        once = parse_fraction(text)
        assert parse_fraction(once) == once

class TestNumberHelpers:
    """Test number formatting and rounding."""

    def test_format_number(self):
        """Test whole numbers lose the trailing .0."""
        assert format_number(2.0) == "2"
        assert format_number(2.5) == "2.5"
        assert format_number(960) == "960"

    def test_is_pure_number(self):
        """Test the pure decimal check."""
        assert is_pure_number("1.5")
        assert is_pure_number("1.50")
        assert is_pure_number("12")
        assert not is_pure_number("1/2")
        assert not is_pure_number("1 - 1.5")
        assert not is_pure_number("")

    def test_round5(self):
        """Test rounding to multiples of five."""
        assert round5(0) == 0
        assert round5(3) == 5
        assert round5(7.5) == 10
        assert round5(12.5) == 15
        assert round5(177) == 175
        assert round5(203.11) == 205
        assert round5(202.4) == 200
