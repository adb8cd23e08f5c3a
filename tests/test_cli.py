#!/usr/bin/env python3
"""
Tests for the command line interface
"""
from typer.testing import CliRunner
from metric_recipes.main import app

runner = CliRunner()

class TestConvertCommand:
    """Test the convert command."""

    def test_convert_text(self):
        """Test converting text given as an argument."""
        result = runner.invoke(app, ["convert", "2 cups sugar"])
        assert result.exit_code == 0
        assert "400g sugar" in result.output

    def test_convert_file(self, tmp_path):
        """Test converting a text file."""
        recipe = tmp_path / "recipe.txt"
        recipe.write_text("1 cup milk\nPreheat oven to 350 degrees F.\n", encoding='utf-8')

        result = runner.invoke(app, ["convert", "--file", str(recipe)])
        assert result.exit_code == 0
        assert "240ml milk" in result.output
        assert "175 degrees C" in result.output

    def test_options(self):
        """Test option flags."""
        result = runner.invoke(app, ["convert", "--no-spoons", "1 teaspoon salt"])
        assert result.exit_code == 0
        assert "(4g)" not in result.output

        result = runner.invoke(app, ["convert", "--print-original", "2 cups sugar"])
        assert "400g (2 cups) sugar" in result.output

        result = runner.invoke(app, ["convert", "--gas-mark", "Bake at 350°F"])
        assert "175°C (gas mark 4)" in result.output

    def test_fail_fast(self):
        """Test fail fast exits with an error."""
        result = runner.invoke(app, ["convert", "--fail-fast", "1 cup unobtainium"])
        assert result.exit_code == 1

    def test_missing_input(self):
        """Test text or file is required."""
        result = runner.invoke(app, ["convert"])
        assert result.exit_code == 1

    def test_missing_file(self, tmp_path):
        """Test a missing file is reported."""
        result = runner.invoke(app, ["convert", "--file", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1

class TestLookupCommand:
    """Test the lookup command."""

    def test_known_ingredient(self):
        """Test grams per cup are shown."""
        result = runner.invoke(app, ["lookup", "pastry flour"])
        assert result.exit_code == 0
        assert "130 g per cup" in result.output

    def test_unknown_ingredient(self):
        """Test unknown ingredients exit with an error."""
        result = runner.invoke(app, ["lookup", "unobtainium"])
        assert result.exit_code == 1

class TestUnitsCommand:
    """Test the units command."""

    def test_units_table(self):
        """Test the units table is printed."""
        result = runner.invoke(app, ["units"])
        assert result.exit_code == 0
        assert "gram" in result.output
        assert "cup" in result.output
