#!/usr/bin/env python3
"""
Metric Recipes - Command Line Interface
"""
import typer
from rich.console import Console
from rich.table import Table
from typing import Optional
from pathlib import Path

from metric_recipes.config.settings import Settings
from metric_recipes.models.unit import get_unit_registry
from metric_recipes.orchestrators.orchestrator import RecipeTextOrchestrator
from metric_recipes.utils.ingredient_lookup import get_ingredient_lut

app = typer.Typer(
    name="metric-recipes",
    help="Convert US-centric recipe text to metric",
    add_completion=False,
)
console = Console()

@app.command()
def convert(
    text: Optional[str] = typer.Argument(None, help="Recipe text to convert"),
    file: Optional[Path] = typer.Option(None, "--file", help="Text file to convert"),
    gas_mark: bool = typer.Option(False, "--gas-mark", help="Follow converted oven temperatures with the gas mark"),
    no_spoons: bool = typer.Option(False, "--no-spoons", help="Leave teaspoons and tablespoons alone"),
    print_original: bool = typer.Option(False, "--print-original", help="Keep the original measure after the conversion"),
    fail_fast: bool = typer.Option(False, "--fail-fast", help="Stop at the first measure that cannot be converted"),
    config_file: Optional[Path] = typer.Option(None, help="Configuration file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
):
    """Convert recipe text given as an argument or read from a file."""

    # Validate input - must provide either text or file, but not both
    if text is None and file is None:
        console.print(f"[bold red]✗ Must provide either TEXT or --file option[/bold red]")
        console.print(f"[yellow]Examples:[/yellow]")
        console.print(f"  metric-recipes convert \"2 cups sugar\"")
        console.print(f"  metric-recipes convert --file recipe.txt")
        raise typer.Exit(code=1)

    if text is not None and file is not None:
        console.print(f"[bold red]✗ Cannot provide both TEXT and --file option[/bold red]")
        raise typer.Exit(code=1)

    if file is not None:
        if not file.exists():
            console.print(f"[bold red]✗ File not found:[/bold red] {file}")
            raise typer.Exit(code=1)
        text = file.read_text(encoding='utf-8')

    # Load configuration; command line flags only switch options on
    settings = Settings.load(config_file)
    if verbose:
        settings = settings.model_copy(update={'log_level': 'DEBUG'})

    defaults = settings.conversion
    options = defaults.model_copy(update={
        'gas_mark': gas_mark or defaults.gas_mark,
        'convert_spoons': defaults.convert_spoons and not no_spoons,
        'print_original': print_original or defaults.print_original,
        'fail_fast': fail_fast or defaults.fail_fast,
    })

    try:
        result = RecipeTextOrchestrator(settings, options).process_text(text)
    except Exception as e:
        console.print(f"[bold red]✗ Unexpected error:[/bold red] {str(e)}")
        if verbose:
            console.print_exception()
        raise typer.Exit(code=1)

    if not result.success:
        console.print(f"[bold red]✗ {result.error}[/bold red]")
        raise typer.Exit(code=1)

    console.print(result.text, markup=False, highlight=False, soft_wrap=True)

    if verbose:
        console.print(f"[bold blue]Measures converted:[/bold blue] {len(result.conversions)}")
        for conversion in result.conversions:
            console.print(f"  • {conversion.original} → {conversion.converted}", markup=False)
        if result.partial:
            console.print(f"[bold yellow]Left unconverted:[/bold yellow] {len(result.failures)}")
            for failure in result.failures:
                console.print(f"  • {failure.original}: {failure.reason}", markup=False)

@app.command()
def lookup(
    phrase: str = typer.Argument(..., help="Ingredient phrase, e.g. 'packed brown sugar'"),
):
    """Show the grams per cup for an ingredient phrase."""
    lut = get_ingredient_lut()
    grams = lut.cup_to_grams(phrase)

    if grams is None:
        console.print(f"[bold red]✗ Unknown ingredient:[/bold red] {phrase}")
        raise typer.Exit(code=1)

    kind = "liquid" if lut.is_liquid(grams) else "solid"
    console.print(f"[bold green]{phrase}:[/bold green] {grams:g} g per cup ({kind})")

@app.command()
def units():
    """List the known units and their spellings."""
    registry = get_unit_registry()

    table = Table(title="Units")
    table.add_column("Name", style="bold")
    table.add_column("Domain")
    table.add_column("System")
    table.add_column("Value", justify="right")
    table.add_column("Spellings")

    for unit in registry.units:
        table.add_row(
            unit.name,
            unit.domain.value,
            unit.system.value,
            f"{unit.value:g}",
            ", ".join(unit.altnames),
        )

    console.print(table)


if __name__ == "__main__":
    app()
