# -*- coding: utf-8 -*-
"""
unitconv CLI
====================

Command-line front end for the unit conversion engine.
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from unitconv import __version__
from unitconv.calculation.conversion_service import convert_request
from unitconv.calculation.models import ConversionRequest
from unitconv.config import configure_logging, get_settings
from unitconv.data.units import BASE_UNITS, Category, all_units
from unitconv.exceptions import UnitConvException

app = typer.Typer(
    name="unitconv",
    help="Convert values between units of length, weight and temperature",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def _root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    unitconv - length, weight and temperature conversions
    """
    try:
        configure_logging(level="DEBUG" if verbose else None)
    except UnitConvException as e:
        err_console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(1)


@app.command()
def convert(
    category: str = typer.Argument(..., help="length, weight or temperature"),
    value: str = typer.Argument(..., help="Value to convert"),
    from_unit: str = typer.Argument(..., metavar="FROM", help="Source unit, e.g. mi"),
    to_unit: str = typer.Argument(..., metavar="TO", help="Target unit, e.g. km"),
    precision: Optional[int] = typer.Option(
        None, "--precision", "-p", min=0, max=15, help="Decimal places to show"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Convert VALUE from one unit to another"""
    request = ConversionRequest(category=category, value=value, from_unit=from_unit, to_unit=to_unit)
    try:
        outcome = convert_request(request)
    except UnitConvException as e:
        if as_json:
            console.print_json(json.dumps({"error": e.message, "code": e.code}))
        else:
            err_console.print(f"[red]Error: {escape(e.message)}[/red] ({e.code})")
        raise typer.Exit(1)

    if as_json:
        console.print_json(json.dumps(outcome.to_payload()))
        return

    digits = get_settings().default_precision if precision is None else precision
    formatted = f"{outcome.result:.{digits}f}"
    if digits:
        formatted = formatted.rstrip("0").rstrip(".")
    console.print(
        f"{value.strip()} {outcome.input.from_unit} = "
        f"[bold green]{formatted}[/bold green] {outcome.input.to_unit}"
    )


@app.command()
def units(
    category: Optional[str] = typer.Argument(None, help="Only list this category"),
):
    """List supported units"""
    try:
        listed = all_units(category)
    except UnitConvException as e:
        err_console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(1)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Category", style="cyan")
    table.add_column("Symbol", style="green")
    table.add_column("Name")
    table.add_column("Base", justify="center")

    for unit in listed:
        is_base = BASE_UNITS[unit.category] == unit.symbol
        table.add_row(unit.category.value, unit.symbol, unit.name, "*" if is_base else "")

    console.print(table)


@app.command()
def version():
    """Show unitconv version"""
    console.print(f"[bold green]unitconv v{__version__}[/bold green]")
    console.print(f"Categories: {', '.join(c.value for c in Category)}")


def main():
    """Main entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(1)
