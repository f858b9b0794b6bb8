# fuelbank/cli.py
from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .blending.ethanol import BlendSolver, BlendSpec, fraction_curve
from .blending.form import FORMULA, BlendForm, format_number, format_percent
from .core.conversions import L_to_gal, gal_to_L
from .core.validation import InputError

console = Console()
app = typer.Typer(help="Ethanol blend calculator: how much additive reaches a target E%.")


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")


def _build_spec(
    liters: Optional[str],
    gas_e: Optional[str],
    additive: Optional[str],
    target: Optional[str],
    preset: Optional[str],
    gallons: bool,
) -> BlendSpec:
    form = BlendForm()
    if preset:
        form = form.apply_preset(preset)
    overrides = {
        "gas_liters": liters,
        "gas_E": gas_e,
        "ethanol_strength": additive,
        "target_E": target,
    }
    for field, value in overrides.items():
        if value is not None:
            form = replace(form, **{field: value})

    spec = form.spec()
    if gallons and math.isfinite(spec.Vg):
        spec.Vg = gal_to_L(spec.Vg)
    return spec


@app.command(name="solve")
def solve_command(
    liters: Optional[str] = typer.Option(None, help="Starting fuel volume (default 13)."),
    gas_e: Optional[str] = typer.Option(None, help="E% already in the fuel (default 6)."),
    additive: Optional[str] = typer.Option(None, help="Ethanol % of the additive (default 96)."),
    target: Optional[str] = typer.Option(None, help="Target E% of the blend (default 40)."),
    preset: Optional[str] = typer.Option(None, help="Start from a preset (reference, e10, e0)."),
    gallons: bool = typer.Option(False, help="Read the starting volume as US gallons and also report gallons."),
    verbose: bool = typer.Option(False, help="Log solver decisions."),
) -> None:
    """Compute the additive volume for a target ethanol fraction."""

    _configure_logging(verbose)
    try:
        spec = _build_spec(liters, gas_e, additive, target, preset, gallons)
    except InputError as exc:
        console.print(f"[red]{exc}[/]")
        raise typer.Exit(code=1) from exc

    result = BlendSolver(spec).solve()
    if not result.ok:
        for error in result.errors:
            console.print(f"[red]- {error}[/]")
        raise typer.Exit(code=1)

    table = Table("quantity", "value")
    table.add_row("Additive to add", f"{format_number(result.Ve)} L")
    table.add_row("Total blend", f"{format_number(result.Vt)} L")
    table.add_row("Final E%", format_percent(result.E_final))
    table.add_row("Water introduced", f"{format_number(result.water_L)} L")
    if gallons:
        table.add_row("Additive to add (US)", f"{format_number(L_to_gal(result.Ve))} gal")
        table.add_row("Total blend (US)", f"{format_number(L_to_gal(result.Vt))} gal")
    console.print(table)
    console.print(result.note)
    console.print(f"[dim]{FORMULA}[/]")


@app.command(name="curve")
def curve_command(
    liters: Optional[str] = typer.Option(None, help="Starting fuel volume (default 13)."),
    gas_e: Optional[str] = typer.Option(None, help="E% already in the fuel (default 6)."),
    additive: Optional[str] = typer.Option(None, help="Ethanol % of the additive (default 96)."),
    target: Optional[str] = typer.Option(None, help="Target E% used to size the sweep."),
    preset: Optional[str] = typer.Option(None, help="Start from a preset (reference, e10, e0)."),
    max_liters: Optional[float] = typer.Option(None, help="Largest additive volume to show."),
    points: int = typer.Option(11, help="Number of rows."),
) -> None:
    """Print the blend E% against added additive volume."""

    try:
        spec = _build_spec(liters, gas_e, additive, target, preset, gallons=False)
        if max_liters is None:
            result = BlendSolver(spec).solve()
            max_liters = 2.0 * result.Ve if result.ok and result.Ve > 0 else spec.Vg
        Ve, E = fraction_curve(spec.Vg, spec.Eg, spec.Ea, max_liters, points)
    except InputError as exc:
        console.print(f"[red]{exc}[/]")
        raise typer.Exit(code=1) from exc

    table = Table("additive (L)", "total (L)", "E%")
    for v, e in zip(Ve, E):
        table.add_row(format_number(v), format_number(spec.Vg + v), format_percent(e))
    console.print(table)


if __name__ == "__main__":  # pragma: no cover
    app()
