# fuelbank/blending/form.py
"""
Form layer around the blend solver.

Holds the four text fields a user types (volume in liters, fractions in
percent), turns them into a BlendSpec, and formats results for display.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Dict, List, Union
import math

from fuelbank.core.conversions import fraction_to_percent, percent_to_fraction
from fuelbank.core.validation import InputError
from fuelbank.blending.ethanol import BlendResult, BlendSolver, BlendSpec

NOT_AVAILABLE = "–"
FORMULA = "(Vg·Eg + Ve·Ea) / (Vg + Ve) = Et  →  Ve = Vg·(Et−Eg)/(Ea−Et)"


def parse_number(text: Union[str, float, int, None]) -> float:
    """
    Parse a typed number, accepting a comma as decimal separator.

    Blank, unparsable and non-finite input gives NaN so the solver reports
    the field instead of the parser raising.
    """
    if text is None:
        return math.nan
    if isinstance(text, (int, float)):
        v = float(text)
        return v if math.isfinite(v) else math.nan

    s = str(text).strip().replace(",", ".", 1)
    if not s:
        return math.nan
    try:
        v = float(s)
    except ValueError:
        return math.nan
    return v if math.isfinite(v) else math.nan


def format_number(n: float, digits: int = 2) -> str:
    """Fixed fraction digits with thousands separator"""
    try:
        v = float(n)
    except (TypeError, ValueError):
        return NOT_AVAILABLE
    if not math.isfinite(v):
        return NOT_AVAILABLE
    return f"{v:,.{digits}f}"


def format_percent(ratio: float, digits: int = 2) -> str:
    """Format a ratio as percent, e.g. 0.4 -> '40.00%'"""
    if not _is_number(ratio):
        return NOT_AVAILABLE
    return f"{format_number(fraction_to_percent(ratio), digits)}%"


def _is_number(v) -> bool:
    try:
        return math.isfinite(float(v))
    except (TypeError, ValueError):
        return False


# ----------------------------
# Form state
# ----------------------------

@dataclass(frozen=True)
class BlendForm:
    gas_liters: str = "13"
    gas_E: str = "6"              # % ethanol already in the fuel
    ethanol_strength: str = "96"  # % ethanol in the additive
    target_E: str = "40"          # % ethanol wanted in the final blend

    def spec(self) -> BlendSpec:
        return BlendSpec(
            Vg=parse_number(self.gas_liters),
            Eg=_percent(self.gas_E),
            Ea=_percent(self.ethanol_strength),
            Et=_percent(self.target_E),
        )

    def solve(self) -> BlendResult:
        return BlendSolver(self.spec()).solve()

    def apply_preset(self, name: str) -> BlendForm:
        key = name.strip().lower()
        if key not in PRESETS:
            raise InputError(f"Unknown preset '{name}'. Available: {', '.join(PRESETS)}")
        return replace(self, **PRESETS[key])


def _percent(text) -> float:
    v = parse_number(text)
    return percent_to_fraction(v) if math.isfinite(v) else math.nan


# Presets only touch the fields they name
PRESETS: Dict[str, Dict[str, str]] = {
    "reference": {"gas_liters": "13", "gas_E": "6", "ethanol_strength": "96", "target_E": "40"},
    "e10": {"gas_E": "10"},
    "e0": {"gas_E": "0"},
}


# ----------------------------
# Rendering
# ----------------------------

def render(result: BlendResult) -> List[str]:
    """Display lines for a result: the error list, or labelled values"""
    if not result.ok:
        return [f"- {e}" for e in result.errors]

    return [
        f"Additive to add: {format_number(result.Ve)} L",
        f"Total blend: {format_number(result.Vt)} L",
        f"Final E%: {format_percent(result.E_final)}",
        f"Water introduced (estimate): {format_number(result.water_L)} L",
        result.note,
        f"Formula: {FORMULA}",
    ]
