# fuelbank/blending/ethanol.py
"""
Ethanol blend solver - ideal (additive) volume mixing

Ethanol balance over the two sources:

    (Vg*Eg + Ve*Ea) / (Vg + Ve) = Et

which is linear in Ve:

    Ve = Vg*(Et - Eg) / (Ea - Et)

Symbols:
    Vg  starting fuel volume (L)
    Eg  ethanol fraction of the starting fuel
    Ea  ethanol fraction of the additive (the rest is water/impurities)
    Et  target ethanol fraction
    Ve  additive volume to add (L)
"""
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Tuple, Union
import logging
import math

import numpy as np

from fuelbank.core.base import SolverBase, SpecificationBase
from fuelbank.core.validation import (
    check_finite, check_positive, check_in_closed_01, check_in_half_open_01,
    collect_errors, InputError
)

logger = logging.getLogger("fuelbank.blending")

# Policy tolerances
EQUAL_TOL = 1e-12      # fractions closer than this are the same fraction
NEGATIVE_TOL = 1e-9    # Ve below -NEGATIVE_TOL is a real negative volume
CENTERED_TOL = 5e-4    # |E_final - Et| below this counts as on target

VOLUME_MSG = "starting volume must be greater than 0"
BASE_FRACTION_MSG = "starting ethanol fraction must be between 0% and 100%"
ADDITIVE_FRACTION_MSG = "additive ethanol fraction must be between 0% (exclusive) and 100%"
TARGET_FRACTION_MSG = "target fraction must be between 0% and 100%"
DEGENERATE_MSG = "cannot reach target: additive fraction equals target fraction"
NEGATIVE_MSG = (
    "negative result: the starting mixture is already above target, "
    "or cannot reach target by adding this additive"
)
CEILING_MSG = "target exceeds additive strength: unreachable with this additive"
OVERFLOW_MSG = "blend volume out of numeric range"

NOTE_AT_TARGET = "already at target"
NOTE_CENTERED = "centered"
NOTE_DEVIATION = "rounding may introduce small deviation"


# ============================================================================
# Results
# ============================================================================

@dataclass(frozen=True)
class Invalid:
    """Request rejected; errors are in check order"""
    errors: Tuple[str, ...]

    ok: ClassVar[bool] = False

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": False, "errors": list(self.errors)}


@dataclass(frozen=True)
class Solved:
    """Additive volume and resulting blend"""
    Ve: float        # Additive to add (L)
    Vt: float        # Total volume (L)
    E_final: float   # Resulting ethanol fraction
    water_L: float   # Non-ethanol volume brought in by the additive (L)
    note: str

    ok: ClassVar[bool] = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": True,
            "Ve": self.Ve,
            "Vt": self.Vt,
            "E_final": self.E_final,
            "water_L": self.water_L,
            "note": self.note,
        }


BlendResult = Union[Invalid, Solved]


# ============================================================================
# Forward mixing model
# ============================================================================

def mixture_fraction(
    Vg: float, Eg: float, Ve: Union[float, np.ndarray], Ea: float
) -> Union[float, np.ndarray]:
    """Ethanol fraction after adding Ve of additive to Vg of fuel"""
    if isinstance(Ve, np.ndarray):
        return (Vg * Eg + Ve * Ea) / (Vg + Ve)
    Ve = float(Ve)
    return (Vg * Eg + Ve * Ea) / (Vg + Ve)


def fraction_curve(
    Vg: float, Eg: float, Ea: float, Ve_max: float, n: int = 11
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample the blend fraction over additive volumes 0..Ve_max.

    Returns:
        Ve, E arrays of length n
    """
    Vg = check_positive("Vg", Vg)
    Eg = check_in_closed_01("Eg", Eg)
    Ea = check_in_half_open_01("Ea", Ea)
    Ve_max = check_finite("Ve_max", Ve_max)
    if Ve_max < 0:
        raise InputError(f"Ve_max must be >= 0, got {Ve_max}")
    if n < 2:
        raise InputError(f"n must be >= 2, got {n}")

    Ve = np.linspace(0.0, Ve_max, n)
    return Ve, mixture_fraction(Vg, Eg, Ve, Ea)


# ============================================================================
# Solver
# ============================================================================

@dataclass
class BlendSpec(SpecificationBase):
    """Specification for an ethanol blend request (all fractions as ratios)"""
    Vg: float   # Starting fuel volume (L)
    Eg: float   # Starting fuel ethanol fraction
    Ea: float   # Additive ethanol fraction
    Et: float   # Target ethanol fraction

    # Numerical
    equal_tol: float = EQUAL_TOL
    negative_tol: float = NEGATIVE_TOL
    centered_tol: float = CENTERED_TOL


class BlendSolver(SolverBase):
    """
    Solver for the additive volume that brings a fuel to a target E%.

    solve() never raises: malformed or infeasible requests come back as
    Invalid with every applicable message.
    """

    def __init__(self, spec: BlendSpec):
        self.spec = spec

    def _field_errors(self):
        s = self.spec
        return collect_errors([
            lambda: check_positive("Vg", s.Vg, VOLUME_MSG),
            lambda: check_in_closed_01("Eg", s.Eg, BASE_FRACTION_MSG),
            lambda: check_in_half_open_01("Ea", s.Ea, ADDITIVE_FRACTION_MSG),
            lambda: check_in_closed_01("Et", s.Et, TARGET_FRACTION_MSG),
        ])

    def solve(self) -> BlendResult:
        """Validate, solve the mixing equation and classify the outcome"""
        s = self.spec

        errors = self._field_errors()
        if errors:
            logger.debug("rejected inputs %s: %s", s, errors)
            return Invalid(tuple(errors))

        Vg, Eg, Ea, Et = float(s.Vg), float(s.Eg), float(s.Ea), float(s.Et)

        # Additive at exactly the target strength cannot move the mixture
        if abs(Ea - Et) < s.equal_tol:
            if abs(Eg - Et) < s.equal_tol:
                logger.debug("base already at target %.6g", Et)
                return Solved(Ve=0.0, Vt=Vg, E_final=Et, water_L=0.0, note=NOTE_AT_TARGET)
            logger.debug("degenerate: Ea == Et == %.6g, Eg = %.6g", Et, Eg)
            return Invalid((DEGENERATE_MSG,))

        Ve_raw = Vg * (Et - Eg) / (Ea - Et)
        logger.debug("Ve_raw = %.9g for Vg=%g Eg=%g Ea=%g Et=%g", Ve_raw, Vg, Eg, Ea, Et)

        errors = []
        if Ve_raw < -s.negative_tol:
            errors.append(NEGATIVE_MSG)
        if Et > Ea + s.equal_tol and Eg < Et - s.equal_tol:
            errors.append(CEILING_MSG)
        if errors:
            logger.debug("infeasible blend: %s", errors)
            return Invalid(tuple(errors))

        Ve = max(Ve_raw, 0.0)
        Vt = Vg + Ve
        if not math.isfinite(Vt):
            logger.debug("overflow: Ve_raw = %g, Vg = %g", Ve_raw, Vg)
            return Invalid((OVERFLOW_MSG,))

        E_final = mixture_fraction(Vg, Eg, Ve, Ea)
        water_L = Ve * (1.0 - Ea)

        note = NOTE_CENTERED if abs(E_final - Et) < s.centered_tol else NOTE_DEVIATION
        return Solved(Ve=Ve, Vt=Vt, E_final=E_final, water_L=water_L, note=note)

    def summary(self) -> Dict[str, Any]:
        """Inputs, outputs and balance check for the request"""
        result = self.solve()
        summary = {
            "inputs": self.spec.to_dict(),
            "outputs": None,
            "verification": None,
        }
        if not result.ok:
            summary["errors"] = list(result.errors)
            return summary

        Vg, Eg, Ea = float(self.spec.Vg), float(self.spec.Eg), float(self.spec.Ea)
        summary["outputs"] = result.to_dict()
        summary["verification"] = {
            "ethanol_balance": abs(Vg * Eg + result.Ve * Ea - result.Vt * result.E_final),
            "target_deviation": abs(result.E_final - float(self.spec.Et)),
        }
        return summary


# Convenience functions
def solve(Vg: float, Eg: float, Ea: float, Et: float) -> BlendResult:
    """Quick blend solve with the default tolerances"""
    return BlendSolver(BlendSpec(Vg=Vg, Eg=Eg, Ea=Ea, Et=Et)).solve()
