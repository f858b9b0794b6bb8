"""Ethanol blending calculations"""

from .ethanol import (
    BlendSpec, BlendSolver, BlendResult, Invalid, Solved,
    solve, mixture_fraction, fraction_curve,
    EQUAL_TOL, NEGATIVE_TOL, CENTERED_TOL,
)
from .form import BlendForm, PRESETS, parse_number, format_number, format_percent, render
