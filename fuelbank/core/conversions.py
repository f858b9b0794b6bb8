# fuelbank/core/conversions.py
"""Unit conversion utilities for blend calculations"""

from typing import Union


# ============================================================================
# Fraction Conversions
# ============================================================================

def percent_to_fraction(p: Union[float, int]) -> float:
    """Convert volume percent (E40 = 40) to a ratio in [0, 1]"""
    return float(p) / 100.0

def fraction_to_percent(x: Union[float, int]) -> float:
    """Convert a ratio to volume percent"""
    return float(x) * 100.0


# ============================================================================
# Volume Conversions
# ============================================================================

def gal_to_L(V_gal: Union[float, int]) -> float:
    """Convert US gallons to liters"""
    return float(V_gal) * 3.785411784

def L_to_gal(V_L: Union[float, int]) -> float:
    """Convert liters to US gallons"""
    return float(V_L) / 3.785411784
