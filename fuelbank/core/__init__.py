# fuelbank/core/__init__.py
"""Core utilities for all blend calculations"""

from .validation import (
    check_finite,
    check_positive,
    check_in_closed_01,
    check_in_half_open_01,
    collect_errors,
    BlendError,
    InputError,
)

from .conversions import (
    percent_to_fraction, fraction_to_percent,
    gal_to_L, L_to_gal,
)

from .base import (
    SolverBase,
    SpecificationBase,
)

__all__ = [
    # Validation
    'check_finite', 'check_positive', 'check_in_closed_01', 'check_in_half_open_01',
    'collect_errors', 'BlendError', 'InputError',

    # Conversions
    'percent_to_fraction', 'fraction_to_percent', 'gal_to_L', 'L_to_gal',

    # Base Classes
    'SolverBase', 'SpecificationBase',
]
