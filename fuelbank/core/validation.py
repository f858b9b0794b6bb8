# fuelbank/core/validation.py
"""Unified validation for all blend calculations"""
from typing import Any, Callable, List, Optional, Sequence, Union
import math


class BlendError(Exception):
    """Base exception for all fuel blend calculations"""
    pass


class InputError(BlendError):
    """Invalid input parameters"""
    pass


def check_finite(name: str, value: Any, message: Optional[str] = None) -> float:
    """Check value is a finite number"""
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise InputError(message or f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(v):
        raise InputError(message or f"{name} must be finite, got {v}")
    return v


def check_positive(name: str, value: Union[float, int], message: Optional[str] = None) -> float:
    """Check value is finite and positive"""
    v = check_finite(name, value, message)
    if v <= 0:
        raise InputError(message or f"{name} must be > 0, got {v}")
    return v


def check_in_closed_01(name: str, value: float, message: Optional[str] = None) -> float:
    """Check value in [0, 1]"""
    v = check_finite(name, value, message)
    if not (0.0 <= v <= 1.0):
        raise InputError(message or f"{name} must be in [0, 1], got {v}")
    return v


def check_in_half_open_01(name: str, value: float, message: Optional[str] = None) -> float:
    """Check value in (0, 1]"""
    v = check_finite(name, value, message)
    if not (0.0 < v <= 1.0):
        raise InputError(message or f"{name} must satisfy 0 < {name} <= 1, got {v}")
    return v


def collect_errors(checks: Sequence[Callable[[], Any]]) -> List[str]:
    """
    Run every check and gather the InputError messages in order.

    Unlike calling the check_* helpers directly, nothing short-circuits:
    a form with three bad fields reports three messages.
    """
    errors = []
    for check in checks:
        try:
            check()
        except InputError as exc:
            errors.append(str(exc))
    return errors
