"""fuelbank - ethanol fuel blend calculations"""

from .blending import BlendSpec, BlendSolver, Invalid, Solved, solve

__version__ = "0.1.0"

__all__ = ["BlendSpec", "BlendSolver", "Invalid", "Solved", "solve", "__version__"]
