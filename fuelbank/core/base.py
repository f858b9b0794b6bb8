# fuelbank/core/base.py
"""Base classes for all solvers"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict


class SolverBase(ABC):
    """Base class for all solvers"""

    @abstractmethod
    def solve(self) -> Any:
        """Main solving method"""
        pass

    @abstractmethod
    def summary(self) -> Dict[str, Any]:
        """Return summary of inputs, outputs and checks"""
        pass


@dataclass
class SpecificationBase:
    """Base class for all specifications"""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {k: v for k, v in self.__dict__.items()
                if not k.startswith('_')}
