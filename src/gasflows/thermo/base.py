"""Base interface for thermodynamic models."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence


class ThermoInterface(ABC):
    """Abstract base class for thermodynamic property packages."""

    @abstractmethod
    def heat_capacity(self, mass_fractions: Sequence[float]) -> float:
        """Calculate mixture isobaric heat capacity (J/kg/K)."""
        pass

    @abstractmethod
    def specific_gas_constant(self, mass_fractions: Sequence[float]) -> float:
        """Calculate mixture gas constant per unit mass (J/kg/K)."""
        pass

    @abstractmethod
    def density(self, temperature: float, pressure: float, specific_gas_constant: float) -> float:
        """Calculate density (kg/m^3) from T (K), P (atm) and R (J/kg/K)."""
        pass
