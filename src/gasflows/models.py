"""Data structures for chemical components."""

from __future__ import annotations

from dataclasses import dataclass

from gasflows.constants import R_GAS


@dataclass(frozen=True)
class Chemical:
    name: str
    molar_mass: float  # kg/mol
    heat_capacity_ratio: float

    @property
    def specific_gas_constant(self) -> float:
        """Gas constant per unit mass, J/(kg*K)."""
        return R_GAS / self.molar_mass

    @property
    def isobaric_heat_capacity(self) -> float:
        """Ideal-gas cp from the heat-capacity ratio, J/(kg*K)."""
        k = self.heat_capacity_ratio
        return self.specific_gas_constant * k / (k - 1)
