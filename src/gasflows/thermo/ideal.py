"""Ideal gas thermodynamics."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from gasflows.catalog import ChemicalCatalog
from gasflows.constants import R_GAS, STANDARD_ATMOSPHERE
from gasflows.thermo.base import ThermoInterface


class IdealGasThermo(ThermoInterface):
    """Ideal gas thermodynamics with constant heat-capacity ratios.

    Mixture properties are mass-fraction weighted sums over the catalog,
    so ``mass_fractions`` must be given in catalog order.
    """

    def __init__(self, catalog: ChemicalCatalog):
        self.catalog = catalog
        molar_masses = np.array([c.molar_mass for c in catalog], dtype=float)
        ratios = np.array([c.heat_capacity_ratio for c in catalog], dtype=float)
        # per-component R_i = R / M_i and cp_i = R_i * k_i / (k_i - 1)
        self._gas_constants = R_GAS / molar_masses
        self._heat_capacities = self._gas_constants * ratios / (ratios - 1.0)

    def heat_capacity(self, mass_fractions: Sequence[float]) -> float:
        """Calculate mass-based cp of the mixture."""
        fractions = np.asarray(mass_fractions, dtype=float)
        return float(np.dot(fractions, self._heat_capacities))

    def specific_gas_constant(self, mass_fractions: Sequence[float]) -> float:
        fractions = np.asarray(mass_fractions, dtype=float)
        return float(np.dot(fractions, self._gas_constants))

    def density(self, temperature: float, pressure: float, specific_gas_constant: float) -> float:
        """Calculate density using the Ideal Gas Law.

        Pressure is in atm. A zero denominator yields inf/nan rather than
        raising.
        """
        # rho = P / (R_specific * T)
        with np.errstate(divide="ignore", invalid="ignore"):
            rho = np.float64(pressure * STANDARD_ATMOSPHERE) / np.float64(
                temperature * specific_gas_constant
            )
        return float(rho)
