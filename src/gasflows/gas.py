"""Gas streams and their flux-weighted mixing.

A :class:`Gas` is an immutable stream of known composition. It is built
either from its characteristics (composition, temperature, pressure and
mass flux) or by mixing two existing gases that share a catalog.

Mixing weights every property by mass flux ``Q``::

    g_i = (Q1 * g1_i + Q2 * g2_i) / (Q1 + Q2)
    cp  = (Q1 * cp1 + Q2 * cp2) / (Q1 + Q2)
    R   = (Q1 * R1 + Q2 * R2) / (Q1 + Q2)
    T   = (Q1 * cp1 * T1 + Q2 * cp2 * T2) / (Q1 * cp1 + Q2 * cp2)
    P   = min(P1, P2)
    Q   = Q1 + Q2

Density always follows the ideal gas law from the resulting T, P and R.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Mapping, Sequence, Tuple

import numpy as np

from gasflows.catalog import ChemicalCatalog
from gasflows.exceptions import CatalogMismatchError, DegenerateFluxError
from gasflows.thermo import IdealGasThermo

logger = logging.getLogger(__name__)

FRACTION_SUM_TOLERANCE = 1e-6


@lru_cache(maxsize=None)
def _thermo_for(catalog: ChemicalCatalog) -> IdealGasThermo:
    return IdealGasThermo(catalog)


def _weighted(numerator, denominator) -> np.ndarray:
    # zero weights propagate as inf/nan instead of raising
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.asarray(numerator, dtype=float) / np.float64(denominator)


@dataclass(frozen=True)
class Gas:
    """Immutable gas stream.

    Attributes:
        catalog: Chemicals the mass fractions are aligned with.
        mass_fractions: Mass fraction of each catalog chemical.
        temperature: Temperature (K).
        pressure: Pressure (atm).
        mass_flux: Mass flow rate (kg/s).
        density: Density (kg/m³).
        isobaric_heat_capacity: cp (J/(kg·K)).
        specific_gas_constant: Gas constant per unit mass (J/(kg·K)).
    """

    catalog: ChemicalCatalog = field(repr=False)
    mass_fractions: Tuple[float, ...]
    temperature: float
    pressure: float
    mass_flux: float
    density: float
    isobaric_heat_capacity: float
    specific_gas_constant: float

    @classmethod
    def from_characteristics(
        cls,
        catalog: ChemicalCatalog,
        mass_fractions: Sequence[float] | Mapping[str, float],
        temperature: float,
        pressure: float,
        mass_flux: float,
    ) -> Gas:
        """Build a gas from its composition and state.

        ``mass_fractions`` is either a sequence in catalog order or a
        ``{name: fraction}`` mapping. A sequence of the wrong length raises
        ``CompositionError``. Fractions are not normalized; a sum away from
        1 is only logged.
        """
        fractions = catalog.align(mass_fractions)
        total = math.fsum(fractions)
        if abs(total - 1.0) > FRACTION_SUM_TOLERANCE:
            logger.warning("Mass fractions sum to %g, not 1", total)

        thermo = _thermo_for(catalog)
        specific_gas_constant = thermo.specific_gas_constant(fractions)
        gas = cls(
            catalog=catalog,
            mass_fractions=fractions,
            temperature=float(temperature),
            pressure=float(pressure),
            mass_flux=float(mass_flux),
            density=thermo.density(temperature, pressure, specific_gas_constant),
            isobaric_heat_capacity=thermo.heat_capacity(fractions),
            specific_gas_constant=specific_gas_constant,
        )
        logger.debug("Built %r", gas)
        return gas

    @classmethod
    def mix(
        cls,
        gas1: Gas,
        gas2: Gas,
        catalog: ChemicalCatalog | None = None,
        strict: bool = False,
    ) -> Gas:
        """Mix two gas streams into one.

        Both gases must be built on the same catalog (and on ``catalog`` when
        it is given), otherwise ``CatalogMismatchError`` is raised.

        When the total mass flux or the total heat-capacity flux is zero the
        weighted averages are undefined. By default the resulting inf/nan
        values are kept and a warning is logged; with ``strict=True`` a
        ``DegenerateFluxError`` is raised instead.
        """
        catalog = gas1.catalog if catalog is None else catalog
        if gas1.catalog != catalog or gas2.catalog != catalog:
            raise CatalogMismatchError("Cannot mix gases built on different catalogs")

        q1, q2 = gas1.mass_flux, gas2.mass_flux
        c1, c2 = gas1.isobaric_heat_capacity, gas2.isobaric_heat_capacity
        total_flux = q1 + q2
        heat_flux = q1 * c1 + q2 * c2
        if strict and (total_flux <= 0.0 or heat_flux == 0.0):
            raise DegenerateFluxError(
                f"Mixture has no flux to weight by (Q={total_flux}, Q*cp={heat_flux})"
            )

        fractions = _weighted(
            [q1 * gas1.mass_fraction(i) + q2 * gas2.mass_fraction(i) for i in range(len(catalog))],
            total_flux,
        )
        heat_capacity = _weighted(heat_flux, total_flux)
        gas_constant = _weighted(
            q1 * gas1.specific_gas_constant + q2 * gas2.specific_gas_constant, total_flux
        )
        temperature = _weighted(
            q1 * c1 * gas1.temperature + q2 * c2 * gas2.temperature, heat_flux
        )
        if not (np.isfinite(temperature) and np.all(np.isfinite(fractions))):
            logger.warning(
                "Degenerate mixture flux (Q=%g, Q*cp=%g); properties are not finite",
                total_flux,
                heat_flux,
            )

        pressure = min(gas1.pressure, gas2.pressure)
        thermo = _thermo_for(catalog)
        gas = cls(
            catalog=catalog,
            mass_fractions=tuple(float(value) for value in fractions),
            temperature=float(temperature),
            pressure=pressure,
            mass_flux=total_flux,
            density=thermo.density(float(temperature), pressure, float(gas_constant)),
            isobaric_heat_capacity=float(heat_capacity),
            specific_gas_constant=float(gas_constant),
        )
        logger.debug("Mixed %r", gas)
        return gas

    def mass_fraction(self, index: int) -> float:
        """Return the mass fraction at catalog ``index``, or 0.0 when out of range."""
        if 0 <= index < len(self.catalog):
            return self.mass_fractions[index]
        return 0.0

    def mass_fraction_of(self, name: str) -> float:
        if name not in self.catalog:
            return 0.0
        return self.mass_fractions[self.catalog.index(name)]

    @property
    def composition(self) -> Dict[str, float]:
        return dict(zip(self.catalog.names, self.mass_fractions))
