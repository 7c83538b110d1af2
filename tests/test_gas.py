import math
import unittest

from gasflows.catalog import DEFAULT_CATALOG, ChemicalCatalog
from gasflows.constants import R_GAS, STANDARD_ATMOSPHERE
from gasflows.exceptions import (
    CatalogMismatchError,
    CompositionError,
    DegenerateFluxError,
)
from gasflows.gas import Gas
from gasflows.models import Chemical

FRACTIONS_1 = (0.87, 0.07, 0.01, 0.01, 0.01, 0.015, 0.0, 0.0, 0.005, 0.005, 0.005)
FRACTIONS_2 = (0.97, 0.02, 0.003, 0.003, 0.001, 0.002, 0.0, 0.0, 0.001, 0.0, 0.0)


class TestCharacteristics(unittest.TestCase):
    def setUp(self):
        self.methane = ChemicalCatalog((Chemical("C1", 0.01604, 1.303),))

    def test_single_component(self):
        gas = Gas.from_characteristics(self.methane, [1.0], 300.0, 1.0, 1.0)

        R = R_GAS / 0.01604
        self.assertAlmostEqual(gas.specific_gas_constant, R)
        self.assertAlmostEqual(gas.isobaric_heat_capacity, R * 1.303 / 0.303)

    def test_methane_scenario(self):
        gas = Gas.from_characteristics(self.methane, [1.0], 300.0, 1.0, 1.0)

        self.assertAlmostEqual(gas.specific_gas_constant, 518.36, delta=0.01)
        self.assertAlmostEqual(gas.isobaric_heat_capacity, 2229.1, delta=0.1)
        self.assertAlmostEqual(gas.density, 0.6516, delta=1e-4)

    def test_density_follows_ideal_gas_law(self):
        gas = Gas.from_characteristics(DEFAULT_CATALOG, FRACTIONS_1, 318, 4, 10)
        self.assertAlmostEqual(
            gas.density * gas.temperature * gas.specific_gas_constant,
            gas.pressure * STANDARD_ATMOSPHERE,
            delta=1e-6,
        )

    def test_weighted_sums(self):
        gas = Gas.from_characteristics(DEFAULT_CATALOG, FRACTIONS_2, 260, 6, 20)
        expected_r = sum(
            g * c.specific_gas_constant for g, c in zip(FRACTIONS_2, DEFAULT_CATALOG)
        )
        expected_cp = sum(
            g * c.isobaric_heat_capacity for g, c in zip(FRACTIONS_2, DEFAULT_CATALOG)
        )
        self.assertAlmostEqual(gas.specific_gas_constant, expected_r, places=9)
        self.assertAlmostEqual(gas.isobaric_heat_capacity, expected_cp, places=9)

    def test_mapping_composition(self):
        gas = Gas.from_characteristics(DEFAULT_CATALOG, {"C1": 0.9, "N2": 0.1}, 300, 1, 1)
        self.assertEqual(gas.mass_fraction_of("N2"), 0.1)
        self.assertEqual(gas.mass_fraction_of("CO2"), 0.0)
        self.assertEqual(len(gas.mass_fractions), len(DEFAULT_CATALOG))

    def test_length_mismatch_raises(self):
        with self.assertRaises(CompositionError):
            Gas.from_characteristics(DEFAULT_CATALOG, [1.0, 0.0], 300, 1, 1)

    def test_unknown_chemical_raises(self):
        with self.assertRaises(CompositionError):
            Gas.from_characteristics(DEFAULT_CATALOG, {"He": 1.0}, 300, 1, 1)

    def test_unnormalized_fractions_warn(self):
        with self.assertLogs("gasflows.gas", level="WARNING"):
            Gas.from_characteristics(self.methane, [0.5], 300, 1, 1)

    def test_gas_is_immutable(self):
        gas = Gas.from_characteristics(self.methane, [1.0], 300, 1, 1)
        with self.assertRaises(AttributeError):
            gas.temperature = 400.0


class TestMassFractionAccessor(unittest.TestCase):
    def setUp(self):
        self.gas = Gas.from_characteristics(DEFAULT_CATALOG, FRACTIONS_1, 318, 4, 10)

    def test_in_range(self):
        for i, fraction in enumerate(FRACTIONS_1):
            self.assertEqual(self.gas.mass_fraction(i), fraction)

    def test_out_of_range_returns_zero(self):
        self.assertEqual(self.gas.mass_fraction(-1), 0.0)
        self.assertEqual(self.gas.mass_fraction(len(DEFAULT_CATALOG)), 0.0)
        self.assertEqual(self.gas.mass_fraction(1000), 0.0)


class TestMixture(unittest.TestCase):
    def setUp(self):
        self.gas1 = Gas.from_characteristics(DEFAULT_CATALOG, FRACTIONS_1, 318, 4, 10)
        self.gas2 = Gas.from_characteristics(DEFAULT_CATALOG, FRACTIONS_2, 260, 6, 20)

    def test_flux_weighted_properties(self):
        mix = Gas.mix(self.gas1, self.gas2, DEFAULT_CATALOG)
        q1, q2 = 10.0, 20.0
        c1 = self.gas1.isobaric_heat_capacity
        c2 = self.gas2.isobaric_heat_capacity

        self.assertAlmostEqual(mix.mass_fraction(0), (q1 * 0.87 + q2 * 0.97) / 30.0)
        self.assertAlmostEqual(mix.isobaric_heat_capacity, (q1 * c1 + q2 * c2) / 30.0)
        self.assertAlmostEqual(
            mix.specific_gas_constant,
            (q1 * self.gas1.specific_gas_constant + q2 * self.gas2.specific_gas_constant) / 30.0,
        )
        self.assertAlmostEqual(
            mix.temperature, (q1 * c1 * 318 + q2 * c2 * 260) / (q1 * c1 + q2 * c2)
        )
        # energy weighting differs from a plain flux average
        self.assertNotAlmostEqual(mix.temperature, (q1 * 318 + q2 * 260) / 30.0, places=3)

    def test_pressure_and_flux(self):
        mix = Gas.mix(self.gas1, self.gas2)
        self.assertEqual(mix.pressure, 4.0)
        self.assertEqual(mix.mass_flux, 30.0)

    def test_density_follows_ideal_gas_law(self):
        mix = Gas.mix(self.gas1, self.gas2)
        self.assertAlmostEqual(
            mix.density * mix.temperature * mix.specific_gas_constant,
            mix.pressure * STANDARD_ATMOSPHERE,
            delta=1e-6,
        )

    def test_commutative(self):
        ab = Gas.mix(self.gas1, self.gas2)
        ba = Gas.mix(self.gas2, self.gas1)
        for x, y in zip(ab.mass_fractions, ba.mass_fractions):
            self.assertAlmostEqual(x, y, places=12)
        self.assertAlmostEqual(ab.isobaric_heat_capacity, ba.isobaric_heat_capacity)
        self.assertAlmostEqual(ab.specific_gas_constant, ba.specific_gas_constant)
        self.assertAlmostEqual(ab.temperature, ba.temperature)
        self.assertEqual(ab.pressure, ba.pressure)
        self.assertEqual(ab.mass_flux, ba.mass_flux)

    def test_self_mixing_is_idempotent(self):
        mix = Gas.mix(self.gas1, self.gas1)
        self.assertAlmostEqual(mix.temperature, self.gas1.temperature)
        self.assertEqual(mix.pressure, self.gas1.pressure)
        self.assertAlmostEqual(mix.density, self.gas1.density)
        self.assertEqual(mix.mass_flux, 2 * self.gas1.mass_flux)
        for x, y in zip(mix.mass_fractions, self.gas1.mass_fractions):
            self.assertAlmostEqual(x, y, places=12)

    def test_different_catalogs_raise(self):
        other = ChemicalCatalog((Chemical("C1", 0.01604, 1.303),))
        lone = Gas.from_characteristics(other, [1.0], 300, 1, 1)
        with self.assertRaises(CatalogMismatchError):
            Gas.mix(self.gas1, lone)
        with self.assertRaises(CatalogMismatchError):
            Gas.mix(self.gas1, self.gas2, other)

    def test_zero_flux_propagates_nan(self):
        still1 = Gas.from_characteristics(DEFAULT_CATALOG, FRACTIONS_1, 318, 4, 0)
        still2 = Gas.from_characteristics(DEFAULT_CATALOG, FRACTIONS_2, 260, 6, 0)
        with self.assertLogs("gasflows.gas", level="WARNING"):
            mix = Gas.mix(still1, still2)
        self.assertTrue(math.isnan(mix.temperature))
        self.assertTrue(math.isnan(mix.mass_fraction(0)))
        self.assertEqual(mix.mass_flux, 0.0)

    def test_zero_flux_strict_raises(self):
        still1 = Gas.from_characteristics(DEFAULT_CATALOG, FRACTIONS_1, 318, 4, 0)
        still2 = Gas.from_characteristics(DEFAULT_CATALOG, FRACTIONS_2, 260, 6, 0)
        with self.assertRaises(DegenerateFluxError):
            Gas.mix(still1, still2, strict=True)

    def test_zero_heat_capacity_flux_strict_raises(self):
        # all-zero composition: cp == 0 while the streams still flow
        empty = ChemicalCatalog((Chemical("C1", 0.01604, 1.303),))
        with self.assertLogs("gasflows.gas", level="WARNING"):
            blank = Gas.from_characteristics(empty, [0.0], 300, 1, 2)
        self.assertEqual(blank.isobaric_heat_capacity, 0.0)
        with self.assertRaises(DegenerateFluxError):
            Gas.mix(blank, blank, strict=True)

    def test_negative_total_flux_strict_raises(self):
        backflow = Gas.from_characteristics(DEFAULT_CATALOG, FRACTIONS_2, 260, 6, -30)
        with self.assertRaises(DegenerateFluxError):
            Gas.mix(self.gas1, backflow, strict=True)
        # without strict the arithmetic is carried through
        mix = Gas.mix(self.gas1, backflow)
        self.assertEqual(mix.mass_flux, -20.0)


if __name__ == '__main__':
    unittest.main()
