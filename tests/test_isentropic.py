from __future__ import annotations

import math
import unittest

from hypaero.core.errors import DomainError, PressureModelError
from hypaero.core.pressure_models import (
    local_to_static_pressure_ratio,
    mach_angle,
    pressure_coefficient_from_ratio,
    stagnation_pressure_coefficient,
    vacuum_pressure_coefficient,
)


class TestLocalToStaticPressureRatio(unittest.TestCase):
    def test_ratio_is_one_at_rest(self):
        for gamma in (1.1, 1.2, 1.4, 5.0 / 3.0, 3.0):
            with self.subTest(gamma=gamma):
                self.assertEqual(local_to_static_pressure_ratio(0.0, gamma), 1.0)

    def test_matches_isentropic_table_for_air(self):
        table = [
            (0.5, 0.8430),
            (1.0, 0.5283),
            (1.5, 0.2724),
            (2.0, 0.1278),
            (3.0, 0.02722),
        ]
        for mach, expected in table:
            with self.subTest(Mach=mach):
                ratio = local_to_static_pressure_ratio(mach, 1.4)
                self.assertLess(abs(ratio - expected) / expected, 1e-3)

    def test_ratio_decreases_with_mach_and_stays_in_unit_interval(self):
        prev = 1.0
        for i in range(1, 41):
            ratio = local_to_static_pressure_ratio(0.25 * i, 1.4)
            self.assertGreater(ratio, 0.0)
            self.assertLess(ratio, prev)
            prev = ratio

    def test_rejects_invalid_inputs(self):
        with self.assertRaises(DomainError):
            local_to_static_pressure_ratio(-0.1, 1.4)
        with self.assertRaises(DomainError):
            local_to_static_pressure_ratio(2.0, 1.0)
        with self.assertRaises(DomainError):
            local_to_static_pressure_ratio(float("nan"), 1.4)


class TestStagnationPressureCoefficient(unittest.TestCase):
    def test_sonic_value_matches_isentropic_recovery(self):
        gamma = 1.4
        expected = (2.0 / gamma) * (1.2 ** 3.5 - 1.0)
        self.assertAlmostEqual(stagnation_pressure_coefficient(1.0, gamma), expected, places=12)
        self.assertAlmostEqual(expected, 1.2756, places=4)

    def test_hypersonic_limit_for_air(self):
        self.assertAlmostEqual(stagnation_pressure_coefficient(20.0, 1.4), 1.8394, delta=5e-3)

    def test_is_finite_bounded_and_increasing(self):
        prev = 0.0
        for i in range(0, 39):
            mach = 1.0 + 0.5 * i
            cp = stagnation_pressure_coefficient(mach, 1.4)
            with self.subTest(Mach=mach):
                self.assertTrue(math.isfinite(cp))
                self.assertGreater(cp, prev)
                self.assertLess(cp, 2.0)
            prev = cp

    def test_rejects_subsonic_mach(self):
        with self.assertRaises(DomainError):
            stagnation_pressure_coefficient(0.8, 1.4)


class TestVacuumAndHelpers(unittest.TestCase):
    def test_vacuum_pressure_coefficient(self):
        self.assertAlmostEqual(vacuum_pressure_coefficient(2.0, 1.4), -2.0 / 5.6, places=14)

    def test_zero_pressure_ratio_gives_vacuum(self):
        self.assertAlmostEqual(
            pressure_coefficient_from_ratio(0.0, 3.0, 1.4),
            vacuum_pressure_coefficient(3.0, 1.4),
            places=14,
        )
        self.assertEqual(pressure_coefficient_from_ratio(1.0, 3.0, 1.4), 0.0)

    def test_negative_pressure_ratio_is_rejected(self):
        with self.assertRaises(DomainError):
            pressure_coefficient_from_ratio(-0.5, 3.0, 1.4)

    def test_mach_angle(self):
        self.assertAlmostEqual(mach_angle(2.0), math.radians(30.0), places=12)
        self.assertAlmostEqual(mach_angle(1.0), 0.5 * math.pi, places=12)
        with self.assertRaises(PressureModelError):
            mach_angle(0.9)

    def test_domain_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            vacuum_pressure_coefficient(0.5, 1.4)


if __name__ == "__main__":
    unittest.main()
