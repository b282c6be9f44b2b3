from __future__ import annotations

import math
import unittest
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from hypaero.core.errors import DomainError, PressureModelError, UnsupportedParameterError
from hypaero.core.panel_pressure import (
    PRESSURE_METHOD_VALUES,
    pressure_coefficient,
    pressure_coefficients,
    resolve_pressure_method,
    sweep_pressure_coefficients,
)
from hypaero.core.pressure_models import (
    FlowTurning,
    hankey_flat_surface_pressure_coefficient,
    modified_newtonian_pressure_coefficient,
    stagnation_pressure_coefficient,
    vacuum_pressure_coefficient,
    van_dyke_unified_pressure_coefficient,
)


class TestMethodSelection(unittest.TestCase):
    def test_resolve_pressure_method_normalizes_and_defaults(self):
        self.assertEqual(resolve_pressure_method(" Tangent_Wedge "), "tangent_wedge")
        self.assertEqual(resolve_pressure_method(""), "newtonian")
        self.assertEqual(resolve_pressure_method(None), "newtonian")
        with self.assertRaises(ValueError):
            resolve_pressure_method("shield")

    def test_dispatch_matches_direct_calls(self):
        d = math.radians(20.0)
        self.assertEqual(pressure_coefficient("hankey", d, 8.0), hankey_flat_surface_pressure_coefficient(d, 8.0))
        self.assertEqual(
            pressure_coefficient("modified_newtonian", d, 8.0, 1.4),
            modified_newtonian_pressure_coefficient(d, stagnation_pressure_coefficient(8.0, 1.4)),
        )
        self.assertAlmostEqual(pressure_coefficient("modified_newtonian", d, cp_stag=1.8), 1.8 * math.sin(d) ** 2, places=14)
        self.assertEqual(pressure_coefficient("vacuum", d, 8.0, 1.4), vacuum_pressure_coefficient(8.0, 1.4))

    def test_van_dyke_branch_follows_inclination_sign(self):
        self.assertEqual(
            pressure_coefficient("van_dyke", -0.1, 5.0, 1.4),
            van_dyke_unified_pressure_coefficient(-0.1, 5.0, 1.4, FlowTurning.EXPANSION),
        )
        self.assertEqual(
            pressure_coefficient("van_dyke", -0.1, 5.0, 1.4, turning=FlowTurning.COMPRESSION),
            van_dyke_unified_pressure_coefficient(0.1, 5.0, 1.4, FlowTurning.COMPRESSION),
        )

    def test_flow_state_is_required(self):
        self.assertEqual(pressure_coefficient("newtonian", 0.5 * math.pi), 2.0)
        with self.assertRaises(ValueError):
            pressure_coefficient("tangent_wedge", 0.2)
        with self.assertRaises(ValueError):
            pressure_coefficient("prandtl_meyer", -0.2, Mach=4.0)

    def test_air_only_methods_propagate_unsupported_gamma(self):
        with self.assertRaises(UnsupportedParameterError):
            pressure_coefficient("empirical_tangent_cone", 0.2, 6.0, 1.3)
        with self.assertRaises(UnsupportedParameterError):
            pressure_coefficient("prandtl_meyer", -0.2, 6.0, 1.3)

    def test_air_fits_reject_other_gamma_through_dispatch(self):
        d = math.radians(20.0)
        for method in ("dahlem_buck", "hankey", "smyth", "base", "acm"):
            with self.subTest(method=method):
                with self.assertRaises(UnsupportedParameterError):
                    pressure_coefficient(method, d, 8.0, 1.67)
                self.assertEqual(pressure_coefficient(method, d, 8.0), pressure_coefficient(method, d, 8.0, 1.4))

    def test_sweep_marks_air_fits_undefined_for_other_gases(self):
        df = sweep_pressure_coefficients(["base", "newtonian"], [10.0], 5.0, 3.0, on_error="skip")
        self.assertTrue(math.isnan(float(df["Cp_base"].iloc[0])))
        self.assertGreater(float(df["Cp_newtonian"].iloc[0]), 0.0)

    def test_vectorized_matches_scalar(self):
        deltar = np.radians(np.linspace(-40.0, 60.0, 11))
        for method in ("newtonian", "van_dyke", "prandtl_meyer", "acm"):
            with self.subTest(method=method):
                vec = pressure_coefficients(method, deltar, 6.0, 1.4)
                ref = np.array([pressure_coefficient(method, float(d), 6.0, 1.4) for d in deltar])
                np.testing.assert_allclose(vec, ref, rtol=1e-10, atol=1e-12)

    def test_vacuum_is_lower_bound_of_every_method(self):
        for gamma in (1.4, 1.67, 3.0):
            for mach in (2.0, 5.0, 12.0):
                cp_vac = vacuum_pressure_coefficient(mach, gamma)
                for deg in (-60.0, -30.0, -10.0, 5.0, 20.0, 45.0, 80.0):
                    for method in PRESSURE_METHOD_VALUES:
                        try:
                            cp = pressure_coefficient(method, math.radians(deg), mach, gamma)
                        except PressureModelError:
                            continue
                        with self.subTest(gamma=gamma, Mach=mach, deltar_deg=deg, method=method):
                            self.assertGreaterEqual(cp, cp_vac - 1e-15)


class TestSweep(unittest.TestCase):
    def test_sweep_builds_one_column_per_method(self):
        df = sweep_pressure_coefficients(["newtonian", "acm"], [0.0, 30.0, 90.0], 4.0, 1.4)
        self.assertEqual(list(df.columns), ["deltar_deg", "Cp_newtonian", "Cp_acm"])
        self.assertEqual(len(df), 3)
        self.assertAlmostEqual(float(df["Cp_newtonian"].iloc[1]), 0.5, places=12)
        self.assertAlmostEqual(float(df["Cp_acm"].iloc[2]), 90.0 / (16.0 * 16.0), places=12)

    def test_skip_policy_leaves_nan_and_logs(self):
        logs: list[str] = []
        df = sweep_pressure_coefficients(
            ["dahlem_buck"],
            [0.0, 10.0],
            6.0,
            1.4,
            on_error="skip",
            logfn=logs.append,
        )
        self.assertTrue(math.isnan(float(df["Cp_dahlem_buck"].iloc[0])))
        self.assertGreater(float(df["Cp_dahlem_buck"].iloc[1]), 0.0)
        self.assertTrue(any(msg.startswith("[SKIP] method=dahlem_buck") for msg in logs))

    def test_raise_policy_propagates_domain_error(self):
        with self.assertRaises(DomainError):
            sweep_pressure_coefficients(["dahlem_buck"], [0.0, 10.0], 6.0, 1.4)

    def test_rejects_bad_arguments(self):
        with self.assertRaises(ValueError):
            sweep_pressure_coefficients(["newtonian"], [0.0], 6.0, 1.4, on_error="ignore")
        with self.assertRaises(ValueError):
            sweep_pressure_coefficients([], [0.0], 6.0, 1.4)


class TestConcurrentEvaluation(unittest.TestCase):
    def test_threads_get_identical_results(self):
        inputs = [
            (method, math.radians(deg), mach)
            for method in ("tangent_wedge", "van_dyke", "prandtl_meyer", "smyth", "modified_newtonian")
            for deg in (-20.0, 5.0, 15.0, 35.0)
            for mach in (3.0, 8.0)
        ]

        def evaluate(args):
            method, d, mach = args
            try:
                return pressure_coefficient(method, d, mach, 1.4)
            except PressureModelError as exc:
                return type(exc).__name__

        serial = [evaluate(args) for args in inputs]
        with ThreadPoolExecutor(max_workers=8) as pool:
            for _ in range(5):
                parallel = list(pool.map(evaluate, inputs))
                self.assertEqual(parallel, serial)


if __name__ == "__main__":
    unittest.main()
