from __future__ import annotations

"""Method selection for local panel pressure coefficients."""

import math
from typing import Callable, Iterable

import numpy as np
import pandas as pd

from ..common import AIR_GAMMA
from .errors import PressureModelError
from .pressure_models import (
    FlowTurning,
    acm_empirical_pressure_coefficient,
    empirical_tangent_cone_pressure_coefficient,
    empirical_tangent_wedge_pressure_coefficient,
    hankey_flat_surface_pressure_coefficient,
    high_mach_base_pressure_coefficient,
    modified_dahlem_buck_pressure_coefficient,
    modified_newtonian_pressure_coefficient,
    newtonian_pressure_coefficient,
    prandtl_meyer_freestream_pressure_coefficient,
    prandtl_meyer_freestream_pressure_coefficients,
    smyth_delta_wing_pressure_coefficient,
    stagnation_pressure_coefficient,
    tangent_wedge_pressure_coefficient,
    van_dyke_unified_pressure_coefficient,
    vacuum_pressure_coefficient,
)

PRESSURE_METHOD_VALUES = (
    "newtonian",
    "modified_newtonian",
    "tangent_wedge",
    "empirical_tangent_wedge",
    "empirical_tangent_cone",
    "dahlem_buck",
    "hankey",
    "smyth",
    "van_dyke",
    "prandtl_meyer",
    "vacuum",
    "base",
    "acm",
)
ON_ERROR_VALUES = {"raise", "skip"}

# Air-only fits; gamma defaults to air and any other value is rejected.
_AIR_FIT_METHODS = {"dahlem_buck", "hankey", "smyth", "base", "acm"}


def resolve_pressure_method(value: str | None) -> str:
    """Normalize pressure-method selector to canonical keyword."""
    method = str(value or "").strip().lower() or "newtonian"
    if method not in PRESSURE_METHOD_VALUES:
        raise ValueError(
            f"Invalid pressure method: '{value}'. "
            f"Expected one of: {', '.join(PRESSURE_METHOD_VALUES)}."
        )
    return method


def _require_flow_state(method: str, Mach: float | None, gamma: float | None) -> None:
    if Mach is None:
        raise ValueError(f"Mach is required for method={method}.")
    if gamma is None and method not in _AIR_FIT_METHODS:
        raise ValueError(f"Mach and gamma are required for method={method}.")


def _air_fit_pressure_coefficient(method: str, d: float, M: float, gamma: float) -> float:
    if method == "dahlem_buck":
        return modified_dahlem_buck_pressure_coefficient(d, M, gamma)
    if method == "hankey":
        return hankey_flat_surface_pressure_coefficient(d, M, gamma)
    if method == "smyth":
        return smyth_delta_wing_pressure_coefficient(d, M, gamma)
    if method == "base":
        return high_mach_base_pressure_coefficient(M, gamma)
    return acm_empirical_pressure_coefficient(d, M, gamma)


def pressure_coefficient(
    method: str,
    deltar: float,
    Mach: float | None = None,
    gamma: float | None = None,
    *,
    cp_stag: float | None = None,
    turning: FlowTurning | None = None,
) -> float:
    """Evaluate one panel ``Cp`` with the selected pressure method.

    Args:
        method: One of ``PRESSURE_METHOD_VALUES``.
        deltar: Local inclination angle [rad], positive into the flow.
        Mach: Freestream Mach number; not needed for ``newtonian``.
        gamma: Ratio of specific heats; optional for the air-only fits,
            which reject anything but 1.4.
        cp_stag: Stagnation ``Cp`` for ``modified_newtonian`` and the cap of
            ``tangent_wedge`` (defaults to the Rayleigh-Pitot value).
        turning: ``van_dyke`` branch; inferred from the sign of ``deltar``.
    """
    method = resolve_pressure_method(method)
    d = float(deltar)
    if method == "newtonian":
        return newtonian_pressure_coefficient(d)
    if method == "modified_newtonian" and cp_stag is not None:
        return modified_newtonian_pressure_coefficient(d, cp_stag)

    _require_flow_state(method, Mach, gamma)
    M = float(Mach)
    if method in _AIR_FIT_METHODS:
        return _air_fit_pressure_coefficient(method, d, M, AIR_GAMMA if gamma is None else gamma)
    if method == "modified_newtonian":
        return modified_newtonian_pressure_coefficient(d, stagnation_pressure_coefficient(M, float(gamma)))
    if method == "tangent_wedge":
        return tangent_wedge_pressure_coefficient(M, float(gamma), d, cp_cap=cp_stag)
    if method == "empirical_tangent_wedge":
        return empirical_tangent_wedge_pressure_coefficient(d, M, float(gamma))
    if method == "empirical_tangent_cone":
        return empirical_tangent_cone_pressure_coefficient(d, M, float(gamma))
    if method == "van_dyke":
        branch = turning if turning is not None else FlowTurning.from_inclination(d)
        return van_dyke_unified_pressure_coefficient(d, M, float(gamma), branch)
    if method == "prandtl_meyer":
        return prandtl_meyer_freestream_pressure_coefficient(d, M, float(gamma))
    return vacuum_pressure_coefficient(M, float(gamma))


def pressure_coefficients(
    method: str,
    deltar: np.ndarray,
    Mach: float | None = None,
    gamma: float | None = None,
    *,
    cp_stag: float | None = None,
    turning: FlowTurning | None = None,
) -> np.ndarray:
    """Evaluate ``Cp`` for multiple panels in one call."""
    method = resolve_pressure_method(method)
    d = np.asarray(deltar, dtype=float)
    if d.size == 0:
        return np.zeros_like(d, dtype=float)
    if method == "prandtl_meyer":
        _require_flow_state(method, Mach, gamma)
        return prandtl_meyer_freestream_pressure_coefficients(d, float(Mach), float(gamma))

    out = np.empty(d.shape, dtype=float)
    for idx, value in np.ndenumerate(d):
        out[idx] = pressure_coefficient(
            method,
            float(value),
            Mach,
            gamma,
            cp_stag=cp_stag,
            turning=turning,
        )
    return out


def sweep_pressure_coefficients(
    methods: Iterable[str],
    deltar_deg: Iterable[float],
    Mach: float,
    gamma: float,
    *,
    cp_stag: float | None = None,
    on_error: str = "raise",
    logfn: Callable[[str], None] | None = None,
) -> pd.DataFrame:
    """Tabulate ``Cp`` versus inclination for several methods.

    Returns a DataFrame with ``deltar_deg`` and one ``Cp_<method>`` column
    per method. With ``on_error="skip"`` points where a method is undefined
    are stored as NaN and reported through ``logfn``; with ``"raise"`` the
    first failure propagates.
    """
    if on_error not in ON_ERROR_VALUES:
        raise ValueError(f"Invalid on_error: '{on_error}'. Expected one of: raise, skip.")
    method_list = [resolve_pressure_method(m) for m in methods]
    if not method_list:
        raise ValueError("At least one pressure method is required.")
    angles = np.asarray(list(deltar_deg), dtype=float)

    table: dict[str, np.ndarray] = {"deltar_deg": angles}
    skipped = 0
    for method in method_list:
        col = np.full(angles.shape, np.nan, dtype=float)
        for i, angle_deg in enumerate(angles):
            try:
                col[i] = pressure_coefficient(
                    method,
                    math.radians(float(angle_deg)),
                    Mach,
                    gamma,
                    cp_stag=cp_stag,
                )
            except PressureModelError as exc:
                if on_error == "raise":
                    raise
                skipped += 1
                if logfn is not None:
                    logfn(f"[SKIP] method={method} deltar_deg={angle_deg:g}: {exc}")
        table[f"Cp_{method}"] = col

    if logfn is not None and skipped:
        logfn(f"[INFO] {skipped} undefined point(s) left as NaN.")
    return pd.DataFrame(table)
