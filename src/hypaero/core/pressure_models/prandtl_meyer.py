from __future__ import annotations

"""Prandtl-Meyer expansion relations."""

import math

import numpy as np

from ...common import AIR_GAMMA, require_air, require_gamma, require_inclination, require_mach
from ..errors import DomainError
from .isentropic import local_to_static_pressure_ratio, vacuum_pressure_coefficient

# Upper limit of nu(M) as M -> inf for gamma = 1.4.
MAXIMUM_PRANDTL_MEYER_FUNCTION_VALUE = 0.5 * math.pi * (math.sqrt(6.0) - 1.0)

# Rational fit M(y), y = (nu/nu_max)^(2/3), for gamma = 1.4 (I. M. Hall, 1975):
# M = (1 + P1*y + P2*y^2 + P3*y^3) / (1 + P4*y + P5*y^2)
PRANDTL_MEYER_PARAMETER_1 = 1.3604
PRANDTL_MEYER_PARAMETER_2 = 0.0962
PRANDTL_MEYER_PARAMETER_3 = -0.5127
PRANDTL_MEYER_PARAMETER_4 = -0.6722
PRANDTL_MEYER_PARAMETER_5 = -0.3278

INVERSE_PRANDTL_MEYER_COEFFICIENTS = (
    PRANDTL_MEYER_PARAMETER_1,
    PRANDTL_MEYER_PARAMETER_2,
    PRANDTL_MEYER_PARAMETER_3,
    PRANDTL_MEYER_PARAMETER_4,
    PRANDTL_MEYER_PARAMETER_5,
)


def _prandtl_meyer_nu(Mach: np.ndarray, gamma: float) -> np.ndarray:
    """Return Prandtl-Meyer angle ``nu`` [rad] for ``Mach >= 1`` (unchecked)."""
    g = float(gamma)
    m = np.asarray(Mach, dtype=float)
    m2 = np.square(m)
    beta = np.sqrt(np.maximum(m2 - 1.0, 0.0))
    a = math.sqrt((g + 1.0) / (g - 1.0))
    b = math.sqrt((g - 1.0) / (g + 1.0))
    return a * np.arctan(b * beta) - np.arctan(beta)


def _inverse_prandtl_meyer_fit(nu: np.ndarray) -> np.ndarray:
    """Evaluate the gamma=1.4 rational fit for ``0 <= nu < nu_max`` (unchecked)."""
    y = np.power(np.asarray(nu, dtype=float) / MAXIMUM_PRANDTL_MEYER_FUNCTION_VALUE, 2.0 / 3.0)
    p1, p2, p3, p4, p5 = INVERSE_PRANDTL_MEYER_COEFFICIENTS
    num = 1.0 + y * (p1 + y * (p2 + y * p3))
    den = 1.0 + y * (p4 + y * p5)
    return num / den


def prandtl_meyer_function(Mach: float, gamma: float) -> float:
    """Return Prandtl-Meyer angle ``nu(M)`` [rad].

    ``nu = sqrt((g+1)/(g-1)) * atan(sqrt((g-1)/(g+1)*(M^2-1))) - atan(sqrt(M^2-1))``.
    ``nu(1) = 0`` and ``nu`` increases monotonically with Mach.
    """
    M = require_mach(Mach, "prandtl_meyer_function")
    g = require_gamma(gamma, "prandtl_meyer_function")
    return float(_prandtl_meyer_nu(np.array([M], dtype=float), g)[0])


def prandtl_meyer_functions(Mach: np.ndarray, gamma: float) -> np.ndarray:
    """Vectorized :func:`prandtl_meyer_function` over a Mach array."""
    g = require_gamma(gamma, "prandtl_meyer_function")
    m = np.asarray(Mach, dtype=float)
    if not np.all(np.isfinite(m)):
        raise DomainError("prandtl_meyer_function requires finite Mach values.")
    if np.any(m < 1.0):
        raise DomainError(f"prandtl_meyer_function requires Mach >= 1, got min {float(m.min())}")
    return _prandtl_meyer_nu(m, g)


def inverse_prandtl_meyer_function(nu: float, gamma: float = AIR_GAMMA) -> float:
    """Return Mach number for Prandtl-Meyer angle ``nu`` [rad].

    Uses a closed-form rational fit instead of iterating on ``nu(M)``, so it
    is only defined for ``gamma = 1.4`` and ``0 <= nu < nu_max``. At
    ``nu_max`` the Mach number is unbounded and the input is rejected.
    """
    require_air(gamma, "inverse_prandtl_meyer_function")
    v = float(nu)
    if not math.isfinite(v) or v < 0.0 or v >= MAXIMUM_PRANDTL_MEYER_FUNCTION_VALUE:
        raise DomainError(
            "inverse_prandtl_meyer_function requires 0 <= nu < "
            f"{MAXIMUM_PRANDTL_MEYER_FUNCTION_VALUE:.6f} rad, got {v}"
        )
    return float(_inverse_prandtl_meyer_fit(np.array([v], dtype=float))[0])


def prandtl_meyer_freestream_pressure_coefficient(
    deltar: float,
    Mach: float,
    gamma: float = AIR_GAMMA,
    nu_freestream: float | None = None,
) -> float:
    """Return ``Cp`` from an isentropic Prandtl-Meyer turn starting at freestream.

    The local angle is ``nu = nu_inf - deltar``; surfaces turned away from the
    flow (``deltar < 0``) expand. Past ``nu_max`` the flow reaches vacuum and
    the vacuum coefficient is returned.

    Args:
        deltar: Local inclination angle [rad], negative for expansion.
        Mach: Freestream Mach number (>=1).
        gamma: Ratio of specific heats; the inverse fit limits this to 1.4.
        nu_freestream: Precomputed ``nu(Mach)`` [rad] (computed when omitted).
    """
    method = "prandtl_meyer_freestream"
    d = require_inclination(deltar, method)
    M = require_mach(Mach, method)
    g = require_air(gamma, method)
    nu_inf = prandtl_meyer_function(M, g) if nu_freestream is None else float(nu_freestream)
    if not math.isfinite(nu_inf) or nu_inf < 0.0:
        raise DomainError(f"{method} requires freestream nu >= 0, got {nu_inf}")

    nu = nu_inf - d
    if nu >= MAXIMUM_PRANDTL_MEYER_FUNCTION_VALUE:
        return vacuum_pressure_coefficient(M, g)
    if nu < 0.0:
        raise DomainError(
            f"{method} compression of {math.degrees(d):.6g} deg exceeds freestream "
            f"nu={math.degrees(nu_inf):.6g} deg"
        )

    M_local = inverse_prandtl_meyer_function(nu, g)
    p_p1 = local_to_static_pressure_ratio(M_local, g) / local_to_static_pressure_ratio(M, g)
    return (2.0 / (g * M * M)) * (p_p1 - 1.0)


def prandtl_meyer_freestream_pressure_coefficients(
    deltar: np.ndarray,
    Mach: float,
    gamma: float = AIR_GAMMA,
) -> np.ndarray:
    """Vectorized Prandtl-Meyer freestream pressure coefficient evaluation.

    Args:
        deltar: Local inclination-angle array [rad] (negative for expansion).
        Mach: Freestream Mach number (>=1).
        gamma: Ratio of specific heats (1.4 only).
    """
    method = "prandtl_meyer_freestream"
    M = require_mach(Mach, method)
    g = require_air(gamma, method)
    d = np.asarray(deltar, dtype=float)
    if not np.all(np.isfinite(d)):
        raise DomainError(f"{method} requires finite inclination values.")
    if np.any(np.abs(d) > 0.5 * math.pi + 1e-12):
        raise DomainError(f"{method} requires inclination in [-90, 90] deg.")

    nu_inf = float(_prandtl_meyer_nu(np.array([M], dtype=float), g)[0])
    nu = nu_inf - d
    if np.any(nu < 0.0):
        raise DomainError(f"{method} compression exceeds freestream nu={math.degrees(nu_inf):.6g} deg")

    cp_vac = vacuum_pressure_coefficient(M, g)
    out = np.full_like(nu, cp_vac, dtype=float)
    finite = nu < MAXIMUM_PRANDTL_MEYER_FUNCTION_VALUE
    if np.any(finite):
        M_local = _inverse_prandtl_meyer_fit(nu[finite])
        bracket = (1.0 + 0.5 * (g - 1.0) * M_local * M_local) / (1.0 + 0.5 * (g - 1.0) * M * M)
        p_p1 = bracket ** (-g / (g - 1.0))
        out[finite] = (2.0 / (g * M * M)) * (p_p1 - 1.0)
    return out
