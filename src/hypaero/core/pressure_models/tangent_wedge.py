from __future__ import annotations

"""Tangent-wedge pressure from exact attached oblique-shock relations."""

import math

from ...common import require_finite, require_gamma, require_inclination, require_mach
from ..errors import DomainError
from ..oblique_shock import detachment_limit, shock_pressure_ratio, weak_shock_angle
from .isentropic import pressure_coefficient_from_ratio, stagnation_pressure_coefficient


def _detached_bridge(theta: float, theta_max: float, cp_detach: float, cap: float) -> float:
    """Blend from ``cp_detach`` at ``theta_max`` to ``cap`` at 90 deg along ``sin^2``."""
    s0_sq = math.sin(theta_max) ** 2
    w = (math.sin(theta) ** 2 - s0_sq) / (1.0 - s0_sq)
    return cp_detach + (cap - cp_detach) * min(w, 1.0)


def tangent_wedge_pressure_coefficient(
    Mach: float,
    gamma: float,
    deltar: float,
    *,
    cp_cap: float | None = None,
) -> float:
    """Return windward ``Cp`` from the tangent-wedge oblique-shock relation.

    Unlike :func:`empirical_tangent_wedge_pressure_coefficient` this solves
    the weak attached shock for any ``gamma``. Above the detachment angle a
    modified-Newtonian blend joins ``Cp(theta_max)`` to ``cp_cap`` at 90 deg.

    Args:
        Mach: Freestream Mach number (>1).
        gamma: Ratio of specific heats (>1).
        deltar: Local inclination angle [rad]; non-positive angles give 0.
        cp_cap: Optional modified-Newtonian cap (defaults to stagnation ``Cp``).
    """
    method = "tangent_wedge"
    M = require_mach(Mach, method, strict=True)
    g = require_gamma(gamma, method)
    theta = require_inclination(deltar, method)
    if theta <= 0.0:
        return 0.0

    if cp_cap is None:
        cap = stagnation_pressure_coefficient(M, g)
    else:
        cap = require_finite(cp_cap, "cp_cap", method)
        if cap < 0.0:
            raise DomainError(f"{method} requires cp_cap >= 0, got {cap}")

    theta_max, cp_detach = detachment_limit(M, g)
    cp_detach = min(cp_detach, cap)
    if theta > theta_max:
        return _detached_bridge(theta, theta_max, cp_detach, cap)

    beta = weak_shock_angle(theta, M, g)
    # M*sin(beta) can round just below 1 for a vanishing deflection.
    mn = max(M * math.sin(beta), 1.0)
    return min(pressure_coefficient_from_ratio(shock_pressure_ratio(mn, g), M, g), cap)
