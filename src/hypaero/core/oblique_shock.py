from __future__ import annotations

"""Rankine-Hugoniot and theta-beta-M oblique-shock relations.

Ratios are post- to pre-shock values for a calorically perfect gas, written
in terms of the Mach number normal to the shock ``Mn``. Every ratio is
exactly 1 (and the entropy jump exactly 0) at ``Mn = 1``.
"""

import math
from functools import lru_cache

from ..common import checked_result, require_finite, require_gamma, require_mach
from .errors import DomainError


def _require_gas_constant(R, method: str) -> float:
    r = require_finite(R, "specific gas constant", method)
    if r <= 0.0:
        raise DomainError(f"{method} requires specific gas constant > 0, got {r}")
    return r


def _pressure_ratio(mn_sq: float, g: float) -> float:
    return 1.0 + (2.0 * g / (g + 1.0)) * (mn_sq - 1.0)


def _density_ratio(mn_sq: float, g: float) -> float:
    # (g+1)*Mn^2 / ((g-1)*Mn^2 + 2), rearranged so Mn=1 gives exactly 1.
    return 1.0 + 2.0 * (mn_sq - 1.0) / ((g - 1.0) * mn_sq + 2.0)


def shock_pressure_ratio(Mn: float, gamma: float) -> float:
    """Return ``p2/p1 = 1 + 2*gamma/(gamma+1)*(Mn^2 - 1)``."""
    M = require_mach(Mn, "shock_pressure_ratio")
    g = require_gamma(gamma, "shock_pressure_ratio")
    return _pressure_ratio(M * M, g)


def shock_density_ratio(Mn: float, gamma: float) -> float:
    """Return ``rho2/rho1 = (gamma+1)*Mn^2 / ((gamma-1)*Mn^2 + 2)``."""
    M = require_mach(Mn, "shock_density_ratio")
    g = require_gamma(gamma, "shock_density_ratio")
    return _density_ratio(M * M, g)


def shock_temperature_ratio(Mn: float, gamma: float) -> float:
    """Return ``T2/T1 = (p2/p1) / (rho2/rho1)``."""
    M = require_mach(Mn, "shock_temperature_ratio")
    g = require_gamma(gamma, "shock_temperature_ratio")
    mn_sq = M * M
    return _pressure_ratio(mn_sq, g) / _density_ratio(mn_sq, g)


def shock_entropy_jump(Mn: float, gamma: float, R: float) -> float:
    """Return specific entropy rise ``s2 - s1`` [J/(kg K)] across the shock.

    ``ds = cp*ln(T2/T1) - R*ln(p2/p1)`` with ``cp = gamma*R/(gamma-1)``.
    """
    method = "shock_entropy_jump"
    M = require_mach(Mn, method)
    g = require_gamma(gamma, method)
    r = _require_gas_constant(R, method)

    mn_sq = M * M
    p2_p1 = _pressure_ratio(mn_sq, g)
    T2_T1 = p2_p1 / _density_ratio(mn_sq, g)
    cp = g / (g - 1.0) * r
    return cp * math.log(T2_T1) - r * math.log(p2_p1)


def shock_total_pressure_ratio(Mn: float, gamma: float, R: float) -> float:
    """Return ``p02/p01 = exp(-ds/R)`` from the entropy jump."""
    r = _require_gas_constant(R, "shock_total_pressure_ratio")
    return math.exp(-shock_entropy_jump(Mn, gamma, r) / r)


def _deflection(m2: float, g: float, beta: float) -> float:
    """theta-beta-M relation without input checks; 0 on or below the Mach wave."""
    sin_b = math.sin(beta)
    normal_sq = m2 * sin_b * sin_b
    if normal_sq <= 1.0:
        return 0.0
    # M^2*(gamma + cos(2*beta)) + 2 >= M^2*(gamma - 1) + 2 > 0 for gamma > 1.
    denom = m2 * (g + math.cos(2.0 * beta)) + 2.0
    return math.atan(2.0 * (math.cos(beta) / sin_b) * (normal_sq - 1.0) / denom)


def shock_deflection_angle(beta: float, Mach: float, gamma: float) -> float:
    """Return flow deflection ``theta`` [rad] behind an oblique shock of angle ``beta``.

    ``tan(theta) = 2*cot(beta)*(M^2*sin^2(beta) - 1) / (M^2*(gamma + cos(2*beta)) + 2)``.
    ``beta`` must lie between the Mach angle (zero deflection) and 90 deg
    (normal shock, zero deflection).
    """
    method = "shock_deflection_angle"
    b = require_finite(beta, "shock angle", method)
    M = require_mach(Mach, method)
    g = require_gamma(gamma, method)
    if b <= 0.0 or b > 0.5 * math.pi + 1e-12:
        raise DomainError(f"{method} requires shock angle in (0, 90] deg, got {math.degrees(b):.6g} deg")
    if M * math.sin(b) < 1.0 - 1e-12:
        raise DomainError(
            f"{method} shock angle {math.degrees(b):.6g} deg is below the Mach angle "
            f"{math.degrees(math.asin(1.0 / M)):.6g} deg"
        )
    return _deflection(M * M, g, min(b, 0.5 * math.pi))


@lru_cache(maxsize=256)
def _detachment_limit(M: float, g: float) -> tuple[float, float, float]:
    """Return ``(beta_max, theta_max, cp_crit)`` for the maximum-deflection shock."""
    m2 = M * M
    root = math.sqrt((g + 1.0) * (1.0 + 0.5 * (g - 1.0) * m2 + (g + 1.0) * m2 * m2 / 16.0))
    sin_sq = min((0.25 * (g + 1.0) * m2 - 1.0 + root) / (g * m2), 1.0)
    beta_max = checked_result(math.asin(math.sqrt(sin_sq)), "detachment_limit")
    theta_max = checked_result(_deflection(m2, g, beta_max), "detachment_limit")
    cp_crit = (2.0 / (g * m2)) * (_pressure_ratio(m2 * sin_sq, g) - 1.0)
    return beta_max, theta_max, checked_result(max(cp_crit, 0.0), "detachment_limit")


def detachment_limit(Mach: float, gamma: float) -> tuple[float, float]:
    """Return ``(theta_max, cp_crit)`` at which the attached wedge shock detaches.

    The shock angle of maximum deflection is closed form,
    ``sin^2(beta) = [(gamma+1)*M^2/4 - 1 + sqrt((gamma+1)*(1 + (gamma-1)*M^2/2
    + (gamma+1)*M^4/16))] / (gamma*M^2)``; ``theta_max`` [rad] follows from
    :func:`shock_deflection_angle` and ``cp_crit`` is the wedge surface ``Cp``
    behind that shock.
    """
    M = require_mach(Mach, "detachment_limit", strict=True)
    g = require_gamma(gamma, "detachment_limit")
    _, theta_max, cp_crit = _detachment_limit(M, g)
    return theta_max, cp_crit


def weak_shock_angle(deltar: float, Mach: float, gamma: float) -> float | None:
    """Return weak attached shock angle ``beta`` [rad] for wedge angle ``deltar``.

    ``theta(beta)`` rises monotonically from 0 at the Mach angle to
    ``theta_max`` at the detachment shock angle, so the weak root is bisected
    inside that bracket. Returns the Mach angle for ``deltar <= 0`` and
    ``None`` once the shock has detached.
    """
    M = require_mach(Mach, "weak_shock_angle", strict=True)
    g = require_gamma(gamma, "weak_shock_angle")
    t = require_finite(deltar, "inclination", "weak_shock_angle")
    lo = math.asin(1.0 / M)
    if t <= 0.0:
        return lo

    hi, theta_max, _ = _detachment_limit(M, g)
    if t > theta_max:
        return None

    m2 = M * M
    for _ in range(200):
        mid = 0.5 * (lo + hi)
        if _deflection(m2, g, mid) < t:
            lo = mid
        else:
            hi = mid
        if hi - lo <= 1e-15:
            break
    return 0.5 * (lo + hi)
