from __future__ import annotations

"""Empirical local-inclination pressure correlations.

Correlations follow the Mark IV Supersonic-Hypersonic Arbitrary Body Program
(Gentry, Smyth and Oliver, 1973). Angles are in radians unless a name ends in
``_deg``; the fits themselves are written in degrees where the source is.
"""

import math

from ...common import AIR_GAMMA, checked_result, require_air, require_inclination, require_mach
from ..errors import DomainError
from .newtonian import modified_newtonian_pressure_coefficient, newtonian_pressure_coefficient

DAHLEM_BUCK_NEWTONIAN_ANGLE = math.radians(22.5)
DAHLEM_BUCK_MAX_CORRECTED_MACH = 20.0
HANKEY_TRANSITION_ANGLE = math.radians(10.0)
SMYTH_MIN_INCLINATION = math.radians(1.0)


def empirical_tangent_wedge_pressure_coefficient(
    deltar: float,
    Mach: float,
    gamma: float = AIR_GAMMA,
) -> float:
    """Return tangent-wedge ``Cp`` from the gamma=1.4 curve fit.

    ``Cp = ((1.2*Ms + exp(-0.6*Ms))^2 - 1) / (0.6*M^2)`` with ``Ms = M*sin(deltar)``.
    Tends to ``(gamma+1)*sin^2`` in the hypersonic limit and to ``2*deltar/M``
    for weak deflections.
    """
    method = "empirical_tangent_wedge"
    d = require_inclination(deltar, method)
    M = require_mach(Mach, method)
    require_air(gamma, method)

    ms = M * math.sin(d)
    t = 1.2 * ms + math.exp(-0.6 * ms)
    return (t * t - 1.0) / (0.6 * M * M)


def empirical_tangent_cone_pressure_coefficient(
    deltar: float,
    Mach: float,
    gamma: float = AIR_GAMMA,
) -> float:
    """Return tangent-cone ``Cp`` from the gamma=1.4 curve fit of conical-shock theory."""
    method = "empirical_tangent_cone"
    d = require_inclination(deltar, method)
    M = require_mach(Mach, method)
    require_air(gamma, method)

    s = math.sin(d)
    ms = M * s
    t = 1.090909 * ms + math.exp(-0.5454545 * ms)
    t2 = t * t
    return (48.0 * t2 * s * s) / (23.0 * t2 - 5.0)


def modified_dahlem_buck_pressure_coefficient(
    deltar: float,
    Mach: float,
    gamma: float = AIR_GAMMA,
) -> float:
    """Return modified Dahlem-Buck ``Cp`` for hypersonic compression surfaces.

    Below 22.5 deg the Dahlem-Buck fit
    ``Cp = (1/sin(4*deltar)^0.75 + 1) * sin(deltar)^1.25`` is used, Newtonian
    above it. For ``Mach <= 20`` the result is scaled by
    ``1 + a*delta_deg^n`` with Mach-dependent ``a`` and ``n``.
    """
    method = "modified_dahlem_buck"
    d = require_inclination(deltar, method, minimum=0.0)
    M = require_mach(Mach, method)
    require_air(gamma, method)
    if d <= 0.0:
        raise DomainError(f"{method} requires inclination > 0, got {d}")

    if d > DAHLEM_BUCK_NEWTONIAN_ANGLE:
        cp = newtonian_pressure_coefficient(d)
    else:
        cp = (1.0 / math.sin(4.0 * d) ** 0.75 + 1.0) * math.sin(d) ** 1.25

    if M <= DAHLEM_BUCK_MAX_CORRECTED_MACH:
        log_m = math.log(M)
        a = (6.0 - 0.3 * M) + math.sin((log_m - 0.588) / 1.2 * math.pi)
        n = -1.15 - 0.5 * math.sin((log_m - 0.916) / 3.29 * math.pi)
        cp *= 1.0 + a * math.degrees(d) ** n

    return checked_result(cp, method)


def hankey_flat_surface_pressure_coefficient(
    deltar: float,
    Mach: float,
    gamma: float = AIR_GAMMA,
) -> float:
    """Return Hankey flat-surface ``Cp``.

    Modified Newtonian with an effective stagnation coefficient: linear in
    ``delta_deg`` below 10 deg, ``1.95 + 0.3925/(M^0.3*tan(deltar))`` above.
    The two branches meet at 10 deg.
    """
    method = "hankey_flat_surface"
    d = require_inclination(deltar, method, minimum=0.0)
    M = require_mach(Mach, method)
    require_air(gamma, method)

    m_term = M ** 0.3
    if d < HANKEY_TRANSITION_ANGLE:
        cp_stag = (0.195 + 0.222594 / m_term - 0.4) * math.degrees(d) + 4.0
    else:
        cp_stag = 1.95 + 0.3925 / (m_term * math.tan(d))
    return modified_newtonian_pressure_coefficient(d, cp_stag)


def smyth_delta_wing_pressure_coefficient(
    deltar: float,
    Mach: float,
    gamma: float = AIR_GAMMA,
) -> float:
    """Return Smyth delta-wing ``Cp``.

    ``Cp = 1.66667*((1.09*Ms + exp(-0.49*Ms))^2 - 1)/M^2``; inclinations
    below 1 deg are raised to 1 deg where the fit stops being valid.
    """
    method = "smyth_delta_wing"
    d = require_inclination(deltar, method)
    M = require_mach(Mach, method)
    require_air(gamma, method)

    d = max(d, SMYTH_MIN_INCLINATION)
    ms = M * math.sin(d)
    t = 1.09 * ms + math.exp(-0.49 * ms)
    return 1.66667 * (t * t - 1.0) / (M * M)


def high_mach_base_pressure_coefficient(Mach: float, gamma: float = AIR_GAMMA) -> float:
    """Return high-Mach base pressure approximation ``Cp = -1/M^2`` (air only)."""
    M = require_mach(Mach, "high_mach_base_pressure")
    require_air(gamma, "high_mach_base_pressure")
    return -1.0 / (M * M)


def acm_empirical_pressure_coefficient(deltar: float, Mach: float, gamma: float = AIR_GAMMA) -> float:
    """Return ACM empirical ``Cp = delta_deg/(16*M^2)``, floored at ``-1/M^2``."""
    method = "acm_empirical"
    d = require_inclination(deltar, method)
    M = require_mach(Mach, method)
    require_air(gamma, method)

    cp_min = -1.0 / (M * M)
    cp = math.degrees(d) / (16.0 * M * M)
    return max(cp, cp_min)
