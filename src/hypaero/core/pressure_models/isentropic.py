from __future__ import annotations

"""Isentropic and stagnation-point pressure relations."""

import math

from ...common import checked_result, require_finite, require_gamma, require_mach
from ..errors import DomainError


def local_to_static_pressure_ratio(Mach: float, gamma: float) -> float:
    """Return isentropic ``p/p0 = (1 + (gamma-1)/2*M^2)^(-gamma/(gamma-1))``.

    Valid for ``Mach >= 0``; equals 1 at rest and decreases monotonically.
    """
    M = require_mach(Mach, "local_to_static_pressure_ratio", minimum=0.0)
    g = require_gamma(gamma, "local_to_static_pressure_ratio")
    return (1.0 + 0.5 * (g - 1.0) * M * M) ** (-g / (g - 1.0))


def stagnation_pressure_coefficient(Mach: float, gamma: float) -> float:
    """Return stagnation-point ``Cp`` behind a normal shock (Rayleigh-Pitot).

    ``Cp_stag = 2/(gamma*M^2) * (p02/p1 - 1)`` where the pitot ratio is the
    normal-shock jump followed by isentropic recovery:
    ``p02/p1 = [(g+1)^2 M^2 / (4 g M^2 - 2(g-1))]^(g/(g-1)) * (1 - g + 2 g M^2)/(g+1)``.
    At ``Mach == 1`` this reduces to the isentropic stagnation value.
    """
    M = require_mach(Mach, "stagnation_pressure_coefficient")
    g = require_gamma(gamma, "stagnation_pressure_coefficient")

    m_sq = M * M
    rayleigh = ((g + 1.0) ** 2 * m_sq) / (4.0 * g * m_sq - 2.0 * (g - 1.0))
    p02_p1 = rayleigh ** (g / (g - 1.0)) * (1.0 - g + 2.0 * g * m_sq) / (g + 1.0)
    cp_stag = (2.0 / (g * m_sq)) * (p02_p1 - 1.0)
    return checked_result(cp_stag, "stagnation_pressure_coefficient")


def vacuum_pressure_coefficient(Mach: float, gamma: float) -> float:
    """Return ``Cp`` for zero local static pressure, ``-2/(gamma*M^2)``.

    This is the lower bound of every surface pressure coefficient at the
    same freestream state.
    """
    M = require_mach(Mach, "vacuum_pressure_coefficient")
    g = require_gamma(gamma, "vacuum_pressure_coefficient")
    return -2.0 / (g * M * M)


def pressure_coefficient_from_ratio(p_p1: float, Mach: float, gamma: float) -> float:
    """Convert local-to-freestream pressure ratio into ``Cp``."""
    ratio = require_finite(p_p1, "pressure ratio", "pressure_coefficient_from_ratio")
    if ratio < 0.0:
        raise DomainError(f"pressure ratio must be >= 0, got {ratio}")
    M = require_mach(Mach, "pressure_coefficient_from_ratio")
    g = require_gamma(gamma, "pressure_coefficient_from_ratio")
    return (2.0 / (g * M * M)) * (ratio - 1.0)


def mach_angle(Mach: float) -> float:
    """Return Mach angle ``mu = asin(1/M)`` [rad] for ``Mach >= 1``."""
    M = require_mach(Mach, "mach_angle")
    return math.asin(1.0 / M)
