from __future__ import annotations

"""Van Dyke unified hypersonic-similarity pressure relation."""

import math
from enum import Enum

from ...common import require_gamma, require_inclination, require_mach
from .isentropic import vacuum_pressure_coefficient


class FlowTurning(Enum):
    """Direction the surface turns the local flow."""

    EXPANSION = "expansion"
    COMPRESSION = "compression"

    @classmethod
    def from_inclination(cls, deltar: float) -> "FlowTurning":
        """Return ``COMPRESSION`` for ``deltar >= 0``, else ``EXPANSION``."""
        return cls.COMPRESSION if float(deltar) >= 0.0 else cls.EXPANSION


def van_dyke_unified_pressure_coefficient(
    deltar: float,
    Mach: float,
    gamma: float,
    turning: FlowTurning,
) -> float:
    """Return van Dyke unified ``Cp`` for compression or expansion surfaces.

    With ``beta = sqrt(M^2 - 1)`` and similarity parameter
    ``K = beta*|deltar|``:

    - compression: ``Cp = deltar^2 * ((g+1)/2 + sqrt(((g+1)/2)^2 + 4/K^2))``
    - expansion: ``Cp = 2/(g*beta^2) * ((1 - (g-1)/2*K)^(2g/(g-1)) - 1)``

    The expansion branch reaches zero pressure at ``K = 2/(g-1)``; beyond that
    the vacuum coefficient is returned. ``turning`` selects the branch, and
    the inclination magnitude is used for both.
    """
    method = "van_dyke_unified"
    if not isinstance(turning, FlowTurning):
        raise TypeError(f"{method} requires a FlowTurning, got {turning!r}")
    d = abs(require_inclination(deltar, method))
    M = require_mach(Mach, method, strict=True)
    g = require_gamma(gamma, method)

    beta = math.sqrt(M * M - 1.0)
    if turning is FlowTurning.COMPRESSION:
        # d^2 * sqrt(4/K^2) == 2*d/beta, finite as d -> 0.
        half = 0.5 * (g + 1.0)
        return d * d * half + d * math.sqrt(d * d * half * half + 4.0 / (beta * beta))

    cp_vac = vacuum_pressure_coefficient(M, g)
    base = 1.0 - 0.5 * (g - 1.0) * beta * d
    if base <= 0.0:
        return cp_vac
    cp = (2.0 / (g * beta * beta)) * (base ** (2.0 * g / (g - 1.0)) - 1.0)
    return max(cp, cp_vac)
