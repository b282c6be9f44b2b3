from __future__ import annotations

"""Newtonian and modified-Newtonian pressure relations."""

import math

from ...common import require_finite, require_inclination
from ..errors import DomainError


def newtonian_pressure_coefficient(deltar: float) -> float:
    """Return Newtonian impact ``Cp = 2*sin(deltar)^2``."""
    d = require_inclination(deltar, "newtonian")
    s = math.sin(d)
    return 2.0 * s * s


def modified_newtonian_pressure_coefficient(deltar: float, cp_stag: float) -> float:
    """Return modified-Newtonian ``Cp = Cp_stag*sin(deltar)^2``.

    ``cp_stag`` is usually :func:`stagnation_pressure_coefficient` of the
    freestream; empirical methods pass an effective value instead.
    """
    d = require_inclination(deltar, "modified_newtonian")
    cp_max = require_finite(cp_stag, "cp_stag", "modified_newtonian")
    if cp_max < 0.0:
        raise DomainError(f"modified_newtonian requires cp_stag >= 0, got {cp_max}")
    s = math.sin(d)
    return cp_max * s * s
