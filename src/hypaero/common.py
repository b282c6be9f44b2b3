"""Shared input checks used across pressure-model modules."""

from __future__ import annotations

import math

from .core.errors import DomainError, NumericEdgeCaseError, UnsupportedParameterError

AIR_GAMMA = 1.4

_ANGLE_TOL = 1e-12
_GAMMA_TOL = 1e-9


def require_finite(value, name: str, method: str) -> float:
    """Return ``value`` as float, rejecting NaN and infinities."""
    x = float(value)
    if not math.isfinite(x):
        raise DomainError(f"{method} requires finite {name}, got {x}")
    return x


def require_gamma(gamma, method: str) -> float:
    """Return ``gamma`` as float after checking ``gamma > 1``."""
    g = require_finite(gamma, "gamma", method)
    if g <= 1.0:
        raise DomainError(f"{method} requires gamma > 1, got {g}")
    return g


def require_air(gamma, method: str) -> float:
    """Return ``gamma`` when it matches the air calibration of an empirical fit."""
    g = require_gamma(gamma, method)
    if abs(g - AIR_GAMMA) > _GAMMA_TOL:
        raise UnsupportedParameterError(
            f"{method} is an empirical fit for gamma={AIR_GAMMA}, got gamma={g}"
        )
    return g


def require_mach(Mach, method: str, minimum: float = 1.0, strict: bool = False) -> float:
    """Return ``Mach`` as float after checking the lower bound.

    ``strict=True`` rejects ``Mach == minimum``.
    """
    M = require_finite(Mach, "Mach", method)
    if strict and M <= minimum:
        raise DomainError(f"{method} requires Mach > {minimum:g}, got {M}")
    if M < minimum:
        raise DomainError(f"{method} requires Mach >= {minimum:g}, got {M}")
    return M


def require_inclination(deltar, method: str, minimum: float = -0.5 * math.pi) -> float:
    """Return inclination ``deltar`` [rad] bounded to ``[minimum, pi/2]``."""
    d = require_finite(deltar, "inclination", method)
    if d < minimum - _ANGLE_TOL or d > 0.5 * math.pi + _ANGLE_TOL:
        raise DomainError(
            f"{method} requires inclination in [{math.degrees(minimum):g}, 90] deg, "
            f"got {math.degrees(d):.6g} deg"
        )
    return d


def checked_result(value: float, method: str) -> float:
    """Return ``value`` as float, raising when it is not finite."""
    x = float(value)
    if not math.isfinite(x):
        raise NumericEdgeCaseError(f"{method} produced a non-finite result: {x}")
    return x
