"""Exception types raised by pressure-model and shock relations."""

from __future__ import annotations


class PressureModelError(ValueError):
    """Base class for invalid inputs to a flow relation."""


class DomainError(PressureModelError):
    """Raised when an input lies outside the relation's valid regime."""


class UnsupportedParameterError(PressureModelError):
    """Raised when an empirical fit is used outside its calibration gas."""


class NumericEdgeCaseError(PressureModelError):
    """Raised when a relation hits a degenerate denominator or non-finite result."""
