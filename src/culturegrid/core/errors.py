"""
Exception types raised by the culture-grid core.

Zero overlap, full overlap and agents without neighbours are ordinary
outcomes of the interaction rule, not errors.
"""

from __future__ import annotations


class CultureGridError(Exception):
    """Base class for all culture-grid errors."""


class InvalidParameter(CultureGridError, ValueError):
    """Raised at setup time when a simulation parameter is out of range."""


class EmptyGridError(CultureGridError, RuntimeError):
    """Raised when ticking or analysing an engine that has no population."""
