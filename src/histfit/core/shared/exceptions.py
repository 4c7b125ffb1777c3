"""Exception taxonomy for HistFit.

A small hierarchy so callers can tell configuration problems, unreadable
inputs and failed fits apart instead of catching bare ``Exception``.
"""

from __future__ import annotations


class HistFitError(Exception):
    """Base class for all HistFit-specific exceptions."""


class ConfigError(HistFitError):
    """Configuration-related errors (invalid/missing options, schema issues)."""


class DataIOError(HistFitError):
    """Histogram file loading/saving errors (missing files, unreadable containers)."""


class HistogramNotFoundError(DataIOError):
    """A readable file that does not contain any 1-D histogram."""


class HistogramError(HistFitError):
    """Inconsistent histogram definition (edges, counts, ranges)."""


class FitError(HistFitError):
    """A fit that cannot be attempted or that failed irrecoverably."""


class ConvergenceWarning(UserWarning):
    """Warning for fits that stopped before convergence."""


__all__ = [
    "ConfigError",
    "ConvergenceWarning",
    "DataIOError",
    "FitError",
    "HistFitError",
    "HistogramError",
    "HistogramNotFoundError",
]
