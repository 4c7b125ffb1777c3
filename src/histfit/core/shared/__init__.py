"""Shared foundational utilities for HistFit."""

from histfit.core.shared import constants, reporter, typing
from histfit.core.shared.exceptions import (
    ConfigError,
    ConvergenceWarning,
    DataIOError,
    FitError,
    HistFitError,
    HistogramError,
    HistogramNotFoundError,
)
from histfit.core.shared.reporter import LoggingReporter, NullReporter, Reporter

__all__ = [
    "ConfigError",
    "ConvergenceWarning",
    "DataIOError",
    "FitError",
    "HistFitError",
    "HistogramError",
    "HistogramNotFoundError",
    "LoggingReporter",
    "NullReporter",
    "Reporter",
    "constants",
    "reporter",
    "typing",
]
