"""Fit models."""

from histfit.core.models.gaussian import (
    PARAMETER_NAMES,
    GaussianParams,
    bin_expectations,
    bin_integrals,
    gaussian,
    gaussian_integral,
    initial_guess,
)

__all__ = [
    "PARAMETER_NAMES",
    "GaussianParams",
    "bin_expectations",
    "bin_integrals",
    "gaussian",
    "gaussian_integral",
    "initial_guess",
]
