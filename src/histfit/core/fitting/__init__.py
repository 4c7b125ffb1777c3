"""Histogram fitting: statistics, estimators and fit records."""

from histfit.core.fitting.optimizer import (
    fit_histogram,
    invert_curvature,
    model_and_jacobian,
    numerical_hessian,
)
from histfit.core.fitting.results import FitRecord, collect
from histfit.core.fitting.statistics import (
    chi2_probability,
    degrees_of_freedom,
    likelihood_chi2,
    neyman_chi2,
    pearson_chi2,
    poisson_nll,
    reduced_chi2,
)

__all__ = [
    "FitRecord",
    "chi2_probability",
    "collect",
    "degrees_of_freedom",
    "fit_histogram",
    "invert_curvature",
    "likelihood_chi2",
    "model_and_jacobian",
    "neyman_chi2",
    "numerical_hessian",
    "pearson_chi2",
    "poisson_nll",
    "reduced_chi2",
]
