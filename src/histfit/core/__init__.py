"""Core numerics for HistFit: histograms, models, fits, toys and scans."""

from histfit.core.domain.histogram import Histogram
from histfit.core.fitting import FitRecord, fit_histogram
from histfit.core.gof import ToyPValueResult, toy_pvalue
from histfit.core.scan import ScanResult, chi2_profile, nll_profile
from histfit.core.studies import MethodComparison, compare_fit_methods, run_fit_trials

__all__ = [
    "FitRecord",
    "Histogram",
    "MethodComparison",
    "ScanResult",
    "ToyPValueResult",
    "chi2_profile",
    "compare_fit_methods",
    "fit_histogram",
    "nll_profile",
    "run_fit_trials",
    "toy_pvalue",
]
