"""HistFit - Gaussian histogram fitting studies.

Public API:
    - StudyService, GoodnessOfFitService, ScanService: study workflows
    - GenerateService, FitFileService: single-histogram workflows

Core:
    - Histogram, FitRecord, fit_histogram, toy_pvalue, nll_profile, chi2_profile

Configuration:
    - HistFitConfig and its sections
"""

import contextlib
from importlib import metadata

__version__ = "0.1.0"

with contextlib.suppress(metadata.PackageNotFoundError):
    __version__ = metadata.version(__name__)

from histfit.core import (
    FitRecord,
    Histogram,
    ScanResult,
    ToyPValueResult,
    chi2_profile,
    fit_histogram,
    nll_profile,
    toy_pvalue,
)
from histfit.core.domain.config import (
    FitConfig,
    GenerationConfig,
    HistFitConfig,
    OutputConfig,
    ScanConfig,
    StudyConfig,
    ToyConfig,
)
from histfit.services import (
    FitFileService,
    GenerateService,
    GoodnessOfFitService,
    ScanService,
    StudyService,
)

__all__ = [
    "__version__",
    # Services
    "FitFileService",
    "GenerateService",
    "GoodnessOfFitService",
    "ScanService",
    "StudyService",
    # Core
    "FitRecord",
    "Histogram",
    "ScanResult",
    "ToyPValueResult",
    "chi2_profile",
    "fit_histogram",
    "nll_profile",
    "toy_pvalue",
    # Configuration
    "FitConfig",
    "GenerationConfig",
    "HistFitConfig",
    "OutputConfig",
    "ScanConfig",
    "StudyConfig",
    "ToyConfig",
]
