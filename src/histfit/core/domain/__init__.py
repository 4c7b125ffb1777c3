"""Domain objects: histograms and configuration models."""

from histfit.core.domain.config import (
    FitConfig,
    GenerationConfig,
    HistFitConfig,
    OutputConfig,
    ScanConfig,
    StudyConfig,
    ToyConfig,
)
from histfit.core.domain.histogram import Histogram

__all__ = [
    "FitConfig",
    "GenerationConfig",
    "HistFitConfig",
    "Histogram",
    "OutputConfig",
    "ScanConfig",
    "StudyConfig",
    "ToyConfig",
]
