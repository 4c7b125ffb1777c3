"""Application services orchestrating HistFit workflows.

The CLI and other front ends use these facades without touching the core
numerics, plotting or I/O directly.
"""

from histfit.services.gof import GoodnessOfFitService, PValueOutput
from histfit.services.histograms import FitFileService, GenerateService
from histfit.services.scan import ScanOutput, ScanService
from histfit.services.study import ComparisonOutput, StudyService, TrialStudyOutput

__all__ = [
    "ComparisonOutput",
    "FitFileService",
    "GenerateService",
    "GoodnessOfFitService",
    "PValueOutput",
    "ScanOutput",
    "ScanService",
    "StudyService",
    "TrialStudyOutput",
]
