"""Repeated generate-and-fit studies.

Each trial draws a fresh histogram from the generation settings and fits it;
the resulting records are kept by value so their distributions (reduced
chi-square, fitted mean, p-value, error on the mean) can be histogrammed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from histfit.core.fitting.optimizer import fit_histogram
from histfit.core.generation import generate_gaussian_histogram
from histfit.core.shared.exceptions import FitError

if TYPE_CHECKING:
    import numpy as np

    from histfit.core.domain.config import FitMethod, GenerationConfig
    from histfit.core.domain.histogram import Histogram
    from histfit.core.fitting.results import FitRecord

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]


@dataclass(slots=True)
class MethodComparison:
    """Fit records of the same study done with both estimators."""

    chi2: list[FitRecord] = field(default_factory=list)
    likelihood: list[FitRecord] = field(default_factory=list)
    skipped: int = 0


def fit_once(
    entries: int,
    rng: np.random.Generator,
    method: FitMethod = "chi2",
    generation: GenerationConfig | None = None,
    integral: bool = False,
) -> tuple[FitRecord, Histogram]:
    """Generate one histogram and fit it.

    Raises
    ------
        FitError: If the generated histogram has no in-range entries
    """
    hist = generate_gaussian_histogram(entries, rng, generation)
    return fit_histogram(hist, method=method, integral=integral), hist


def run_fit_trials(
    n_trials: int,
    entries: int,
    rng: np.random.Generator,
    method: FitMethod = "chi2",
    generation: GenerationConfig | None = None,
    integral: bool = False,
    callback: ProgressCallback | None = None,
) -> list[FitRecord]:
    """Fit ``n_trials`` independently generated histograms.

    Trials whose histogram cannot be fitted at all (no in-range entries)
    are skipped and logged.
    """
    records: list[FitRecord] = []
    skipped = 0
    for trial in range(n_trials):
        try:
            record, _ = fit_once(entries, rng, method, generation, integral)
        except FitError as e:
            skipped += 1
            logger.debug("Trial %d skipped: %s", trial, e)
        else:
            records.append(record)
        if callback is not None:
            callback(trial + 1)

    if skipped:
        logger.warning("%d of %d trials could not be fitted", skipped, n_trials)
    return records


def compare_fit_methods(
    n_trials: int,
    entries: int,
    rng: np.random.Generator,
    generation: GenerationConfig | None = None,
    integral: bool = False,
    callback: ProgressCallback | None = None,
) -> MethodComparison:
    """Per trial, fit one fresh histogram by chi-square and another by likelihood."""
    comparison = MethodComparison()
    for trial in range(n_trials):
        for method, bucket in (("chi2", comparison.chi2), ("likelihood", comparison.likelihood)):
            try:
                record, _ = fit_once(entries, rng, method, generation, integral)
            except FitError as e:
                comparison.skipped += 1
                logger.debug("Trial %d (%s) skipped: %s", trial, method, e)
            else:
                bucket.append(record)
        if callback is not None:
            callback(trial + 1)

    if comparison.skipped:
        logger.warning("%d fits skipped during method comparison", comparison.skipped)
    return comparison


__all__ = ["MethodComparison", "ProgressCallback", "compare_fit_methods", "fit_once", "run_fit_trials"]
