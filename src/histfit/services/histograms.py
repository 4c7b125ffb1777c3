"""Single-histogram services: generate a file, fit a file."""

from __future__ import annotations

import logging
from pathlib import Path

from histfit.core.domain.config import FitMethod, GenerationConfig
from histfit.core.domain.histogram import Histogram
from histfit.core.fitting.optimizer import fit_histogram
from histfit.core.fitting.results import FitRecord
from histfit.core.generation import generate_gaussian_histogram, make_rng
from histfit.core.shared.reporter import NullReporter, Reporter
from histfit.io.histograms import read_first_histogram, write_histogram

logger = logging.getLogger(__name__)


class GenerateService:
    """Writes Gaussian-distributed histograms to ROOT files."""

    def __init__(self, reporter: Reporter | None = None) -> None:
        self._reporter = reporter or NullReporter()

    def generate(
        self,
        path: Path,
        entries: int,
        seed: int | None = None,
        generation: GenerationConfig | None = None,
        name: str = "randomHist1",
    ) -> Histogram:
        """Generate a histogram of ``entries`` Gaussian draws and save it to ``path``."""
        gen = generation or GenerationConfig()
        self._reporter.action(
            f"Generating {entries} entries from N({gen.mean:g}, {gen.sigma:g}) "
            f"in {gen.n_bins} bins on [{gen.low:g}, {gen.high:g})..."
        )
        hist = generate_gaussian_histogram(entries, make_rng(seed), gen, name=name)
        write_histogram(path, hist)
        self._reporter.success(f"Histogram '{hist.name}' written to {path}")
        logger.info("Generated %r (seed=%s)", hist, seed)
        return hist


class FitFileService:
    """Fits the first histogram stored in a ROOT file."""

    def __init__(self, reporter: Reporter | None = None) -> None:
        self._reporter = reporter or NullReporter()

    def fit(self, path: Path, method: FitMethod = "chi2", integral: bool = False) -> FitRecord:
        """Read, fit and return the record.

        Raises
        ------
            DataIOError: If the file cannot be read
            HistogramNotFoundError: If the file holds no 1-D histogram
            FitError: If the histogram has no in-range entries
        """
        hist = read_first_histogram(path)
        self._reporter.info(
            f"Loaded '{hist.name}' from {path} ({hist.n_bins} bins, {hist.entries:g} entries)"
        )
        self._reporter.action(f"Fitting a Gaussian ({method})...")
        record = fit_histogram(hist, method=method, integral=integral)
        if record.success:
            self._reporter.success(f"Fit converged, χ²/ndf = {record.reduced_chi2:.3f}")
        else:
            self._reporter.warning(f"Fit did not converge: {record.message}")
        return record


__all__ = ["FitFileService", "GenerateService"]
