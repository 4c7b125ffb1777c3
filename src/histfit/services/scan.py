"""Likelihood and chi-square scan service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from histfit.core.domain.config import HistFitConfig
from histfit.core.scan import ScanResult, chi2_profile, nll_profile
from histfit.core.shared.reporter import NullReporter, Reporter
from histfit.io.histograms import read_first_histogram
from histfit.io.results import write_summary_json
from histfit.plotting.distributions import (
    make_chi2_scan_figure,
    make_nll_scan_figure,
    save_figure,
)

logger = logging.getLogger(__name__)

DEFAULT_NLL_PDF = "results4_1k_nll.pdf"
DEFAULT_CHI2_PDF = "results4_1k_chi2.pdf"


@dataclass(frozen=True)
class ScanOutput:
    nll: ScanResult
    chi2: ScanResult
    nll_pdf: Path
    chi2_pdf: Path
    json_path: Path | None = None


def _format_interval(span: tuple[float, float] | None) -> str:
    if span is None:
        return "outside scan range"
    return f"[{span[0]:.4f}, {span[1]:.4f}]"


class ScanService:
    """Scans the NLL and chi-square of a stored histogram against the mean."""

    def __init__(self, reporter: Reporter | None = None) -> None:
        self._reporter = reporter or NullReporter()

    def run(
        self,
        infile: Path,
        output_dir: Path | None = None,
        config: HistFitConfig | None = None,
        nll_name: str = DEFAULT_NLL_PDF,
        chi2_name: str = DEFAULT_CHI2_PDF,
    ) -> ScanOutput:
        """Produce both scan figures for the first histogram of ``infile``.

        Args:
            infile: ROOT file holding the histogram
            output_dir: Where the figures go (default: the configured output directory)
            config: Scan and output settings
            nll_name: File name of the likelihood scan figure
            chi2_name: File name of the chi-square scan figure
        """
        config = config or HistFitConfig()
        scan = config.scan
        out_dir = output_dir if output_dir is not None else config.output.directory

        hist = read_first_histogram(infile)
        self._reporter.info(
            f"Loaded '{hist.name}' from {infile} ({hist.n_bins} bins, {hist.entries:g} entries)"
        )

        self._reporter.action("Scanning -2ΔlnL and χ² versus the mean...")
        nll = nll_profile(hist, n_points=scan.n_points, width=scan.nll_width)
        chi2 = chi2_profile(
            hist,
            center=scan.chi2_center,
            half_width=scan.chi2_half_width,
            n_points=scan.n_points,
        )

        self._reporter.info(f"Starting point: mean = {nll.mu0:.4f}, std dev = {nll.sigma0:.4f}")
        self._reporter.info(f"NLL minimum at mean = {nll.best_value:.4f}")
        self._reporter.info(f"-2ΔlnL ≤ 1 for mean in {_format_interval(nll.interval(1.0))}")
        self._reporter.info(f"-2ΔlnL ≤ 4 for mean in {_format_interval(nll.interval(4.0))}")
        self._reporter.info(
            f"χ² minimum {chi2.best_statistic:.3f} at mean = {chi2.best_value:.4f}"
        )

        nll_pdf = save_figure(make_nll_scan_figure(nll), out_dir / nll_name)
        chi2_pdf = save_figure(make_chi2_scan_figure(chi2, scan.chi2_center), out_dir / chi2_name)
        self._reporter.success(f"Scan figures written to {nll_pdf} and {chi2_pdf}")
        logger.info("NLL scan best %.6g, chi2 scan best %.6g", nll.best_value, chi2.best_value)

        json_path = None
        if config.output.save_json:
            summary = {
                "input": infile,
                "histogram": hist.name,
                "mu0": nll.mu0,
                "sigma0": nll.sigma0,
                "nll_best_mean": nll.best_value,
                "nll_minimum": nll.best_statistic,
                "nll_interval_1": nll.interval(1.0),
                "nll_interval_4": nll.interval(4.0),
                "chi2_best_mean": chi2.best_value,
                "chi2_minimum": chi2.best_statistic,
            }
            json_path = write_summary_json(summary, (out_dir / nll_name).with_name("scan.json"))

        return ScanOutput(nll=nll, chi2=chi2, nll_pdf=nll_pdf, chi2_pdf=chi2_pdf, json_path=json_path)


__all__ = ["DEFAULT_CHI2_PDF", "DEFAULT_NLL_PDF", "ScanOutput", "ScanService"]
