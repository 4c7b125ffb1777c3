"""Toy Monte Carlo goodness-of-fit service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from histfit.core.domain.config import OutputConfig
from histfit.core.generation import make_rng
from histfit.core.gof import ToyPValueResult, toy_pvalue
from histfit.core.shared.reporter import NullReporter, Reporter
from histfit.core.studies import ProgressCallback
from histfit.io.histograms import read_first_histogram
from histfit.io.results import write_summary_json
from histfit.plotting.distributions import make_toy_nll_figure, save_figure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PValueOutput:
    """Toy p-value result and the files written for it."""

    result: ToyPValueResult
    pdf_path: Path
    json_path: Path | None


class GoodnessOfFitService:
    """Fits a stored histogram and estimates its p-value with Poisson toys."""

    def __init__(self, reporter: Reporter | None = None) -> None:
        self._reporter = reporter or NullReporter()

    def run(
        self,
        infile: Path,
        output_pdf: Path,
        n_toys: int,
        seed: int | None = None,
        *,
        integral: bool = False,
        output: OutputConfig | None = None,
        progress: ProgressCallback | None = None,
    ) -> PValueOutput:
        """Run the toy study on the first histogram of ``infile``.

        Raises
        ------
            DataIOError: If ``infile`` cannot be read
            HistogramNotFoundError: If ``infile`` holds no 1-D histogram
            FitError: If the histogram cannot be fitted
        """
        output = output or OutputConfig()

        hist = read_first_histogram(infile)
        self._reporter.info(
            f"Loaded '{hist.name}' from {infile} ({hist.n_bins} bins, {hist.entries:g} entries)"
        )

        self._reporter.action(f"Throwing {n_toys} toys from the likelihood fit...")
        result = toy_pvalue(hist, n_toys, make_rng(seed), integral=integral, callback=progress)

        fit = result.fit
        if not fit.success:
            self._reporter.warning(f"Likelihood fit did not converge: {fit.message}")
        self._reporter.info(f"Fitted mean = {fit.mean:.4f} ± {result.mean_error:.4f}")
        self._reporter.info(f"Data NLL = {result.nll_data:.4f}")
        self._reporter.info(
            f"p-value = {result.pvalue:.4f} (fraction of toys with NLL >= data)"
        )
        logger.info(
            "Toy p-value %.4f from %d/%d toys (asymptotic %.4f)",
            result.pvalue,
            result.n_greater_equal,
            result.n_toys,
            result.asymptotic_pvalue,
        )

        pdf_path = save_figure(make_toy_nll_figure(result), output.directory / output_pdf)
        self._reporter.success(f"NLL distribution written to {pdf_path}")

        json_path = None
        if output.save_json:
            summary = {
                "input": infile,
                "histogram": hist.name,
                "n_toys": n_toys,
                "seed": seed,
                "nll_data": result.nll_data,
                "n_greater_equal": result.n_greater_equal,
                "pvalue": result.pvalue,
                "asymptotic_pvalue": result.asymptotic_pvalue,
                "fit": fit.as_dict(),
            }
            json_path = write_summary_json(
                summary, (output.directory / output_pdf).with_suffix(".json")
            )

        return PValueOutput(result=result, pdf_path=pdf_path, json_path=json_path)


__all__ = ["GoodnessOfFitService", "PValueOutput"]
