"""Fit-study service: repeated generate-and-fit runs and method comparison."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import numpy as np

from histfit.core.domain.config import HistFitConfig
from histfit.core.fitting.results import FitRecord, collect
from histfit.core.generation import make_rng
from histfit.core.shared.reporter import NullReporter, Reporter
from histfit.core.studies import ProgressCallback, compare_fit_methods, run_fit_trials
from histfit.io.results import write_records_csv, write_summary_json
from histfit.plotting.distributions import (
    make_fit_summary_figure,
    make_mean_comparison_figure,
    save_figure,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrialStudyOutput:
    """Result of a repeated-fit study.

    Attributes
    ----------
        records: One record per fitted trial
        pdf_path: Summary figure, None if nothing was fitted
        csv_path: Per-fit CSV, None if disabled
        json_path: JSON summary, None if disabled
        summary: Aggregate statistics of the study
    """

    records: list[FitRecord] = field(repr=False)
    pdf_path: Path | None
    csv_path: Path | None
    json_path: Path | None
    summary: dict[str, Any]


@dataclass(frozen=True)
class ComparisonOutput:
    """Result of a chi-square versus likelihood comparison."""

    chi2: list[FitRecord] = field(repr=False)
    likelihood: list[FitRecord] = field(repr=False)
    pdf_path: Path | None
    csv_path: Path | None
    json_path: Path | None
    summary: dict[str, Any]


def _finite_stats(values: np.ndarray) -> tuple[float, float]:
    values = values[np.isfinite(values)]
    if values.size == 0:
        return float("nan"), float("nan")
    return float(values.mean()), float(values.std())


def summarize_records(records: list[FitRecord]) -> dict[str, Any]:
    """Aggregate statistics of a list of fit records."""
    summary: dict[str, Any] = {"n_fits": len(records)}
    if not records:
        return summary

    mean_avg, mean_spread = _finite_stats(collect(records, "mean"))
    err_avg, _ = _finite_stats(collect(records, "mean_error"))
    rchi2_avg, _ = _finite_stats(collect(records, "reduced_chi2"))
    prob_avg, _ = _finite_stats(collect(records, "prob"))
    summary.update(
        {
            "n_converged": sum(r.success for r in records),
            "mean_average": mean_avg,
            "mean_spread": mean_spread,
            "mean_error_average": err_avg,
            "reduced_chi2_average": rchi2_avg,
            "prob_average": prob_avg,
        }
    )
    return summary


class StudyService:
    """Runs fit studies and writes their figures and tables.

    Example:
        service = StudyService()
        out = service.run_trials(HistFitConfig(), Path("result1.pdf"))
        print(out.summary["mean_spread"])
    """

    def __init__(self, reporter: Reporter | None = None) -> None:
        self._reporter = reporter or NullReporter()

    def run_trials(
        self,
        config: HistFitConfig,
        output_pdf: Path,
        progress: ProgressCallback | None = None,
    ) -> TrialStudyOutput:
        """Fit ``config.study.trials`` generated histograms and plot the summary.

        Args:
            config: Generation, fitting, study and output settings
            output_pdf: Summary figure path, relative to the output directory
            progress: Called with the number of completed trials
        """
        study = config.study
        method = config.fitting.method
        rng = make_rng(study.seed)

        self._reporter.action(
            f"Fitting {study.trials} histograms of {study.entries} entries ({method})..."
        )
        records = run_fit_trials(
            study.trials,
            study.entries,
            rng,
            method=method,
            generation=config.generation,
            integral=config.fitting.integral,
            callback=progress,
        )

        skipped = study.trials - len(records)
        if skipped:
            self._reporter.warning(f"{skipped} trials had no in-range entries and were skipped")
        n_failed = sum(not r.success for r in records)
        if n_failed:
            self._reporter.warning(f"{n_failed} fits did not converge")

        summary = {
            "method": method,
            "trials": study.trials,
            "entries": study.entries,
            "seed": study.seed,
            **summarize_records(records),
        }
        logger.info("Trial study finished: %s", summary)

        out_dir = config.output.directory
        pdf_path: Path | None = None
        fig = make_fit_summary_figure(records)
        if fig is None:
            self._reporter.warning("No fit succeeded; summary figure not written")
        else:
            pdf_path = save_figure(fig, out_dir / output_pdf)
            self._reporter.success(f"Summary figure written to {pdf_path}")

        csv_path = json_path = None
        if config.output.save_csv:
            csv_path = write_records_csv(records, (out_dir / output_pdf).with_suffix(".csv"))
        if config.output.save_json:
            json_path = write_summary_json(summary, (out_dir / output_pdf).with_suffix(".json"))

        return TrialStudyOutput(
            records=records,
            pdf_path=pdf_path,
            csv_path=csv_path,
            json_path=json_path,
            summary=summary,
        )

    def compare_methods(
        self,
        config: HistFitConfig,
        output_pdf: Path,
        progress: ProgressCallback | None = None,
    ) -> ComparisonOutput:
        """Fit low-statistics histograms with both estimators and compare the means."""
        study = config.study
        rng = make_rng(study.seed)

        self._reporter.action(
            f"Comparing chi2 and likelihood fits on {study.compare_trials} histograms "
            f"of {study.compare_entries} entries..."
        )
        comparison = compare_fit_methods(
            study.compare_trials,
            study.compare_entries,
            rng,
            generation=config.generation,
            integral=config.fitting.integral,
            callback=progress,
        )
        if comparison.skipped:
            self._reporter.warning(f"{comparison.skipped} fits skipped (empty histograms)")

        chi2_summary = summarize_records(comparison.chi2)
        nll_summary = summarize_records(comparison.likelihood)
        summary = {
            "trials": study.compare_trials,
            "entries": study.compare_entries,
            "seed": study.seed,
            "skipped": comparison.skipped,
            "chi2": chi2_summary,
            "likelihood": nll_summary,
        }
        for label, part in (("chi2", chi2_summary), ("likelihood", nll_summary)):
            if part["n_fits"]:
                self._reporter.info(
                    f"{label}: mean of fitted means = {part['mean_average']:.3f} "
                    f"(spread {part['mean_spread']:.3f})"
                )

        gen = config.generation
        out_dir = config.output.directory
        pdf_path: Path | None = None
        fig = make_mean_comparison_figure(
            comparison.chi2,
            comparison.likelihood,
            n_bins=gen.n_bins,
            low=gen.low,
            high=gen.high,
        )
        if fig is None:
            self._reporter.warning("No fit succeeded; comparison figure not written")
        else:
            pdf_path = save_figure(fig, out_dir / output_pdf)
            self._reporter.success(f"Comparison figure written to {pdf_path}")

        csv_path = json_path = None
        if config.output.save_csv:
            csv_path = write_records_csv(
                [*comparison.chi2, *comparison.likelihood],
                (out_dir / output_pdf).with_suffix(".csv"),
            )
        if config.output.save_json:
            json_path = write_summary_json(summary, (out_dir / output_pdf).with_suffix(".json"))

        return ComparisonOutput(
            chi2=comparison.chi2,
            likelihood=comparison.likelihood,
            pdf_path=pdf_path,
            csv_path=csv_path,
            json_path=json_path,
            summary=summary,
        )


__all__ = ["ComparisonOutput", "StudyService", "TrialStudyOutput", "summarize_records"]
