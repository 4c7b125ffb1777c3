"""Diagnostic figures for fit studies, toy p-values and mean scans.

All functions return matplotlib Figure objects; ``save_figure`` writes them
out and closes them.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.backends.backend_pdf import PdfPages
from matplotlib.figure import Figure

from histfit.core.domain.histogram import Histogram
from histfit.core.fitting.results import FitRecord, collect
from histfit.core.shared.constants import TOY_NLL_BINS

if TYPE_CHECKING:
    from histfit.core.gof import ToyPValueResult
    from histfit.core.scan import ScanResult
    from histfit.core.shared.typing import FloatArray

# (attribute, title, xlabel, n_bins, low, high) for the fit summary panels
SUMMARY_PANELS: tuple[tuple[str, str, str, int, float, float], ...] = (
    ("reduced_chi2", r"Reduced $\chi^2$ distribution", r"$\chi^2$/ndf", 50, 0.0, 3.0),
    ("mean", "Distribution of mean from fits", "mean", 50, 40.0, 60.0),
    ("prob", r"$\chi^2$ probability", r"P($\chi^2$)", 50, 0.0, 1.0),
    ("mean_error", "Error on mean from fits", r"$\sigma_{mean}$", 50, 0.0, 2.0),
)


def _bin_values(values: FloatArray, n_bins: int, low: float, high: float, name: str) -> Histogram:
    """Histogram finite values; out-of-range ones land in under/overflow."""
    values = np.asarray(values, dtype=np.float64)
    return Histogram.from_samples(values[np.isfinite(values)], n_bins, low, high, name=name)


def draw_stats_box(ax: Axes, hist: Histogram) -> None:
    """Entries / Mean / Std Dev box in the upper-right corner of ``ax``."""
    text = (
        f"Entries  {hist.entries:g}\n"
        f"Mean     {hist.mean():.4g}\n"
        f"Std Dev  {hist.std():.4g}"
    )
    ax.text(
        0.97,
        0.97,
        text,
        transform=ax.transAxes,
        ha="right",
        va="top",
        family="monospace",
        fontsize=9,
        bbox={"boxstyle": "square", "facecolor": "white", "edgecolor": "black", "linewidth": 0.8},
    )


def draw_histogram(
    ax: Axes,
    hist: Histogram,
    title: str = "",
    xlabel: str = "",
    ylabel: str = "Counts",
    stats: bool = True,
    **kwargs: object,
) -> None:
    """Draw a histogram outline with optional statistics box."""
    ax.stairs(hist.counts, hist.edges, **kwargs)
    ax.set_xlim(hist.low, hist.high)
    ax.set_ylim(bottom=0)
    ax.set_title(title, fontsize=12, fontweight="bold")
    ax.set_xlabel(xlabel, fontsize=11)
    ax.set_ylabel(ylabel, fontsize=11)
    ax.grid(True, alpha=0.3)
    if stats:
        draw_stats_box(ax, hist)


def make_fit_summary_figure(records: list[FitRecord]) -> Figure | None:
    """2x2 grid: reduced χ², fitted mean, χ² probability and error on the mean.

    Returns None when there is nothing to draw.
    """
    if not records:
        return None

    fig, axes = plt.subplots(2, 2, figsize=(9, 8))
    for ax, (attribute, title, xlabel, n_bins, low, high) in zip(
        axes.flat, SUMMARY_PANELS, strict=True
    ):
        hist = _bin_values(collect(records, attribute), n_bins, low, high, name=f"h_{attribute}")
        draw_histogram(ax, hist, title=title, xlabel=xlabel, color="tab:blue")

    fig.suptitle("Fit result distributions", fontsize=13)
    plt.tight_layout()
    return fig


def make_mean_comparison_figure(
    chi2_records: list[FitRecord],
    likelihood_records: list[FitRecord],
    n_bins: int = 100,
    low: float = 0.0,
    high: float = 100.0,
) -> Figure | None:
    """Side-by-side fitted-mean distributions for χ² and likelihood fits."""
    if not chi2_records and not likelihood_records:
        return None

    fig, axes = plt.subplots(1, 2, figsize=(9, 7))
    panels = (
        (chi2_records, r"Distribution of mean from $\chi^2$ fits", "h_mu_chi2"),
        (likelihood_records, "Distribution of mean from NLL fits", "h_mu_nll"),
    )
    for ax, (records, title, name) in zip(axes, panels, strict=True):
        hist = _bin_values(collect(records, "mean"), n_bins, low, high, name=name)
        draw_histogram(ax, hist, title=title, xlabel=r"$\mu$", linewidth=2, color="tab:blue")

    plt.tight_layout()
    return fig


def make_toy_nll_figure(result: ToyPValueResult, n_bins: int = TOY_NLL_BINS) -> Figure:
    """Toy NLL distribution with the data NLL marked and the p-value annotated."""
    low, high = result.histogram_range()
    hist = _bin_values(result.nll_toys, n_bins, low, high, name="hNLL")

    fig, ax = plt.subplots(figsize=(9, 7))
    ax.stairs(hist.counts, hist.edges, linewidth=2, color="tab:blue", label="Toys NLL")

    top = hist.maximum() * 1.05 if hist.maximum() > 0 else 1.0
    ax.vlines(
        result.nll_data,
        0,
        top,
        color="firebrick",
        linewidth=3,
        label=f"Data NLL = {result.nll_data:.2f}",
    )

    ax.set_xlim(low, high)
    ax.set_ylim(bottom=0)
    ax.set_title("NLL distribution from pseudo-experiments", fontsize=12, fontweight="bold")
    ax.set_xlabel("NLL", fontsize=11)
    ax.set_ylabel("Counts", fontsize=11)
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right")
    ax.text(
        0.55,
        0.72,
        rf"p-value (NLL$_{{toy}} \geq$ NLL$_{{data}}$) = {result.pvalue:.3f}",
        transform=ax.transAxes,
        fontsize=11,
    )
    plt.tight_layout()
    return fig


def make_nll_scan_figure(result: ScanResult, y_max: float = 4.5) -> Figure:
    """-2ΔlnL versus the mean, with dashed guides at 1 and 4."""
    fig, ax = plt.subplots(figsize=(9, 7))
    ax.plot(result.values, result.statistic, color="tab:blue", linewidth=2)
    ax.set_ylim(0, y_max)

    for level in (1.0, 4.0):
        ax.hlines(
            level,
            result.mu0,
            result.mu0 + result.sigma0,
            colors="black",
            linestyles="dashed",
            linewidth=1,
        )

    ax.set_title(r"$-2\Delta\ln L$ vs Mean", fontsize=12, fontweight="bold")
    ax.set_xlabel("Mean", fontsize=11)
    ax.set_ylabel(r"$-2\Delta\ln L$", fontsize=11)
    ax.grid(True, alpha=0.3)
    plt.tight_layout()
    return fig


def make_chi2_scan_figure(result: ScanResult, center: float) -> Figure:
    """χ² versus the mean, with a dashed vertical guide at ``center``."""
    fig, ax = plt.subplots(figsize=(9, 7))
    ax.plot(result.values, result.statistic, color="firebrick", linewidth=2)
    ax.axvline(center, color="black", linestyle="--", linewidth=1)
    ax.set_title(r"$\chi^2$ vs Mean", fontsize=12, fontweight="bold")
    ax.set_xlabel("Mean", fontsize=11)
    ax.set_ylabel(r"$\chi^2$", fontsize=11)
    ax.grid(True, alpha=0.3)
    plt.tight_layout()
    return fig


def save_figure(fig: Figure, path: Path) -> Path:
    """Save a figure (PDF through PdfPages, other formats by suffix) and close it."""
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        if path.suffix.lower() == ".pdf":
            with PdfPages(path) as pdf:
                pdf.savefig(fig)
        else:
            fig.savefig(path)
    finally:
        plt.close(fig)
    return path


__all__ = [
    "draw_histogram",
    "draw_stats_box",
    "make_chi2_scan_figure",
    "make_fit_summary_figure",
    "make_mean_comparison_figure",
    "make_nll_scan_figure",
    "make_toy_nll_figure",
    "save_figure",
]
