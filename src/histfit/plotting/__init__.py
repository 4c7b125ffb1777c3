"""Plotting for HistFit.

All figure builders return matplotlib ``Figure`` objects; ``save_figure``
writes them to disk.
"""

from histfit.plotting.distributions import (
    make_chi2_scan_figure,
    make_fit_summary_figure,
    make_mean_comparison_figure,
    make_nll_scan_figure,
    make_toy_nll_figure,
    save_figure,
)

__all__ = [
    "make_chi2_scan_figure",
    "make_fit_summary_figure",
    "make_mean_comparison_figure",
    "make_nll_scan_figure",
    "make_toy_nll_figure",
    "save_figure",
]
