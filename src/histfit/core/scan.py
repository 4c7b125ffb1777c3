"""One-dimensional scans of a test statistic versus the Gaussian mean.

The model is anchored at the histogram moments (maximum, mean, std dev) and
only its mean is varied; no fit is performed. Predicted bin contents are the
model integrals over each bin.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

import numpy as np

from histfit.core.fitting.statistics import pearson_chi2, poisson_nll
from histfit.core.models.gaussian import GaussianParams, bin_integrals, initial_guess
from histfit.core.shared.constants import (
    SCAN_CHI2_CENTER,
    SCAN_CHI2_HALF_WIDTH,
    SCAN_N_POINTS,
    SCAN_NLL_WIDTH,
)

if TYPE_CHECKING:
    from histfit.core.domain.histogram import Histogram
    from histfit.core.shared.typing import FloatArray

Statistic = Literal["nll", "chi2"]
ScanKind = Literal["delta_nll", "chi2"]


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Statistic evaluated on a grid of mean values.

    Attributes
    ----------
        parameter: Name of the scanned parameter
        values: Scan grid
        statistic: Curve values (-2ΔlnL for likelihood scans, raw χ² otherwise)
        kind: "delta_nll" or "chi2"
        mu0: Starting mean (histogram mean)
        sigma0: Starting width (histogram std dev)
        best_value: Grid point with the smallest statistic
        best_statistic: Smallest raw statistic value on the grid
    """

    parameter: str
    values: FloatArray = field(repr=False)
    statistic: FloatArray = field(repr=False)
    kind: ScanKind
    mu0: float
    sigma0: float
    best_value: float
    best_statistic: float

    def interval(self, level: float) -> tuple[float, float] | None:
        """Span of grid points whose curve value is <= ``level``.

        For a likelihood scan, ``level=1`` gives the ±1σ interval on the mean
        and ``level=4`` the ±2σ interval. Returns None if no point qualifies.
        """
        inside = np.flatnonzero(self.statistic <= level)
        if inside.size == 0:
            return None
        return float(self.values[inside[0]]), float(self.values[inside[-1]])


def scan_mean(
    hist: Histogram,
    values: FloatArray,
    statistic: Statistic = "nll",
    params: GaussianParams | None = None,
) -> FloatArray:
    """Evaluate the statistic for each trial mean in ``values``.

    Args:
        hist: Observed histogram
        values: Trial means
        statistic: "nll" (Poisson NLL) or "chi2" (Pearson chi-square)
        params: Model to vary; defaults to the histogram moments

    Returns
    -------
        Raw statistic per trial mean
    """
    base = params or initial_guess(hist)
    if statistic == "nll":
        func = poisson_nll
    elif statistic == "chi2":
        func = pearson_chi2
    else:
        msg = f"Unknown scan statistic: {statistic!r}"
        raise ValueError(msg)

    out = np.empty(len(values))
    for i, mean in enumerate(values):
        expected = bin_integrals(base.with_mean(mean), hist.edges)
        out[i] = func(hist.counts, expected)
    return out


def nll_profile(
    hist: Histogram,
    n_points: int = SCAN_N_POINTS,
    width: float = SCAN_NLL_WIDTH,
) -> ScanResult:
    """Scan -2ΔlnL over ``mu0 ± width * sigma0``.

    The curve is shifted so its minimum on the grid is zero.
    """
    start = initial_guess(hist)
    mu0, sigma0 = start.mean, start.sigma
    grid = np.linspace(mu0 - width * sigma0, mu0 + width * sigma0, n_points)
    nll = scan_mean(hist, grid, "nll", start)

    best = int(np.argmin(nll))
    curve = 2.0 * (nll - nll[best])

    return ScanResult(
        parameter="mean",
        values=grid,
        statistic=curve,
        kind="delta_nll",
        mu0=mu0,
        sigma0=sigma0,
        best_value=float(grid[best]),
        best_statistic=float(nll[best]),
    )


def chi2_profile(
    hist: Histogram,
    center: float = SCAN_CHI2_CENTER,
    half_width: float = SCAN_CHI2_HALF_WIDTH,
    n_points: int = SCAN_N_POINTS,
) -> ScanResult:
    """Scan the Pearson chi-square over ``center ± half_width``."""
    start = initial_guess(hist)
    grid = np.linspace(center - half_width, center + half_width, n_points)
    chi2 = scan_mean(hist, grid, "chi2", start)
    best = int(np.argmin(chi2))

    return ScanResult(
        parameter="mean",
        values=grid,
        statistic=chi2,
        kind="chi2",
        mu0=start.mean,
        sigma0=start.sigma,
        best_value=float(grid[best]),
        best_statistic=float(chi2[best]),
    )


__all__ = ["ScanResult", "chi2_profile", "nll_profile", "scan_mean"]
