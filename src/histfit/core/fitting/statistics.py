"""Binned test statistics and chi-square bookkeeping.

All functions take observed bin contents ``n`` and predicted contents ``mu``
as arrays of equal length. Predicted values are clamped to
``EXPECTED_FLOOR`` before any logarithm or division.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from scipy import stats
from scipy.special import xlogy

from histfit.core.shared.constants import EXPECTED_FLOOR

if TYPE_CHECKING:
    from histfit.core.shared.typing import FloatArray


def _floored(expected: FloatArray, floor: float) -> FloatArray:
    return np.maximum(np.asarray(expected, dtype=np.float64), floor)


def poisson_nll(
    counts: FloatArray,
    expected: FloatArray,
    floor: float = EXPECTED_FLOOR,
) -> float:
    """Poisson negative log-likelihood, up to an additive constant.

    NLL = Σ [μᵢ - nᵢ ln μᵢ]
    """
    n = np.asarray(counts, dtype=np.float64)
    mu = _floored(expected, floor)
    return float(np.sum(mu - n * np.log(mu)))


def pearson_chi2(
    counts: FloatArray,
    expected: FloatArray,
    floor: float = EXPECTED_FLOOR,
) -> float:
    """Pearson chi-square, Σ (nᵢ - μᵢ)² / μᵢ, over all bins."""
    n = np.asarray(counts, dtype=np.float64)
    mu = _floored(expected, floor)
    return float(np.sum((n - mu) ** 2 / mu))


def neyman_residuals(counts: FloatArray, expected: FloatArray) -> FloatArray:
    """Residuals (nᵢ - μᵢ) / √nᵢ over non-empty bins only.

    Empty bins carry zero error and are excluded, as in a least-squares fit
    that weights each bin by its observed Poisson error.
    """
    n = np.asarray(counts, dtype=np.float64)
    mu = np.asarray(expected, dtype=np.float64)
    mask = n > 0
    return (n[mask] - mu[mask]) / np.sqrt(n[mask])


def neyman_chi2(counts: FloatArray, expected: FloatArray) -> float:
    """Neyman chi-square, Σ (nᵢ - μᵢ)² / nᵢ, over non-empty bins."""
    return float(np.sum(neyman_residuals(counts, expected) ** 2))


def likelihood_chi2(
    counts: FloatArray,
    expected: FloatArray,
    floor: float = EXPECTED_FLOOR,
) -> float:
    """Baker-Cousins likelihood-ratio chi-square.

    χ²_λ = 2 Σ [μᵢ - nᵢ + nᵢ ln(nᵢ / μᵢ)]

    Empty bins contribute 2μᵢ. Asymptotically χ²-distributed, this is the
    goodness of fit quoted for binned likelihood fits.
    """
    n = np.asarray(counts, dtype=np.float64)
    mu = _floored(expected, floor)
    return float(2.0 * np.sum(mu - n + xlogy(n, n) - xlogy(n, mu)))


def degrees_of_freedom(n_points: int, n_params: int) -> int:
    """Number of fitted points minus number of free parameters.

    Unlike a plain reduced chi-square helper this is not clamped: sparse
    histograms can have zero or negative degrees of freedom and callers
    must treat those as "no goodness of fit available".
    """
    return int(n_points) - int(n_params)


def reduced_chi2(chi2: float, ndof: int | float) -> float:
    """Chi-square per degree of freedom (NaN when ndof <= 0)."""
    if ndof <= 0:
        return float("nan")
    return float(chi2) / float(ndof)


def chi2_probability(chi2: float, ndof: int | float) -> float:
    """Upper-tail probability P(χ² ≥ chi2 | ndof); 0 for ndof <= 0 or non-finite input."""
    if ndof <= 0 or not np.isfinite(chi2) or chi2 < 0:
        return 0.0
    return float(stats.chi2.sf(chi2, ndof))


__all__ = [
    "chi2_probability",
    "degrees_of_freedom",
    "likelihood_chi2",
    "neyman_chi2",
    "neyman_residuals",
    "pearson_chi2",
    "poisson_nll",
    "reduced_chi2",
]
