"""Toy Monte Carlo goodness of fit.

The data histogram is fitted once by binned likelihood. The fitted model is
then frozen: its bin integrals serve both as the Poisson means of every toy
replica and as the prediction every NLL (data and toys) is evaluated
against. The p-value is the fraction of toys whose NLL is at least the
data's.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from histfit.core.fitting.optimizer import fit_histogram
from histfit.core.fitting.statistics import chi2_probability, likelihood_chi2, poisson_nll
from histfit.core.generation import poisson_toy
from histfit.core.models.gaussian import GaussianParams, bin_integrals
from histfit.core.shared.constants import N_GAUSSIAN_PARAMS, TOY_NLL_MIN_SPAN

if TYPE_CHECKING:
    from histfit.core.domain.histogram import Histogram
    from histfit.core.fitting.results import FitRecord
    from histfit.core.shared.typing import FloatArray

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ToyPValueResult:
    """Outcome of a toy Monte Carlo p-value estimate.

    Attributes
    ----------
        nll_data: NLL of the observed histogram under the fitted model
        nll_toys: NLL of every toy replica under the same model
        n_greater_equal: Number of toys with NLL >= nll_data
        n_toys: Number of toys thrown
        pvalue: n_greater_equal / n_toys
        fit: Likelihood fit of the observed histogram
        expected: Model bin integrals used as toy means
        n_bins: Number of histogram bins
        asymptotic_pvalue: χ² p-value of the Baker-Cousins statistic
    """

    nll_data: float
    nll_toys: FloatArray = field(repr=False)
    n_greater_equal: int
    n_toys: int
    pvalue: float
    fit: FitRecord
    expected: FloatArray = field(repr=False)
    n_bins: int
    asymptotic_pvalue: float

    @property
    def mean_error(self) -> float:
        """Uncertainty on the fitted mean."""
        return self.fit.mean_error

    def histogram_range(self) -> tuple[float, float]:
        """Plotting window for the toy NLL distribution, centered on the data."""
        span = max(TOY_NLL_MIN_SPAN, 3.0 * np.sqrt(2.0 * self.n_bins))
        return self.nll_data - span, self.nll_data + span


def toy_pvalue(
    hist: Histogram,
    n_toys: int,
    rng: np.random.Generator,
    integral: bool = False,
    callback: Callable[[int], None] | None = None,
) -> ToyPValueResult:
    """Estimate the goodness-of-fit p-value of a Gaussian with Poisson toys.

    Args:
        hist: Observed histogram (left untouched; a detached copy is fitted)
        n_toys: Number of pseudo-experiments
        rng: Random generator for the toys
        integral: Fit with the bin-averaged model instead of the bin-center value
        callback: Called with the number of completed toys

    Raises
    ------
        ValueError: If ``n_toys`` is not positive
        FitError: If the histogram cannot be fitted
    """
    if n_toys <= 0:
        msg = f"Number of toys must be positive, got {n_toys}"
        raise ValueError(msg)

    data = hist.copy(name=f"{hist.name}_detached")
    fit = fit_histogram(data, method="likelihood", integral=integral)
    params = GaussianParams(fit.amplitude, fit.mean, fit.sigma)

    expected = bin_integrals(params, data.edges)
    nll_data = poisson_nll(data.counts, expected)
    logger.debug("Data NLL = %.6g with %d bins", nll_data, data.n_bins)

    nll_toys = np.empty(n_toys)
    for t in range(n_toys):
        nll_toys[t] = poisson_nll(poisson_toy(expected, rng), expected)
        if callback is not None:
            callback(t + 1)

    n_ge = int(np.count_nonzero(nll_toys >= nll_data))
    pvalue = n_ge / n_toys

    ndof = data.n_bins - N_GAUSSIAN_PARAMS
    asymptotic = chi2_probability(likelihood_chi2(data.counts, expected), ndof)

    return ToyPValueResult(
        nll_data=nll_data,
        nll_toys=nll_toys,
        n_greater_equal=n_ge,
        n_toys=n_toys,
        pvalue=pvalue,
        fit=fit,
        expected=expected,
        n_bins=data.n_bins,
        asymptotic_pvalue=asymptotic,
    )


__all__ = ["ToyPValueResult", "toy_pvalue"]
