"""Binned Gaussian fits.

Two estimators are provided:

- ``chi2``: Neyman least squares over non-empty bins, each bin weighted by
  its observed Poisson error √n. Solved with
  ``scipy.optimize.least_squares``; the covariance is ``inv(JᵀJ)``.
- ``likelihood``: binned Poisson likelihood over all bins, solved with
  ``scipy.optimize.minimize`` (L-BFGS-B). The covariance is the inverse of
  the numerical Hessian of the NLL at the minimum (ΔNLL = 1/2 errors).

Both use an analytic model Jacobian, so the objective and its gradient are
computed in a single pass over the bins. Parameters the data leave
unconstrained (a singular curvature matrix) are reported with a NaN error.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np
from scipy.optimize import least_squares, minimize
from scipy.special import ndtr

from histfit.core.fitting.results import FitRecord
from histfit.core.fitting.statistics import (
    chi2_probability,
    degrees_of_freedom,
    likelihood_chi2,
    neyman_chi2,
    reduced_chi2,
)
from histfit.core.models.gaussian import GaussianParams, initial_guess
from histfit.core.shared.constants import (
    EXPECTED_FLOOR,
    HESSIAN_REL_STEP,
    LEAST_SQUARES_FTOL,
    LEAST_SQUARES_MAX_NFEV,
    LEAST_SQUARES_XTOL,
    MINIMIZE_FTOL,
    MINIMIZE_MAXITER,
    N_GAUSSIAN_PARAMS,
    NULL_SPACE_TOL,
    SIGMA_LOWER_BOUND,
    SINGULAR_RCOND,
)
from histfit.core.shared.exceptions import ConvergenceWarning, FitError

if TYPE_CHECKING:
    from histfit.core.domain.config import FitMethod
    from histfit.core.domain.histogram import Histogram
    from histfit.core.shared.typing import FloatArray

logger = logging.getLogger(__name__)

_SQRT_2PI = np.sqrt(2.0 * np.pi)


# =============================================================================
# Model and derivatives
# =============================================================================


def model_and_jacobian(
    x: FloatArray,
    hist: Histogram,
    integral: bool = False,
) -> tuple[FloatArray, FloatArray]:
    """Model value per bin and its derivatives w.r.t. (amplitude, mean, sigma).

    Returns
    -------
        Tuple of (values with shape (n_bins,), jacobian with shape (n_bins, 3))
    """
    amplitude, mean, sigma = x
    jac = np.empty((hist.n_bins, N_GAUSSIAN_PARAMS))

    if not integral:
        z = (hist.centers - mean) / sigma
        g = np.exp(-0.5 * z * z)
        values = amplitude * g
        jac[:, 0] = g
        jac[:, 1] = values * z / sigma
        jac[:, 2] = values * z * z / sigma
        return values, jac

    za = (hist.lower_edges - mean) / sigma
    zb = (hist.upper_edges - mean) / sigma
    ga = np.exp(-0.5 * za * za)
    gb = np.exp(-0.5 * zb * zb)
    delta_cdf = ndtr(zb) - ndtr(za)
    widths = hist.widths

    values = amplitude * sigma * _SQRT_2PI * delta_cdf / widths
    jac[:, 0] = sigma * _SQRT_2PI * delta_cdf / widths
    jac[:, 1] = amplitude * (ga - gb) / widths
    jac[:, 2] = (amplitude * _SQRT_2PI * delta_cdf + amplitude * (za * ga - zb * gb)) / widths
    return values, jac


def numerical_hessian(
    func: Callable[[FloatArray], float],
    x: FloatArray,
    rel_step: float = HESSIAN_REL_STEP,
) -> FloatArray:
    """Central-difference Hessian of a scalar function."""
    x = np.asarray(x, dtype=np.float64)
    n = len(x)
    steps = rel_step * np.maximum(1.0, np.abs(x))
    hessian = np.zeros((n, n))
    f0 = func(x)

    for i in range(n):
        ei = np.zeros(n)
        ei[i] = steps[i]
        hessian[i, i] = (func(x + ei) - 2.0 * f0 + func(x - ei)) / steps[i] ** 2

        for j in range(i + 1, n):
            ej = np.zeros(n)
            ej[j] = steps[j]
            f_pp = func(x + ei + ej)
            f_pm = func(x + ei - ej)
            f_mp = func(x - ei + ej)
            f_mm = func(x - ei - ej)
            value = (f_pp - f_pm - f_mp + f_mm) / (4.0 * steps[i] * steps[j])
            hessian[i, j] = value
            hessian[j, i] = value

    return hessian


def invert_curvature(matrix: FloatArray) -> tuple[FloatArray, FloatArray]:
    """Covariance and standard errors from a curvature matrix (JᵀJ or a Hessian).

    A singular matrix is pseudo-inverted. Parameters with a component along
    its null space are not constrained by the data: their error is NaN, as is
    the error of any parameter whose variance comes out non-positive.
    """
    matrix = 0.5 * (matrix + matrix.T)
    eigvals, eigvecs = np.linalg.eigh(matrix)
    scale = float(np.max(np.abs(eigvals), initial=0.0))
    singular = np.abs(eigvals) <= SINGULAR_RCOND * scale

    if np.any(singular):
        logger.debug("Singular curvature matrix, falling back to pseudo-inverse")
    inv_eigvals = np.zeros_like(eigvals)
    inv_eigvals[~singular] = 1.0 / eigvals[~singular]
    covariance = (eigvecs * inv_eigvals) @ eigvecs.T

    undetermined = np.any(np.abs(eigvecs[:, singular]) > NULL_SPACE_TOL, axis=1)
    variances = np.diag(covariance)
    errors = np.full(len(variances), np.nan)
    ok = ~undetermined & (variances > 0)
    errors[ok] = np.sqrt(variances[ok])
    return covariance, errors


# =============================================================================
# Estimators
# =============================================================================


def _fit_chi2(hist: Histogram, x0: FloatArray, integral: bool) -> FitRecord:
    mask = hist.nonempty()
    counts = hist.counts[mask]
    inv_err = 1.0 / np.sqrt(counts)

    def residuals(x: FloatArray) -> FloatArray:
        values, _ = model_and_jacobian(x, hist, integral)
        return (counts - values[mask]) * inv_err

    def jacobian(x: FloatArray) -> FloatArray:
        _, jac = model_and_jacobian(x, hist, integral)
        return -jac[mask] * inv_err[:, np.newaxis]

    lower = np.array([-np.inf, -np.inf, SIGMA_LOWER_BOUND])
    upper = np.full(N_GAUSSIAN_PARAMS, np.inf)

    try:
        result = least_squares(
            residuals,
            x0,
            jac=jacobian,
            bounds=(lower, upper),
            method="trf",
            ftol=LEAST_SQUARES_FTOL,
            xtol=LEAST_SQUARES_XTOL,
            max_nfev=LEAST_SQUARES_MAX_NFEV,
        )
    except (ValueError, np.linalg.LinAlgError) as e:
        msg = f"Chi-square fit of '{hist.name}' failed: {e}"
        raise FitError(msg) from e

    values, _ = model_and_jacobian(result.x, hist, integral)
    chi2 = neyman_chi2(hist.counts, values)
    ndof = degrees_of_freedom(int(mask.sum()), N_GAUSSIAN_PARAMS)

    jac = result.jac
    covariance, errors = invert_curvature(jac.T @ jac)

    return _make_record(
        x=result.x,
        covariance=covariance,
        errors=errors,
        chi2=chi2,
        ndof=ndof,
        method="chi2",
        success=bool(result.success),
        message=str(result.message),
        nfev=int(result.nfev),
    )


def _fit_likelihood(hist: Histogram, x0: FloatArray, integral: bool) -> FitRecord:
    counts = hist.counts

    def nll(x: FloatArray) -> float:
        values, _ = model_and_jacobian(x, hist, integral)
        mu = np.maximum(values, EXPECTED_FLOOR)
        return float(np.sum(mu - counts * np.log(mu)))

    def nll_and_grad(x: FloatArray) -> tuple[float, FloatArray]:
        values, jac = model_and_jacobian(x, hist, integral)
        mu = np.maximum(values, EXPECTED_FLOOR)
        value = float(np.sum(mu - counts * np.log(mu)))
        grad = (1.0 - counts / mu) @ jac
        return value, grad

    bounds = [(0.0, None), (None, None), (SIGMA_LOWER_BOUND, None)]
    x0 = np.array([max(x0[0], 0.0), x0[1], max(x0[2], SIGMA_LOWER_BOUND)])

    try:
        result = minimize(
            nll_and_grad,
            x0,
            jac=True,
            method="L-BFGS-B",
            bounds=bounds,
            options={"maxiter": MINIMIZE_MAXITER, "ftol": MINIMIZE_FTOL},
        )
    except (ValueError, np.linalg.LinAlgError) as e:
        msg = f"Likelihood fit of '{hist.name}' failed: {e}"
        raise FitError(msg) from e

    values, _ = model_and_jacobian(result.x, hist, integral)
    chi2 = likelihood_chi2(counts, values)
    ndof = degrees_of_freedom(hist.n_bins, N_GAUSSIAN_PARAMS)

    hessian = numerical_hessian(nll, result.x)
    covariance, errors = invert_curvature(hessian)

    return _make_record(
        x=result.x,
        covariance=covariance,
        errors=errors,
        chi2=chi2,
        ndof=ndof,
        method="likelihood",
        success=bool(result.success),
        message=str(result.message),
        nfev=int(result.nfev),
    )


def _make_record(
    x: FloatArray,
    covariance: FloatArray,
    errors: FloatArray,
    chi2: float,
    ndof: int,
    method: FitMethod,
    success: bool,
    message: str,
    nfev: int,
) -> FitRecord:
    if not success:
        warnings.warn(
            f"Fit did not converge ({method}): {message}",
            ConvergenceWarning,
            stacklevel=3,
        )
    amplitude, mean, sigma = (float(v) for v in x)
    return FitRecord(
        params=(amplitude, mean, sigma, reduced_chi2(chi2, ndof)),
        errors=(float(errors[0]), float(errors[1]), float(errors[2])),
        ndof=float(ndof),
        prob=chi2_probability(chi2, ndof),
        chi2=chi2,
        method=method,
        success=success,
        message=message,
        nfev=nfev,
        covariance=covariance,
    )


def fit_histogram(
    hist: Histogram,
    method: FitMethod = "chi2",
    integral: bool = False,
    initial: GaussianParams | None = None,
) -> FitRecord:
    """Fit a Gaussian to a histogram.

    Args:
        hist: Histogram to fit (not modified)
        method: "chi2" (Neyman least squares) or "likelihood" (binned Poisson)
        integral: Compare bin contents with the bin-averaged model instead of
            the model at the bin center
        initial: Starting values; defaults to the histogram moments

    Returns
    -------
        FitRecord with parameters, errors and goodness of fit

    Raises
    ------
        FitError: If the histogram is empty or the optimizer fails
    """
    if hist.integral() <= 0:
        msg = f"Cannot fit empty histogram '{hist.name}'"
        raise FitError(msg)

    start = initial or initial_guess(hist)
    x0 = start.as_array()

    if method == "chi2":
        record = _fit_chi2(hist, x0, integral)
    elif method == "likelihood":
        record = _fit_likelihood(hist, x0, integral)
    else:
        msg = f"Unknown fit method: {method!r}"
        raise FitError(msg)

    logger.debug(
        "Fitted %s (%s): A=%.4g mean=%.4g sigma=%.4g chi2/ndf=%.4g",
        hist.name,
        method,
        record.amplitude,
        record.mean,
        record.sigma,
        record.reduced_chi2,
    )
    return record


__all__ = [
    "fit_histogram",
    "invert_curvature",
    "model_and_jacobian",
    "numerical_hessian",
]
