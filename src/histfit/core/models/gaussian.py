"""Gaussian model: G(x) = A * exp(-(x - mu)² / (2 σ²)).

The amplitude ``A`` is the peak height, not the area, so a histogram filled
with ``N`` entries in bins of width ``w`` has ``A ≈ N w / (σ √(2π))``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import ndtr

from histfit.core.shared.constants import EXPECTED_FLOOR

if TYPE_CHECKING:
    from histfit.core.domain.histogram import Histogram
    from histfit.core.shared.typing import FloatArray

_SQRT_2PI = np.sqrt(2.0 * np.pi)

PARAMETER_NAMES = ("amplitude", "mean", "sigma")


@dataclass(frozen=True, slots=True)
class GaussianParams:
    """Amplitude (peak height), mean and width of a Gaussian."""

    amplitude: float
    mean: float
    sigma: float

    def as_array(self) -> FloatArray:
        return np.array([self.amplitude, self.mean, self.sigma], dtype=np.float64)

    @classmethod
    def from_array(cls, values: FloatArray) -> GaussianParams:
        amplitude, mean, sigma = (float(v) for v in values)
        return cls(amplitude=amplitude, mean=mean, sigma=sigma)

    def with_mean(self, mean: float) -> GaussianParams:
        return GaussianParams(amplitude=self.amplitude, mean=float(mean), sigma=self.sigma)


def gaussian(x: FloatArray | float, amplitude: float, mean: float, sigma: float) -> FloatArray:
    """Evaluate the Gaussian at ``x``."""
    z = (np.asarray(x, dtype=np.float64) - mean) / sigma
    return amplitude * np.exp(-0.5 * z * z)


def gaussian_integral(
    a: FloatArray | float,
    b: FloatArray | float,
    amplitude: float,
    mean: float,
    sigma: float,
) -> FloatArray:
    """Integral of the Gaussian over ``[a, b]`` (vectorised)."""
    sigma = abs(sigma)
    za = (np.asarray(a, dtype=np.float64) - mean) / sigma
    zb = (np.asarray(b, dtype=np.float64) - mean) / sigma
    return amplitude * sigma * _SQRT_2PI * (ndtr(zb) - ndtr(za))


def bin_integrals(
    params: GaussianParams,
    edges: FloatArray,
    floor: float = EXPECTED_FLOOR,
) -> FloatArray:
    """Predicted content of every bin: the model integrated over the bin.

    Values are clamped to ``floor`` so that logarithms and ratios stay finite.
    """
    edges = np.asarray(edges, dtype=np.float64)
    mu = gaussian_integral(edges[:-1], edges[1:], params.amplitude, params.mean, params.sigma)
    return np.maximum(mu, floor)


def bin_expectations(
    params: GaussianParams | FloatArray,
    hist: Histogram,
    integral: bool = False,
) -> FloatArray:
    """Model value per bin as used by the fit.

    By default the model is sampled at the bin center. With ``integral=True``
    the bin-averaged model (integral divided by bin width) is used instead.
    """
    if not isinstance(params, GaussianParams):
        params = GaussianParams.from_array(params)
    if integral:
        raw = gaussian_integral(
            hist.lower_edges, hist.upper_edges, params.amplitude, params.mean, params.sigma
        )
        return raw / hist.widths
    return gaussian(hist.centers, params.amplitude, params.mean, params.sigma)


def initial_guess(hist: Histogram) -> GaussianParams:
    """Starting values from histogram moments: (maximum, mean, std).

    A histogram whose contents sit in a single bin has zero spread; the width
    then falls back to one bin width so the model stays well defined.
    """
    sigma = hist.std()
    if not np.isfinite(sigma) or sigma <= 0:
        sigma = float(hist.widths.mean())
    mean = hist.mean() if hist.integral() > 0 else 0.5 * (hist.low + hist.high)
    return GaussianParams(amplitude=hist.maximum(), mean=mean, sigma=sigma)


__all__ = [
    "PARAMETER_NAMES",
    "GaussianParams",
    "bin_expectations",
    "bin_integrals",
    "gaussian",
    "gaussian_integral",
    "initial_guess",
]
