"""Per-fit output record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from histfit.core.domain.config import FitMethod
    from histfit.core.shared.typing import FloatArray


@dataclass(frozen=True, slots=True)
class FitRecord:
    """Flat record of one Gaussian fit.

    Attributes
    ----------
        params: (amplitude, mean, sigma, reduced chi-square)
        errors: Uncertainties on (amplitude, mean, sigma)
        ndof: Degrees of freedom of the goodness-of-fit statistic
        prob: Chi-square p-value of the goodness-of-fit statistic
        chi2: Goodness-of-fit statistic (Neyman χ² or Baker-Cousins χ²_λ)
        method: "chi2" or "likelihood"
        success: Whether the optimizer reported convergence
        message: Optimizer status message
        nfev: Number of objective evaluations
        covariance: 3x3 parameter covariance, if it could be computed
    """

    params: tuple[float, float, float, float]
    errors: tuple[float, float, float]
    ndof: float
    prob: float
    chi2: float
    method: FitMethod = "chi2"
    success: bool = True
    message: str = ""
    nfev: int = 0
    covariance: FloatArray | None = field(default=None, compare=False, repr=False)

    @property
    def amplitude(self) -> float:
        return self.params[0]

    @property
    def mean(self) -> float:
        return self.params[1]

    @property
    def sigma(self) -> float:
        return self.params[2]

    @property
    def reduced_chi2(self) -> float:
        return self.params[3]

    @property
    def amplitude_error(self) -> float:
        return self.errors[0]

    @property
    def mean_error(self) -> float:
        return self.errors[1]

    @property
    def sigma_error(self) -> float:
        return self.errors[2]

    def as_dict(self) -> dict[str, Any]:
        """Flatten to plain Python values, e.g. for a CSV row."""
        return {
            "method": self.method,
            "amplitude": self.amplitude,
            "mean": self.mean,
            "sigma": self.sigma,
            "reduced_chi2": self.reduced_chi2,
            "amplitude_error": self.amplitude_error,
            "mean_error": self.mean_error,
            "sigma_error": self.sigma_error,
            "chi2": self.chi2,
            "ndof": self.ndof,
            "prob": self.prob,
            "success": self.success,
            "nfev": self.nfev,
        }


def collect(records: list[FitRecord], attribute: str) -> FloatArray:
    """Gather one attribute across records as a float array."""
    return np.array([getattr(record, attribute) for record in records], dtype=np.float64)


__all__ = ["FitRecord", "collect"]
