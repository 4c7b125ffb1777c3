"""Pseudo-random histogram generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from histfit.core.domain.config import GenerationConfig
from histfit.core.domain.histogram import Histogram

if TYPE_CHECKING:
    from histfit.core.shared.typing import FloatArray


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create the random generator used for a run.

    ``None`` draws fresh OS entropy, so unseeded runs never repeat.
    """
    return np.random.default_rng(seed)


def generate_gaussian_histogram(
    entries: int,
    rng: np.random.Generator,
    generation: GenerationConfig | None = None,
    name: str = "randomHist1",
    title: str = "Random Histogram;x;frequency",
) -> Histogram:
    """Fill a histogram with ``entries`` draws from N(mean, sigma)."""
    gen = generation or GenerationConfig()
    if entries < 0:
        msg = f"Number of entries must be non-negative, got {entries}"
        raise ValueError(msg)
    hist = Histogram.empty(gen.n_bins, gen.low, gen.high, name=name, title=title)
    hist.fill(rng.normal(gen.mean, gen.sigma, size=entries))
    return hist


def poisson_toy(expected: FloatArray, rng: np.random.Generator) -> FloatArray:
    """One Poisson replica of the predicted bin contents."""
    return rng.poisson(expected).astype(np.float64)


__all__ = ["generate_gaussian_histogram", "make_rng", "poisson_toy"]
