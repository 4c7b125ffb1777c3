"""Test random histogram generation."""

import numpy as np
import pytest

from histfit.core.domain.config import GenerationConfig
from histfit.core.generation import generate_gaussian_histogram, make_rng, poisson_toy


class TestGeneration:
    """Tests for Gaussian histogram generation."""

    def test_defaults(self):
        hist = generate_gaussian_histogram(1000, make_rng(1))
        assert hist.name == "randomHist1"
        assert hist.axis_titles() == ("Random Histogram", "x", "frequency")
        assert hist.n_bins == 100
        assert (hist.low, hist.high) == (0.0, 100.0)
        assert hist.entries == 1000
        assert hist.integral() + hist.underflow + hist.overflow == 1000

    def test_same_seed_same_histogram(self):
        a = generate_gaussian_histogram(500, make_rng(42))
        b = generate_gaussian_histogram(500, make_rng(42))
        assert np.array_equal(a.counts, b.counts)

    def test_custom_generation(self):
        gen = GenerationConfig(mean=5.0, sigma=1.0, n_bins=20, low=0.0, high=10.0)
        hist = generate_gaussian_histogram(2000, make_rng(3), gen)
        assert hist.n_bins == 20
        assert hist.mean() == pytest.approx(5.0, abs=0.1)

    def test_zero_entries(self):
        hist = generate_gaussian_histogram(0, make_rng(0))
        assert hist.integral() == 0.0

    def test_negative_entries_raise(self):
        with pytest.raises(ValueError, match="non-negative"):
            generate_gaussian_histogram(-1, make_rng(0))


class TestPoissonToy:
    """Tests for Poisson replicas."""

    def test_shape_and_values(self, rng):
        expected = np.array([0.5, 5.0, 50.0])
        toy = poisson_toy(expected, rng)
        assert toy.shape == expected.shape
        assert toy.dtype == np.float64
        assert np.all(toy >= 0)
        assert np.array_equal(toy, np.round(toy))

    def test_mean_matches_expectation(self, rng):
        expected = np.full(1000, 20.0)
        assert poisson_toy(expected, rng).mean() == pytest.approx(20.0, abs=0.5)
