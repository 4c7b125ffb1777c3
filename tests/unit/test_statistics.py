"""Test binned test statistics."""

import numpy as np
import pytest
from scipy import stats

from histfit.core.fitting.statistics import (
    chi2_probability,
    degrees_of_freedom,
    likelihood_chi2,
    neyman_chi2,
    neyman_residuals,
    pearson_chi2,
    poisson_nll,
    reduced_chi2,
)


class TestStatistics:
    """Values of each statistic on small hand-checked inputs."""

    def test_poisson_nll(self):
        value = poisson_nll(np.array([1.0, 2.0]), np.array([1.0, 2.0]))
        assert value == pytest.approx(3.0 - 2.0 * np.log(2.0))

    def test_poisson_nll_floors_expectation(self):
        value = poisson_nll(np.array([1.0]), np.array([0.0]))
        assert np.isfinite(value)
        assert value == pytest.approx(1e-12 - np.log(1e-12))

    def test_pearson_chi2(self):
        assert pearson_chi2(np.array([1.0, 4.0]), np.array([2.0, 2.0])) == pytest.approx(2.5)

    def test_neyman_skips_empty_bins(self):
        counts = np.array([0.0, 4.0, 9.0])
        expected = np.array([1.0, 2.0, 6.0])
        assert len(neyman_residuals(counts, expected)) == 2
        assert neyman_chi2(counts, expected) == pytest.approx(2.0)

    def test_likelihood_chi2_zero_for_perfect_model(self):
        counts = np.array([1.0, 5.0, 10.0])
        assert likelihood_chi2(counts, counts) == pytest.approx(0.0, abs=1e-12)

    def test_likelihood_chi2_empty_bin(self):
        assert likelihood_chi2(np.array([0.0]), np.array([3.0])) == pytest.approx(6.0)

    def test_likelihood_chi2_non_negative(self, rng):
        counts = rng.poisson(5.0, 50).astype(float)
        assert likelihood_chi2(counts, np.full(50, 5.0)) >= 0.0


class TestDegreesOfFreedom:
    """Tests for ndof bookkeeping."""

    def test_not_clamped(self):
        assert degrees_of_freedom(2, 3) == -1
        assert degrees_of_freedom(100, 3) == 97

    def test_reduced_chi2(self):
        assert reduced_chi2(50.0, 25) == pytest.approx(2.0)
        assert np.isnan(reduced_chi2(5.0, 0))
        assert np.isnan(reduced_chi2(5.0, -2))

    def test_probability(self):
        assert chi2_probability(12.0, 10) == pytest.approx(stats.chi2.sf(12.0, 10))

    @pytest.mark.parametrize(("chi2", "ndof"), [(5.0, 0), (5.0, -1), (float("nan"), 5)])
    def test_probability_undefined_is_zero(self, chi2, ndof):
        assert chi2_probability(chi2, ndof) == 0.0
