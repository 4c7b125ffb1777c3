"""Test the toy Monte Carlo goodness of fit."""

import numpy as np
import pytest

from histfit.core.domain.histogram import Histogram
from histfit.core.fitting.statistics import poisson_nll
from histfit.core.gof import toy_pvalue


class TestToyPValue:
    """Tests for toy_pvalue."""

    def test_result_fields(self, gaussian_hist, rng):
        result = toy_pvalue(gaussian_hist, 200, rng)
        assert result.n_toys == 200
        assert result.nll_toys.shape == (200,)
        assert result.n_bins == 100
        assert 0.0 <= result.pvalue <= 1.0
        assert result.pvalue == pytest.approx(result.n_greater_equal / 200)
        assert result.n_greater_equal == np.count_nonzero(result.nll_toys >= result.nll_data)
        assert 0.0 <= result.asymptotic_pvalue <= 1.0

    def test_data_nll_uses_fitted_bin_integrals(self, gaussian_hist, rng):
        result = toy_pvalue(gaussian_hist, 10, rng)
        assert result.fit.method == "likelihood"
        assert result.nll_data == pytest.approx(poisson_nll(gaussian_hist.counts, result.expected))
        assert result.expected.sum() == pytest.approx(gaussian_hist.integral(), rel=0.01)
        assert result.mean_error == result.fit.mean_error > 0

    def test_reproducible_with_seed(self, gaussian_hist):
        a = toy_pvalue(gaussian_hist, 50, np.random.default_rng(1))
        b = toy_pvalue(gaussian_hist, 50, np.random.default_rng(1))
        assert np.array_equal(a.nll_toys, b.nll_toys)
        assert a.pvalue == b.pvalue

    def test_input_is_not_modified(self, gaussian_hist, rng):
        before = gaussian_hist.counts.copy()
        toy_pvalue(gaussian_hist, 10, rng)
        assert np.array_equal(gaussian_hist.counts, before)
        assert gaussian_hist.name == "h5k"

    def test_callback(self, sparse_hist, rng):
        calls = []
        toy_pvalue(sparse_hist, 3, rng, callback=calls.append)
        assert calls == [1, 2, 3]

    @pytest.mark.parametrize("n_toys", [0, -5])
    def test_non_positive_toys_raise(self, gaussian_hist, rng, n_toys):
        with pytest.raises(ValueError, match="positive"):
            toy_pvalue(gaussian_hist, n_toys, rng)


class TestHistogramRange:
    """Plotting window for the toy NLL distribution."""

    def test_wide_histogram(self, gaussian_hist, rng):
        result = toy_pvalue(gaussian_hist, 5, rng)
        low, high = result.histogram_range()
        span = 3.0 * np.sqrt(200.0)
        assert low == pytest.approx(result.nll_data - span)
        assert high == pytest.approx(result.nll_data + span)

    def test_minimum_span(self, rng):
        hist = Histogram.from_samples(rng.normal(50.0, 10.0, 500), 5, 0.0, 100.0)
        result = toy_pvalue(hist, 5, rng)
        low, high = result.histogram_range()
        assert high - low == pytest.approx(20.0)


@pytest.mark.slow
class TestPValueStatistics:
    """Statistical behaviour with many toys."""

    def test_two_peaks_are_rejected(self, rng):
        samples = np.concatenate([rng.normal(25.0, 5.0, 2500), rng.normal(75.0, 5.0, 2500)])
        hist = Histogram.from_samples(samples, 100, 0.0, 100.0, name="bimodal")
        result = toy_pvalue(hist, 2000, rng)
        assert result.pvalue == 0.0
        assert result.asymptotic_pvalue < 1e-6
        assert result.nll_data > result.nll_toys.max()
