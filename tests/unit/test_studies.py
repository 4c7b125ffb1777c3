"""Test repeated generate-and-fit studies."""

import logging

import numpy as np
import pytest

from histfit.core.fitting.results import collect
from histfit.core.studies import compare_fit_methods, fit_once, run_fit_trials


class TestFitOnce:
    def test_returns_record_and_histogram(self, rng):
        record, hist = fit_once(1000, rng)
        assert hist.entries == 1000
        assert record.method == "chi2"


class TestRunFitTrials:
    """Tests for the trial loop."""

    def test_one_record_per_trial(self, rng):
        records = run_fit_trials(20, 1000, rng)
        assert len(records) == 20
        assert all(r.method == "chi2" for r in records)

    def test_callback_reports_progress(self, rng):
        calls = []
        run_fit_trials(5, 500, rng, callback=calls.append)
        assert calls == [1, 2, 3, 4, 5]

    def test_likelihood_method(self, rng):
        records = run_fit_trials(5, 500, rng, method="likelihood")
        assert all(r.method == "likelihood" for r in records)

    def test_fitted_means_center_on_truth(self, rng):
        records = run_fit_trials(50, 1000, rng)
        assert np.mean(collect(records, "mean")) == pytest.approx(50.0, abs=0.5)

    def test_empty_trials_are_skipped(self, rng, caplog):
        with caplog.at_level(logging.WARNING, logger="histfit"):
            records = run_fit_trials(3, 0, rng)
        assert records == []
        assert "could not be fitted" in caplog.text


class TestCompareFitMethods:
    """Tests for the chi-square versus likelihood comparison."""

    def test_both_methods_fitted(self, rng):
        comparison = compare_fit_methods(10, 10, rng)
        assert len(comparison.chi2) + len(comparison.likelihood) + comparison.skipped == 20
        assert all(r.method == "chi2" for r in comparison.chi2)
        assert all(r.method == "likelihood" for r in comparison.likelihood)

    def test_callback_once_per_trial(self, rng):
        calls = []
        compare_fit_methods(4, 10, rng, callback=calls.append)
        assert calls == [1, 2, 3, 4]
