"""Test figure builders on the Agg backend."""

import matplotlib.pyplot as plt
import numpy as np
import pytest

from histfit.core.fitting.results import FitRecord
from histfit.core.gof import toy_pvalue
from histfit.core.scan import chi2_profile, nll_profile
from histfit.plotting import (
    make_chi2_scan_figure,
    make_fit_summary_figure,
    make_mean_comparison_figure,
    make_nll_scan_figure,
    make_toy_nll_figure,
    save_figure,
)


@pytest.fixture
def records():
    rng = np.random.default_rng(0)
    return [
        FitRecord(
            params=(200.0, float(m), 10.0, 1.0),
            errors=(5.0, 0.3, 0.2),
            ndof=90.0,
            prob=0.5,
            chi2=90.0,
        )
        for m in rng.normal(50.0, 0.3, 30)
    ]


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


class TestFitSummary:
    """Tests for the 2x2 fit-result figure."""

    def test_four_panels_with_stats(self, records):
        fig = make_fit_summary_figure(records)
        assert len(fig.axes) == 4
        for ax in fig.axes:
            texts = [t.get_text() for t in ax.texts]
            assert any("Entries" in t and "Std Dev" in t for t in texts)

    def test_panel_ranges(self, records):
        fig = make_fit_summary_figure(records)
        assert fig.axes[0].get_xlim() == pytest.approx((0.0, 3.0))
        assert fig.axes[1].get_xlim() == pytest.approx((40.0, 60.0))
        assert fig.axes[2].get_xlim() == pytest.approx((0.0, 1.0))
        assert fig.axes[3].get_xlim() == pytest.approx((0.0, 2.0))

    def test_empty_input(self):
        assert make_fit_summary_figure([]) is None

    def test_non_finite_values_are_dropped(self, records):
        bad = FitRecord(
            params=(1.0, 50.0, 1.0, float("nan")),
            errors=(0.1, 0.1, 0.1),
            ndof=0.0,
            prob=0.0,
            chi2=0.0,
        )
        fig = make_fit_summary_figure([*records, bad])
        assert "Entries  30" in fig.axes[0].texts[0].get_text()


class TestMeanComparison:
    def test_two_panels(self, records):
        fig = make_mean_comparison_figure(records, records[:10])
        assert len(fig.axes) == 2
        assert "Entries  10" in fig.axes[1].texts[0].get_text()

    def test_empty_input(self):
        assert make_mean_comparison_figure([], []) is None


class TestToyFigure:
    def test_legend_and_annotation(self, gaussian_hist, rng):
        result = toy_pvalue(gaussian_hist, 30, rng)
        fig = make_toy_nll_figure(result)
        ax = fig.axes[0]
        labels = [t.get_text() for t in ax.get_legend().get_texts()]
        assert labels[0] == "Toys NLL"
        assert labels[1] == f"Data NLL = {result.nll_data:.2f}"
        assert any(f"{result.pvalue:.3f}" in t.get_text() for t in ax.texts)
        assert ax.get_xlim() == pytest.approx(result.histogram_range())


class TestScanFigures:
    def test_nll_scan(self, gaussian_hist):
        fig = make_nll_scan_figure(nll_profile(gaussian_hist))
        assert fig.axes[0].get_ylim() == pytest.approx((0.0, 4.5))

    def test_chi2_scan(self, gaussian_hist):
        fig = make_chi2_scan_figure(chi2_profile(gaussian_hist), center=50.0)
        ax = fig.axes[0]
        vertical = [line for line in ax.get_lines() if line.get_linestyle() == "--"]
        assert len(vertical) == 1
        assert vertical[0].get_xdata()[0] == pytest.approx(50.0)


class TestSaveFigure:
    def test_writes_pdf_and_closes(self, records, tmp_path):
        fig = make_fit_summary_figure(records)
        path = save_figure(fig, tmp_path / "plots" / "result1.pdf")
        assert path.exists()
        assert path.read_bytes().startswith(b"%PDF")
        assert fig.number not in plt.get_fignums()

    def test_other_formats(self, records, tmp_path):
        path = save_figure(make_fit_summary_figure(records), tmp_path / "result1.png")
        assert path.read_bytes().startswith(b"\x89PNG")
