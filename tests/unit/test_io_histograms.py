"""Test ROOT histogram files written and read with uproot."""

import numpy as np
import pytest
import uproot

from histfit.core.domain.histogram import Histogram
from histfit.core.shared.exceptions import DataIOError, HistogramNotFoundError
from histfit.io.histograms import read_first_histogram, write_histogram


class TestWriteRead:
    """Round trip through a ROOT file."""

    def test_contents_survive(self, root_file, gaussian_hist):
        hist = read_first_histogram(root_file)
        assert hist.name == "h5k"
        assert np.array_equal(hist.counts, gaussian_hist.counts)
        assert np.allclose(hist.edges, gaussian_hist.edges)
        assert hist.entries == gaussian_hist.entries

    def test_titles_survive(self, root_file):
        hist = read_first_histogram(root_file)
        assert hist.axis_titles() == ("Gaussian sample", "x", "frequency")

    def test_flows_survive(self, tmp_path):
        hist = Histogram.from_samples([-1.0, 0.5, 0.5, 20.0], 10, 0.0, 10.0, name="flows")
        path = write_histogram(tmp_path / "flows.root", hist)
        back = read_first_histogram(path)
        assert back.underflow == 1
        assert back.overflow == 1
        assert back.entries == 4

    def test_readable_by_uproot(self, root_file, gaussian_hist):
        with uproot.open(root_file) as f:
            assert f.classnames(recursive=False)["h5k;1"] == "TH1D"
            assert f["h5k"].values().sum() == pytest.approx(gaussian_hist.integral())

    def test_variable_binning(self, tmp_path):
        hist = Histogram(edges=np.array([0.0, 1.0, 3.0, 6.0]), counts=np.array([1.0, 2.0, 3.0]), name="var")
        back = read_first_histogram(write_histogram(tmp_path / "var.root", hist))
        assert np.allclose(back.edges, [0.0, 1.0, 3.0, 6.0])
        assert back.counts.tolist() == [1.0, 2.0, 3.0]

    def test_recreate_replaces_file(self, tmp_path):
        path = tmp_path / "histo.root"
        write_histogram(path, Histogram.from_samples([1.0], 2, 0.0, 2.0, name="first"))
        write_histogram(path, Histogram.from_samples([1.0], 2, 0.0, 2.0, name="second"))
        assert read_first_histogram(path).name == "second"


class TestReadErrors:
    """Unreadable files and files without histograms."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataIOError, match="cannot open file"):
            read_first_histogram(tmp_path / "nope.root")

    def test_not_a_root_file(self, tmp_path):
        path = tmp_path / "text.root"
        path.write_text("definitely not ROOT\n" * 100)
        with pytest.raises(DataIOError, match="cannot open file"):
            read_first_histogram(path)

    def test_no_histogram(self, tmp_path):
        path = tmp_path / "strings.root"
        with uproot.recreate(path) as f:
            f["note"] = "no histograms here"
        with pytest.raises(HistogramNotFoundError, match="no TH1 found"):
            read_first_histogram(path)

    def test_not_found_is_io_error(self):
        assert issubclass(HistogramNotFoundError, DataIOError)
