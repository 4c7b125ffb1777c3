"""Pytest fixtures for HistFit tests."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from histfit.core.domain.histogram import Histogram
from histfit.io.histograms import write_histogram
from histfit.ui import Verbosity, set_verbosity


@pytest.fixture(autouse=True)
def _reset_verbosity():
    """Commands change the global console verbosity; restore it after each test."""
    yield
    set_verbosity(Verbosity.NORMAL)


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(12345)


@pytest.fixture
def gaussian_hist(rng):
    """5000 draws from N(50, 10) in 100 bins on [0, 100)."""
    return Histogram.from_samples(
        rng.normal(50.0, 10.0, 5000),
        100,
        0.0,
        100.0,
        name="h5k",
        title="Gaussian sample;x;frequency",
    )


@pytest.fixture
def sparse_hist():
    """25 draws from N(50, 10), as in a low-statistics goodness-of-fit test."""
    samples = np.random.default_rng(7).normal(50.0, 10.0, 25)
    return Histogram.from_samples(samples, 100, 0.0, 100.0, name="h25")


@pytest.fixture
def root_file(tmp_path, gaussian_hist):
    """ROOT file holding ``gaussian_hist``."""
    return write_histogram(tmp_path / "histo.root", gaussian_hist)


@pytest.fixture
def sample_config_file(tmp_path):
    """Small TOML configuration for fast runs."""
    config_path = tmp_path / "histfit.toml"
    content = """
[generation]
mean = 40.0
sigma = 5.0

[fitting]
method = "likelihood"

[study]
trials = 20
entries = 200
seed = 3

[toys]
n_toys = 50

[output]
directory = "Results"
save_csv = false
"""
    config_path.write_text(content)
    return config_path


class MockReporter:
    """Test double for capturing reporter calls."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def action(self, message: str) -> None:
        self.messages.append(("action", message))

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))


@pytest.fixture
def mock_reporter():
    """Reporter that records (kind, message) pairs."""
    return MockReporter()
