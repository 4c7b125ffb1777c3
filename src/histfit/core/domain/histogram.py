"""Fixed-binning 1-D histogram.

The histogram keeps only in-range bin contents in ``counts``; fills that fall
outside ``[low, high)`` are tracked in ``underflow``/``overflow`` and still
count toward ``entries``, which mirrors how analysis histograms report the
number of fills.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from histfit.core.shared.exceptions import HistogramError
from histfit.core.shared.typing import FloatArray


@dataclass(eq=False)
class Histogram:
    """A 1-D histogram with explicit bin edges.

    Attributes
    ----------
        edges: Bin edges, strictly increasing, length ``n_bins + 1``
        counts: Bin contents, length ``n_bins``
        name: Short identifier (key in a histogram file)
        title: Human-readable title
        entries: Number of fills, including under/overflow
        underflow: Sum of fills below the first edge
        overflow: Sum of fills at or above the last edge
    """

    edges: FloatArray
    counts: FloatArray
    name: str = "h"
    title: str = ""
    entries: float = 0.0
    underflow: float = 0.0
    overflow: float = 0.0
    _uniform: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self.edges = np.asarray(self.edges, dtype=np.float64)
        self.counts = np.asarray(self.counts, dtype=np.float64)

        if self.edges.ndim != 1 or self.counts.ndim != 1:
            msg = "Histogram edges and counts must be one-dimensional"
            raise HistogramError(msg)
        if len(self.edges) != len(self.counts) + 1:
            msg = (
                f"Histogram '{self.name}' needs len(edges) == len(counts) + 1, "
                f"got {len(self.edges)} edges for {len(self.counts)} bins"
            )
            raise HistogramError(msg)
        if len(self.counts) == 0:
            msg = f"Histogram '{self.name}' has no bins"
            raise HistogramError(msg)
        if np.any(np.diff(self.edges) <= 0):
            msg = f"Histogram '{self.name}' edges must be strictly increasing"
            raise HistogramError(msg)

        widths = np.diff(self.edges)
        self._uniform = bool(np.allclose(widths, widths[0]))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def empty(
        cls,
        n_bins: int,
        low: float,
        high: float,
        name: str = "h",
        title: str = "",
    ) -> Histogram:
        """Create an empty histogram with ``n_bins`` uniform bins on ``[low, high)``."""
        if n_bins <= 0:
            msg = f"Number of bins must be positive, got {n_bins}"
            raise HistogramError(msg)
        if high <= low:
            msg = f"Histogram range is empty: [{low}, {high})"
            raise HistogramError(msg)
        edges = np.linspace(low, high, n_bins + 1)
        return cls(edges=edges, counts=np.zeros(n_bins), name=name, title=title)

    @classmethod
    def from_samples(
        cls,
        samples: Iterable[float] | FloatArray,
        n_bins: int,
        low: float,
        high: float,
        name: str = "h",
        title: str = "",
    ) -> Histogram:
        """Create a uniform histogram and fill it with ``samples``."""
        hist = cls.empty(n_bins, low, high, name=name, title=title)
        hist.fill(samples)
        return hist

    # ------------------------------------------------------------------
    # Filling
    # ------------------------------------------------------------------

    def fill(self, values: Iterable[float] | FloatArray | float) -> None:
        """Add one unit-weight entry per value."""
        values = np.atleast_1d(np.asarray(values, dtype=np.float64))
        if values.size == 0:
            return

        below = values < self.edges[0]
        above = values >= self.edges[-1]
        inside = ~(below | above | np.isnan(values))

        if self._uniform:
            idx = ((values[inside] - self.edges[0]) / self.widths[0]).astype(np.int64)
            # Guard against round-off at the upper edge
            np.clip(idx, 0, self.n_bins - 1, out=idx)
        else:
            idx = np.searchsorted(self.edges, values[inside], side="right") - 1

        self.counts += np.bincount(idx, minlength=self.n_bins).astype(np.float64)
        self.underflow += float(np.count_nonzero(below))
        self.overflow += float(np.count_nonzero(above))
        self.entries += float(values.size)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def n_bins(self) -> int:
        return len(self.counts)

    @property
    def low(self) -> float:
        return float(self.edges[0])

    @property
    def high(self) -> float:
        return float(self.edges[-1])

    @property
    def widths(self) -> FloatArray:
        return np.diff(self.edges)

    @property
    def centers(self) -> FloatArray:
        return 0.5 * (self.edges[:-1] + self.edges[1:])

    @property
    def lower_edges(self) -> FloatArray:
        return self.edges[:-1]

    @property
    def upper_edges(self) -> FloatArray:
        return self.edges[1:]

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def integral(self) -> float:
        """Sum of in-range bin contents."""
        return float(self.counts.sum())

    def maximum(self) -> float:
        """Largest bin content."""
        return float(self.counts.max())

    def mean(self) -> float:
        """Bin-center weighted mean of the in-range contents (0 when empty)."""
        total = self.integral()
        if total <= 0:
            return 0.0
        return float(np.dot(self.centers, self.counts) / total)

    def std(self) -> float:
        """Bin-center weighted standard deviation (the histogram RMS)."""
        total = self.integral()
        if total <= 0:
            return 0.0
        mu = self.mean()
        var = float(np.dot((self.centers - mu) ** 2, self.counts) / total)
        return float(np.sqrt(max(var, 0.0)))

    def errors(self) -> FloatArray:
        """Poisson bin errors, sqrt(n)."""
        return np.sqrt(np.clip(self.counts, 0.0, None))

    def nonempty(self) -> np.ndarray:
        """Boolean mask of bins with positive content."""
        return self.counts > 0

    def axis_titles(self) -> tuple[str, str, str]:
        """Split a "title;x label;y label" title into its three parts."""
        return split_title(self.title)

    def copy(self, name: str | None = None) -> Histogram:
        """Return a detached clone, optionally renamed."""
        return Histogram(
            edges=self.edges.copy(),
            counts=self.counts.copy(),
            name=name or self.name,
            title=self.title,
            entries=self.entries,
            underflow=self.underflow,
            overflow=self.overflow,
        )

    def __repr__(self) -> str:
        return (
            f"Histogram(name={self.name!r}, n_bins={self.n_bins}, "
            f"range=[{self.low:g}, {self.high:g}), entries={self.entries:g})"
        )


def split_title(title: str) -> tuple[str, str, str]:
    """Split "main;x label;y label" into (main, x label, y label).

    Missing parts come back as empty strings.
    """
    parts = [*title.split(";", 2), "", ""]
    return parts[0], parts[1], parts[2]


def join_title(title: str, xlabel: str = "", ylabel: str = "") -> str:
    """Inverse of ``split_title``; trailing empty labels are dropped."""
    if ylabel:
        return f"{title};{xlabel};{ylabel}"
    if xlabel:
        return f"{title};{xlabel}"
    return title


__all__ = ["Histogram", "join_title", "split_title"]
