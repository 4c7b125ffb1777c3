"""Reading and writing ROOT histogram files with uproot."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import uproot
from uproot.writing import to_TH1x
from uproot.writing.identify import to_TAxis

from histfit.core.domain.histogram import Histogram, join_title
from histfit.core.shared.exceptions import DataIOError, HistogramNotFoundError

logger = logging.getLogger(__name__)


def _member(obj: object, name: str, default: object = None) -> object:
    try:
        return obj.member(name)  # type: ignore[attr-defined]
    except (KeyError, AttributeError):
        return default


def _to_histogram(obj: object, fallback_name: str) -> Histogram:
    """Convert an uproot TH1 model to a ``Histogram``."""
    counts, edges = obj.to_numpy(flow=False)  # type: ignore[attr-defined]
    flow = np.asarray(obj.values(flow=True), dtype=np.float64)  # type: ignore[attr-defined]

    name = str(_member(obj, "fName", fallback_name) or fallback_name)
    title = str(_member(obj, "fTitle", "") or "")
    xaxis = _member(obj, "fXaxis")
    yaxis = _member(obj, "fYaxis")
    xlabel = str(_member(xaxis, "fTitle", "") or "") if xaxis is not None else ""
    ylabel = str(_member(yaxis, "fTitle", "") or "") if yaxis is not None else ""

    counts = np.asarray(counts, dtype=np.float64)
    entries = float(_member(obj, "fEntries", counts.sum()))

    return Histogram(
        edges=np.asarray(edges, dtype=np.float64),
        counts=counts,
        name=name,
        title=join_title(title, xlabel, ylabel),
        entries=entries,
        underflow=float(flow[0]),
        overflow=float(flow[-1]),
    )


def read_first_histogram(path: Path | str) -> Histogram:
    """Return the first 1-D histogram (TH1 subclass) stored at the top of a ROOT file.

    Raises
    ------
        DataIOError: If the file cannot be opened or read
        HistogramNotFoundError: If the file holds no TH1
    """
    path = Path(path)
    try:
        with uproot.open(path) as f:
            for key, classname in f.classnames(recursive=False).items():
                if not classname.startswith("TH1"):
                    continue
                logger.debug("Reading %s (%s) from %s", key, classname, path)
                return _to_histogram(f[key], fallback_name=key.split(";")[0])
    except (OSError, ValueError, uproot.deserialization.DeserializationError) as e:
        msg = f"cannot open file {path}: {e}"
        raise DataIOError(msg) from e

    msg = f"no TH1 found in {path}"
    raise HistogramNotFoundError(msg)


def write_histogram(path: Path | str, hist: Histogram) -> Path:
    """Write ``hist`` to a new ROOT file (existing files are replaced).

    The histogram is stored as a TH1D under its own name, with title and
    axis labels, entries, flow bins and the sums needed for ROOT's
    mean/RMS statistics.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    title, xlabel, ylabel = hist.axis_titles()
    centers = hist.centers
    counts = hist.counts
    data = np.concatenate([[hist.underflow], counts, [hist.overflow]]).astype(np.float64)

    widths = hist.widths
    uniform = bool(np.allclose(widths, widths[0]))
    xaxis = to_TAxis(
        fName="xaxis",
        fTitle=xlabel,
        fNbins=hist.n_bins,
        fXmin=hist.low,
        fXmax=hist.high,
        fXbins=None if uniform else hist.edges.copy(),
    )
    yaxis = to_TAxis(fName="yaxis", fTitle=ylabel, fNbins=1, fXmin=0.0, fXmax=1.0)

    th1 = to_TH1x(
        fName=hist.name,
        fTitle=title,
        data=data,
        fEntries=float(hist.entries),
        fTsumw=float(counts.sum()),
        fTsumw2=float(counts.sum()),
        fTsumwx=float(np.dot(counts, centers)),
        fTsumwx2=float(np.dot(counts, centers**2)),
        fSumw2=data.copy(),
        fXaxis=xaxis,
        fYaxis=yaxis,
    )

    try:
        with uproot.recreate(path) as f:
            f[hist.name] = th1
    except OSError as e:
        msg = f"cannot write file {path}: {e}"
        raise DataIOError(msg) from e

    logger.debug("Wrote %r to %s", hist, path)
    return path


__all__ = ["read_first_histogram", "write_histogram"]
