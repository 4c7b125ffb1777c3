"""Tabular and JSON export of fit results."""

from __future__ import annotations

import csv
import json
import math
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import numpy as np

from histfit.core.fitting.results import FitRecord

RECORD_FIELDS = (
    "method",
    "amplitude",
    "mean",
    "sigma",
    "reduced_chi2",
    "amplitude_error",
    "mean_error",
    "sigma_error",
    "chi2",
    "ndof",
    "prob",
    "success",
    "nfev",
)


def write_records_csv(records: Iterable[FitRecord], path: Path) -> Path:
    """Write one CSV row per fit record."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RECORD_FIELDS)
        writer.writeheader()
        for record in records:
            writer.writerow(record.as_dict())
    return path


def _to_builtin(obj: Any) -> Any:
    """Recursively convert numpy values and paths into JSON-friendly types."""
    if isinstance(obj, Mapping):
        return {str(k): _to_builtin(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_builtin(v) for v in obj]
    if isinstance(obj, np.ndarray):
        return [_to_builtin(v) for v in obj.tolist()]
    if isinstance(obj, np.generic):
        return _to_builtin(obj.item())
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, float) and not math.isfinite(obj):
        return None
    return obj


def write_summary_json(summary: Mapping[str, Any], path: Path) -> Path:
    """Write a JSON summary; non-finite floats are stored as null."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w") as f:
        json.dump(_to_builtin(summary), f, indent=2)
        f.write("\n")
    return path


__all__ = ["RECORD_FIELDS", "write_records_csv", "write_summary_json"]
