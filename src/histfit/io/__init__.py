"""I/O for HistFit.

Handles file operations including:
- Configuration file loading/saving (TOML)
- ROOT histogram files (uproot)
- Result export (CSV, JSON)
"""

from histfit.io.config import generate_default_config, load_config, save_config
from histfit.io.histograms import read_first_histogram, write_histogram
from histfit.io.results import write_records_csv, write_summary_json

__all__ = [
    "generate_default_config",
    "load_config",
    "read_first_histogram",
    "save_config",
    "write_histogram",
    "write_records_csv",
    "write_summary_json",
]
