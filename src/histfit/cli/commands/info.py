"""Info command implementation."""

from __future__ import annotations

import sys

import matplotlib
import numpy as np
import scipy
import uproot

from histfit.ui import print_summary


def info_command() -> None:
    """Show versions of HistFit and its numerical stack."""
    from histfit import __version__

    print_summary(
        {
            "HistFit": __version__,
            "Python": sys.version.split()[0],
            "NumPy": np.__version__,
            "SciPy": scipy.__version__,
            "Matplotlib": matplotlib.__version__,
            "uproot": uproot.__version__,
        },
        title="HistFit System Information",
    )
