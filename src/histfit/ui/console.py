"""Console configuration and theme for the HistFit terminal UI.

A single themed console is shared by every UI helper so that colors and
quiet mode stay consistent.
"""

import os
import sys

from rich.console import Console
from rich.theme import Theme

try:
    from histfit import __version__ as _PKG_VERSION
except ImportError:
    _PKG_VERSION = "dev"

HISTFIT_THEME = Theme(
    {
        # Status
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "info": "cyan",
        "neutral": "dim white",
        # Structure
        "header": "bold cyan",
        "subheader": "bold white",
        # Values
        "key": "cyan",
        "value": "green",
        "metric": "bold green",
        "number": "green",
        "path": "blue underline",
        "code": "bold magenta",
        # Progress
        "progress.description": "bold white",
        "progress.percentage": "green",
        "progress.remaining": "cyan",
        "progress.elapsed": "dim white",
        "dim": "dim",
        "emphasis": "bold",
    }
)

console = Console(theme=HISTFIT_THEME)

VERSION = _PKG_VERSION


class Verbosity:
    """Verbosity levels for UI output."""

    QUIET = 0  # Errors only
    NORMAL = 1
    VERBOSE = 2  # Also echo log records to the console


_verbosity = Verbosity.NORMAL


def set_verbosity(level: int) -> None:
    """Set the global verbosity level (0=QUIET, 1=NORMAL, 2=VERBOSE)."""
    global _verbosity
    _verbosity = level
    console.quiet = level == Verbosity.QUIET


def get_verbosity() -> int:
    return _verbosity


_EMOJI_DISABLED = os.getenv("HISTFIT_NO_EMOJI", "").lower() in {"1", "true", "yes"}


def _supports_unicode() -> bool:
    if _EMOJI_DISABLED:
        return False
    enc = getattr(console, "encoding", None) or sys.getdefaultencoding()
    return enc is None or "utf" in enc.lower()


def icon(name: str) -> str:
    """Return a status glyph, falling back to ASCII on non-UTF terminals.

    Names: check, warn, error, info, bullet, dot, separator
    """
    fancy = _supports_unicode()
    mapping = {
        "check": "✓" if fancy else "+",
        "warn": "⚠" if fancy else "!",
        "error": "✗" if fancy else "x",
        "info": "▸" if fancy else ">",
        "bullet": "‣" if fancy else "-",
        "dot": "•" if fancy else ".",
        "separator": "━" if fancy else "-",
    }
    return mapping.get(name, mapping["bullet"])


__all__ = [
    "HISTFIT_THEME",
    "VERSION",
    "Verbosity",
    "console",
    "get_verbosity",
    "icon",
    "set_verbosity",
]
