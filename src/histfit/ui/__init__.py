"""Terminal UI for HistFit.

Submodules:
- console: Theme, console instance and verbosity
- logging: Session log files
- messages: Status lines (success, warning, error, ...)
- tables: Summary and parameter tables
- progress: Progress bars
- reporter: Console implementation of the Reporter protocol
"""

from histfit.ui.console import (
    HISTFIT_THEME,
    VERSION,
    Verbosity,
    console,
    get_verbosity,
    icon,
    set_verbosity,
)
from histfit.ui.logging import close_logging, log, log_dict, log_section, setup_logging
from histfit.ui.messages import (
    action,
    bullet,
    error,
    info,
    print_next_steps,
    show_header,
    success,
    warning,
)
from histfit.ui.progress import create_progress
from histfit.ui.reporter import ConsoleReporter
from histfit.ui.tables import create_table, print_fit_table, print_summary

__all__ = [
    "HISTFIT_THEME",
    "VERSION",
    "ConsoleReporter",
    "Verbosity",
    "action",
    "bullet",
    "close_logging",
    "console",
    "create_progress",
    "create_table",
    "error",
    "get_verbosity",
    "icon",
    "info",
    "log",
    "log_dict",
    "log_section",
    "print_fit_table",
    "print_next_steps",
    "print_summary",
    "set_verbosity",
    "setup_logging",
    "show_header",
    "success",
    "warning",
]
