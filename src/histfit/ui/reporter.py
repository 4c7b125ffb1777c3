"""Reporter that prints through the styled HistFit console."""

from __future__ import annotations

from histfit.core.shared.reporter import Reporter
from histfit.ui.messages import action, error, info, success, warning


class ConsoleReporter:
    """Reporter implementation using Rich console output.

    Example:
        >>> reporter = ConsoleReporter()
        >>> reporter.action("Fitting 1000 histograms...")
        >>> reporter.success("Done")
    """

    def action(self, message: str) -> None:
        action(message)

    def info(self, message: str) -> None:
        info(message)

    def warning(self, message: str) -> None:
        warning(message)

    def error(self, message: str) -> None:
        error(message)

    def success(self, message: str) -> None:
        success(message)


if not isinstance(ConsoleReporter(), Reporter):
    raise TypeError("ConsoleReporter must satisfy Reporter protocol")
