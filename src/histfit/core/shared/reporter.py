"""Status reporting abstraction.

Core code and services report what they are doing through a ``Reporter``
so they never import the Rich-based UI directly:

    - ``NullReporter`` discards everything (tests, batch use)
    - ``LoggingReporter`` forwards to the ``histfit`` logger
    - ``ConsoleReporter`` (in ``histfit.ui``) prints to the styled console
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable


@runtime_checkable
class Reporter(Protocol):
    """Protocol for progress and status reporting.

    Messages are plain strings; styling is left to the implementation.
    """

    def action(self, message: str) -> None:
        """Report an operation that is starting (e.g. 'Running 1000 toys...')."""
        ...

    def info(self, message: str) -> None:
        """Report a neutral status update."""
        ...

    def warning(self, message: str) -> None:
        """Report a non-fatal problem."""
        ...

    def error(self, message: str) -> None:
        """Report an error that does not stop execution by itself."""
        ...

    def success(self, message: str) -> None:
        """Report that an operation completed."""
        ...


class NullReporter:
    """Reporter that drops every message."""

    def action(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass


class LoggingReporter:
    """Reporter for quiet runs: status lines go to the session log only.

    Actions and successes are tagged so they stand out in a log file.
    """

    def __init__(self, logger_name: str = "histfit") -> None:
        self._logger = logging.getLogger(logger_name)

    def action(self, message: str) -> None:
        self._logger.info("[ACTION] %s", message)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def success(self, message: str) -> None:
        self._logger.info("[SUCCESS] %s", message)


__all__ = ["LoggingReporter", "NullReporter", "Reporter"]
