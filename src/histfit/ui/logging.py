"""Session log files for HistFit runs.

The library modules log through ``logging.getLogger(__name__)``; this module
attaches a file handler (plain text or JSON lines) to the ``histfit`` logger
for the duration of a CLI command.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from rich.logging import RichHandler

from histfit.ui.console import VERSION, console

_logger: logging.Logger | None = None

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_record)


def setup_logging(
    log_file: Path | None = None,
    verbose: bool = False,
    level: int = logging.INFO,
    log_format: str = "text",
) -> None:
    """Configure the ``histfit`` logger.

    Args:
        log_file: Destination file; nothing is logged to file when None
        verbose: Also echo records to the console through Rich
        level: Logging level for all handlers
        log_format: "text" or "json"; a ``.json`` suffix also selects JSON
    """
    global _logger

    if log_file is None and not verbose:
        _logger = None
        return

    _logger = logging.getLogger("histfit")
    _logger.setLevel(level)
    for handler in _logger.handlers[:]:
        handler.close()
        _logger.removeHandler(handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setLevel(level)
        if log_format == "json" or log_file.suffix == ".json":
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        _logger.addHandler(file_handler)

    if verbose:
        console_handler = RichHandler(console=console, show_time=False, show_path=False)
        console_handler.setLevel(level)
        _logger.addHandler(console_handler)

    _logger.info("HistFit v%s session started", VERSION)
    _logger.info("Command: %s", " ".join(sys.argv))
    _logger.info("Working directory: %s", Path.cwd())
    _logger.info("Python: %s | Platform: %s", sys.version.split()[0], sys.platform)


def log(message: str, level: str = "info") -> None:
    """Log a message if a session log is active."""
    if _logger is None:
        return
    _logger.log(_LEVELS.get(level.lower(), logging.INFO), message)


def log_section(title: str) -> None:
    if _logger is None:
        return
    _logger.info("=== %s ===", title.upper())


def log_dict(data: dict[str, object], indent: str = "  ") -> None:
    """Log key/value pairs, one per line."""
    if _logger is None:
        return
    for key, value in data.items():
        _logger.info("%s- %s: %s", indent, key, value)


def close_logging() -> None:
    """Finish the session log and detach its handlers."""
    global _logger
    if _logger is None:
        return

    _logger.info("HistFit session completed")
    for handler in _logger.handlers[:]:
        handler.close()
        _logger.removeHandler(handler)
    _logger = None


__all__ = ["JSONFormatter", "close_logging", "log", "log_dict", "log_section", "setup_logging"]
