"""Options and session handling shared by the HistFit commands."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, get_args

import click
import typer

from histfit.core.domain.config import FitMethod, HistFitConfig
from histfit.core.shared.exceptions import HistFitError
from histfit.core.shared.reporter import LoggingReporter, Reporter
from histfit.io.config import load_config
from histfit.ui import (
    ConsoleReporter,
    Verbosity,
    close_logging,
    create_progress,
    error,
    get_verbosity,
    log,
    log_dict,
    set_verbosity,
    setup_logging,
    show_header,
)

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to TOML configuration file",
        dir_okay=False,
    ),
]
SeedOption = Annotated[
    int | None,
    typer.Option("--seed", "-s", help="Random seed (default: fresh entropy)", min=0),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write a session log (JSON lines if the name ends in .json)",
        dir_okay=False,
    ),
]
OutputDirOption = Annotated[
    Path | None,
    typer.Option(
        "--output-dir",
        "-d",
        help="Directory for generated files (default: config or current directory)",
        file_okay=False,
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Echo log records to the terminal"),
]
MethodOption = Annotated[
    str | None,
    typer.Option(
        "--method",
        "-m",
        help="chi2 or likelihood (default: from config)",
        click_type=click.Choice(get_args(FitMethod)),
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Only print errors"),
]


def load_run_config(
    config: Path | None,
    seed: int | None = None,
    output_dir: Path | None = None,
) -> HistFitConfig:
    """Load the configuration file (or defaults) and apply CLI overrides."""
    run_config = load_config(config) if config is not None else HistFitConfig()
    if seed is not None:
        run_config.study.seed = seed
        run_config.toys.seed = seed
    if output_dir is not None:
        run_config.output.directory = output_dir
    return run_config


_HANDLED_ERRORS = (HistFitError, OSError, ValueError)


@contextmanager
def command_session(
    title: str,
    config: Path | None = None,
    seed: int | None = None,
    output_dir: Path | None = None,
    log_file: Path | None = None,
    verbose: bool = False,
    quiet: bool = False,
) -> Iterator[HistFitConfig]:
    """Load the run configuration and set up verbosity and logging around a command.

    Library errors (unreadable files, failed fits, invalid configuration) are
    reported as a single error line and turned into exit code 1.
    """
    if quiet:
        set_verbosity(Verbosity.QUIET)
    else:
        set_verbosity(Verbosity.VERBOSE if verbose else Verbosity.NORMAL)

    try:
        run_config = load_run_config(config, seed, output_dir)
    except _HANDLED_ERRORS as e:
        error(f"Invalid configuration: {e}")
        raise typer.Exit(code=1) from e

    setup_logging(log_file, verbose=verbose, log_format=run_config.output.log_format)
    show_header(title)
    log_config(run_config)
    try:
        yield run_config
    except _HANDLED_ERRORS as e:
        error(str(e))
        raise typer.Exit(code=1) from e
    finally:
        close_logging()


def log_config(run_config: HistFitConfig) -> None:
    """Write the effective configuration to the session log."""
    for section, values in run_config.model_dump(mode="json").items():
        log(f"[{section}]")
        log_dict(values)


def command_reporter() -> Reporter:
    """Console reporter, or a log-only reporter when running with --quiet."""
    if get_verbosity() == Verbosity.QUIET:
        return LoggingReporter()
    return ConsoleReporter()


@contextmanager
def progress_task(description: str, total: int) -> Iterator[Callable[[int], None]]:
    """Transient progress bar; yields a callback taking the completed count."""
    with create_progress(transient=True) as progress:
        task = progress.add_task(description, total=total)

        def advance(completed: int) -> None:
            progress.update(task, completed=completed)

        yield advance


__all__ = [
    "ConfigOption",
    "LogFileOption",
    "MethodOption",
    "OutputDirOption",
    "QuietOption",
    "SeedOption",
    "VerboseOption",
    "command_reporter",
    "command_session",
    "load_run_config",
    "log_config",
    "progress_task",
]
