"""Compare command implementation."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

from histfit.cli._common import (
    ConfigOption,
    LogFileOption,
    OutputDirOption,
    QuietOption,
    SeedOption,
    VerboseOption,
    command_reporter,
    command_session,
    progress_task,
)
from histfit.services import StudyService
from histfit.ui import create_table, console


def compare_command(
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Comparison figure (PDF)", dir_okay=False),
    ] = Path("result2.pdf"),
    trials: Annotated[
        int | None,
        typer.Option("--trials", "-t", help="Number of histograms per method", min=1),
    ] = None,
    entries: Annotated[
        int | None,
        typer.Option("--entries", "-n", help="Entries per histogram", min=0),
    ] = None,
    seed: SeedOption = None,
    config: ConfigOption = None,
    output_dir: OutputDirOption = None,
    log_file: LogFileOption = None,
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Compare χ² and likelihood fits on low-statistics histograms.

    Each trial fits one fresh histogram by χ² and another by binned
    likelihood; the fitted means of both methods are drawn side by side.

    Examples
    --------
      $ histfit compare --trials 500 --entries 10
    """
    with command_session(
        "Method comparison", config, seed, output_dir, log_file, verbose, quiet
    ) as run_config:
        if trials is not None:
            run_config.study.compare_trials = trials
        if entries is not None:
            run_config.study.compare_entries = entries

        service = StudyService(command_reporter())
        with progress_task("Fitting", run_config.study.compare_trials) as advance:
            out = service.compare_methods(run_config, output, progress=advance)

        table = create_table("Fitted means")
        table.add_column("Method", style="key")
        table.add_column("Fits", justify="right")
        table.add_column("Average", style="number", justify="right")
        table.add_column("Spread", style="number", justify="right")
        for label in ("chi2", "likelihood"):
            part = out.summary[label]
            if part["n_fits"]:
                table.add_row(
                    label,
                    str(part["n_fits"]),
                    f"{part['mean_average']:.4f}",
                    f"{part['mean_spread']:.4f}",
                )
            else:
                table.add_row(label, "0", "-", "-")
        console.print(table)
