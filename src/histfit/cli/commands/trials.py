"""Trials command implementation."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import TYPE_CHECKING, Annotated, cast

import typer

from histfit.cli._common import (
    ConfigOption,
    LogFileOption,
    MethodOption,
    OutputDirOption,
    QuietOption,
    SeedOption,
    VerboseOption,
    command_reporter,
    command_session,
    progress_task,
)
from histfit.services import StudyService
from histfit.ui import print_summary

if TYPE_CHECKING:
    from histfit.core.domain.config import FitMethod


def trials_command(
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Summary figure (PDF)", dir_okay=False),
    ] = Path("result1.pdf"),
    trials: Annotated[
        int | None,
        typer.Option("--trials", "-t", help="Number of histograms to fit", min=1),
    ] = None,
    entries: Annotated[
        int | None,
        typer.Option("--entries", "-n", help="Entries per histogram", min=0),
    ] = None,
    method: MethodOption = None,
    seed: SeedOption = None,
    config: ConfigOption = None,
    output_dir: OutputDirOption = None,
    log_file: LogFileOption = None,
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Fit many generated histograms and plot the fit-result distributions.

    The figure shows the reduced χ², the fitted mean, the χ² probability and
    the error on the mean across all trials.

    Examples
    --------
      Default study:
        $ histfit trials

      Quick reproducible run:
        $ histfit trials --trials 200 --seed 3
    """
    with command_session(
        "Fit trials", config, seed, output_dir, log_file, verbose, quiet
    ) as run_config:
        if trials is not None:
            run_config.study.trials = trials
        if entries is not None:
            run_config.study.entries = entries
        if method is not None:
            run_config.fitting.method = cast("FitMethod", method)

        service = StudyService(command_reporter())
        with progress_task("Fitting", run_config.study.trials) as advance:
            out = service.run_trials(run_config, output, progress=advance)

        summary = out.summary
        if summary["n_fits"]:
            print_summary(
                {
                    "Fits": summary["n_fits"],
                    "Converged": summary["n_converged"],
                    "Mean of fitted means": f"{summary['mean_average']:.4f}",
                    "Spread of fitted means": f"{summary['mean_spread']:.4f}",
                    "Average error on mean": f"{summary['mean_error_average']:.4f}",
                    "Average χ²/ndf": f"{summary['reduced_chi2_average']:.4f}",
                },
                title="Trial study",
            )
