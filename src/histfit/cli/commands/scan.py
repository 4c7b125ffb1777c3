"""Scan command implementation."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

from histfit.cli._common import (
    ConfigOption,
    LogFileOption,
    OutputDirOption,
    QuietOption,
    VerboseOption,
    command_reporter,
    command_session,
)
from histfit.services import ScanService
from histfit.services.scan import DEFAULT_CHI2_PDF, DEFAULT_NLL_PDF


def scan_command(
    infile: Annotated[
        Path,
        typer.Argument(help="ROOT file; its first 1-D histogram is scanned", dir_okay=False),
    ] = Path("histo1k.root"),
    nll_output: Annotated[
        str,
        typer.Option("--nll-output", help="File name of the -2ΔlnL scan figure"),
    ] = DEFAULT_NLL_PDF,
    chi2_output: Annotated[
        str,
        typer.Option("--chi2-output", help="File name of the χ² scan figure"),
    ] = DEFAULT_CHI2_PDF,
    center: Annotated[
        float | None,
        typer.Option("--center", help="Center of the χ² scan (default: from config)"),
    ] = None,
    points: Annotated[
        int | None,
        typer.Option("--points", help="Number of scan points", min=2),
    ] = None,
    config: ConfigOption = None,
    output_dir: OutputDirOption = None,
    log_file: LogFileOption = None,
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Scan the NLL and χ² of a stored histogram against the Gaussian mean.

    The model starts from the histogram's maximum, mean and standard
    deviation; only the mean is varied and no fit is performed.

    Examples
    --------
      $ histfit scan histo1k.root --output-dir plots
    """
    with command_session(
        "Mean scans", config, None, output_dir, log_file, verbose, quiet
    ) as run_config:
        if center is not None:
            run_config.scan.chi2_center = center
        if points is not None:
            run_config.scan.n_points = points

        ScanService(command_reporter()).run(
            infile,
            config=run_config,
            nll_name=nll_output,
            chi2_name=chi2_output,
        )
