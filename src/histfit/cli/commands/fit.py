"""Fit command implementation."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import TYPE_CHECKING, Annotated, cast

import typer

from histfit.cli._common import (
    ConfigOption,
    LogFileOption,
    MethodOption,
    QuietOption,
    VerboseOption,
    command_reporter,
    command_session,
)
from histfit.core.models.gaussian import PARAMETER_NAMES
from histfit.services import FitFileService
from histfit.ui import print_fit_table, print_summary

if TYPE_CHECKING:
    from histfit.core.domain.config import FitMethod


def fit_command(
    infile: Annotated[
        Path,
        typer.Argument(help="ROOT file; its first 1-D histogram is fitted", dir_okay=False),
    ] = Path("histo.root"),
    method: MethodOption = None,
    integral: Annotated[
        bool | None,
        typer.Option(
            "--integral/--no-integral",
            help="Compare bin contents to the bin-averaged model",
        ),
    ] = None,
    config: ConfigOption = None,
    log_file: LogFileOption = None,
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Fit a Gaussian to the first histogram of a ROOT file.

    Examples
    --------
      Chi-square fit:
        $ histfit fit histo.root

      Binned likelihood fit:
        $ histfit fit histo25.root --method likelihood
    """
    with command_session(
        "Gaussian fit", config, None, None, log_file, verbose, quiet
    ) as run_config:
        if method is not None:
            run_config.fitting.method = cast("FitMethod", method)
        if integral is not None:
            run_config.fitting.integral = integral

        record = FitFileService(command_reporter()).fit(
            infile,
            method=run_config.fitting.method,
            integral=run_config.fitting.integral,
        )
        print_fit_table(
            [
                (name, value, err)
                for name, value, err in zip(
                    PARAMETER_NAMES, record.params[:3], record.errors, strict=True
                )
            ]
        )
        print_summary(
            {
                "Method": record.method,
                "χ²": f"{record.chi2:.4f}",
                "ndf": f"{record.ndof:g}",
                "χ²/ndf": f"{record.reduced_chi2:.4f}",
                "Prob": f"{record.prob:.4f}",
                "Converged": "yes" if record.success else "no",
            },
            title="Goodness of fit",
        )
