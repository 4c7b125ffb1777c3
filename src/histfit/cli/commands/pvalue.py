"""P-value command implementation."""

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
from histfit.services import GoodnessOfFitService
from histfit.ui import print_summary


def pvalue_command(
    infile: Annotated[
        Path,
        typer.Argument(help="ROOT file; its first 1-D histogram is tested", dir_okay=False),
    ] = Path("histo25.root"),
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Toy NLL figure (PDF)", dir_okay=False),
    ] = Path("result3.pdf"),
    toys: Annotated[
        int | None,
        typer.Option("--toys", "-t", help="Number of Poisson pseudo-experiments", min=1),
    ] = None,
    integral: Annotated[
        bool | None,
        typer.Option(
            "--integral/--no-integral",
            help="Fit with the bin-averaged model",
        ),
    ] = None,
    seed: SeedOption = None,
    config: ConfigOption = None,
    output_dir: OutputDirOption = None,
    log_file: LogFileOption = None,
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Goodness of fit of a Gaussian by toy Monte Carlo.

    The histogram is fitted by binned likelihood, Poisson toys are thrown
    from the fitted model, and the p-value is the fraction of toys whose
    NLL is at least the data's.

    Examples
    --------
      $ histfit pvalue histo25.root --toys 10000 --seed 7
    """
    with command_session(
        "Toy Monte Carlo p-value", config, seed, output_dir, log_file, verbose, quiet
    ) as run_config:
        if toys is not None:
            run_config.toys.n_toys = toys
        if integral is not None:
            run_config.fitting.integral = integral

        service = GoodnessOfFitService(command_reporter())
        with progress_task("Toys", run_config.toys.n_toys) as advance:
            out = service.run(
                infile,
                output,
                run_config.toys.n_toys,
                run_config.toys.seed,
                integral=run_config.fitting.integral,
                output=run_config.output,
                progress=advance,
            )

        result = out.result
        print_summary(
            {
                "Fitted mean": f"{result.fit.mean:.4f} ± {result.mean_error:.4f}",
                "Data NLL": f"{result.nll_data:.4f}",
                "Toys with NLL ≥ data": f"{result.n_greater_equal} / {result.n_toys}",
                "p-value (toys)": f"{result.pvalue:.4f}",
                "p-value (asymptotic)": f"{result.asymptotic_pvalue:.4f}",
            },
            title="Goodness of fit",
        )
