"""Generate command implementation."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

from histfit.cli._common import (
    ConfigOption,
    LogFileOption,
    QuietOption,
    SeedOption,
    VerboseOption,
    command_reporter,
    command_session,
)
from histfit.services import GenerateService
from histfit.ui import print_next_steps, print_summary


def generate_command(
    output: Annotated[
        Path,
        typer.Argument(help="ROOT file to write (replaced if it exists)", dir_okay=False),
    ] = Path("histo.root"),
    entries: Annotated[
        int | None,
        typer.Option(
            "--entries", "-n", help="Number of Gaussian draws (default: study.entries)", min=0
        ),
    ] = None,
    name: Annotated[
        str,
        typer.Option("--name", help="Histogram name inside the file"),
    ] = "randomHist1",
    seed: SeedOption = None,
    config: ConfigOption = None,
    log_file: LogFileOption = None,
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Fill a histogram with Gaussian random numbers and save it.

    The mean, width and binning come from the [generation] section of the
    configuration (default: N(50, 10) in 100 bins on [0, 100)).

    Examples
    --------
      Default histogram of 1000 entries:
        $ histfit generate

      Reproducible 25-entry sample:
        $ histfit generate histo25.root --entries 25 --seed 1
    """
    with command_session(
        "Generate histogram", config, seed, None, log_file, verbose, quiet
    ) as run_config:
        hist = GenerateService(command_reporter()).generate(
            output,
            run_config.study.entries if entries is None else entries,
            seed=run_config.study.seed,
            generation=run_config.generation,
            name=name,
        )
        print_summary(
            {
                "Entries": f"{hist.entries:g}",
                "In range": f"{hist.integral():g}",
                "Mean": f"{hist.mean():.4f}",
                "Std Dev": f"{hist.std():.4f}",
            },
            title=f"Histogram '{hist.name}'",
        )
        print_next_steps([f"Fit it: [code]histfit fit {output}[/code]"])
