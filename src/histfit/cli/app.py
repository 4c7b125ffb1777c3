"""Main Typer application for HistFit.

Commands live in the ``commands`` subpackage; this module only creates the
application and registers them.
"""

from typing import Annotated

import typer

from histfit.cli.callbacks import version_callback
from histfit.cli.commands import (
    compare_command,
    fit_command,
    generate_command,
    info_command,
    init_command,
    pvalue_command,
    scan_command,
    trials_command,
)

app = typer.Typer(
    name="histfit",
    help="HistFit - Gaussian histogram fitting studies",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """HistFit - generate Gaussian histograms, fit them and test the fits.

    Chi-square and binned-likelihood fits, toy Monte Carlo p-values and
    likelihood/chi-square scans of the mean.
    """


app.command(name="generate")(generate_command)
app.command(name="fit")(fit_command)
app.command(name="trials")(trials_command)
app.command(name="compare")(compare_command)
app.command(name="pvalue")(pvalue_command)
app.command(name="scan")(scan_command)
app.command(name="init")(init_command)
app.command(name="info")(info_command)
