"""Init command implementation."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

from histfit.io.config import generate_default_config
from histfit.ui import bullet, console, error, info, print_next_steps, success


def init_command(
    path: Annotated[
        Path,
        typer.Argument(help="Path for new configuration file", dir_okay=False),
    ] = Path("histfit.toml"),
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Generate a default configuration file.

    Examples
    --------
      Create default config:
        $ histfit init

      Overwrite existing config:
        $ histfit init --force
    """
    if path.exists() and not force:
        error(f"File already exists: [path]{path}[/path]")
        info("Use [code]--force[/code] to overwrite")
        raise typer.Exit(1)

    path.write_text(generate_default_config())
    success(f"Created configuration file: [path]{path}[/path]")

    console.print("\n[header]Configuration includes:[/header]")
    bullet("[value]generation[/value] (Gaussian mean, width and binning)")
    bullet("[value]fitting[/value] (chi2 or likelihood, bin-center or bin-average model)")
    bullet("[value]study[/value], [value]toys[/value], [value]scan[/value] (sizes and seeds)")
    bullet("[value]output[/value] (directory, CSV/JSON export, log format)")

    print_next_steps(
        [
            f"Review and customize: [code]{path}[/code]",
            f"Run a study: [code]histfit trials --config {path}[/code]",
        ]
    )
