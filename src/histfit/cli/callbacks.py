"""Typer callbacks for the HistFit CLI."""

import typer

from histfit.ui import console


def version_callback(value: bool | None) -> None:
    """Print the version and exit."""
    if value:
        from histfit import __version__

        console.print(f"HistFit [value]{__version__}[/value]")
        raise typer.Exit
