"""Progress bars for long trial and toy loops."""

from __future__ import annotations

from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)

from histfit.ui.console import console, icon


def create_progress(transient: bool = False) -> Progress:
    """Create a progress bar with the standard HistFit columns.

    Args:
        transient: Remove the bar from the terminal once finished
    """
    return Progress(
        SpinnerColumn(finished_text=f"[success]{icon('check')}[/success]", spinner_name="dots"),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(complete_style="cyan", finished_style="green"),
        TaskProgressColumn(),
        MofNCompleteColumn(),
        TextColumn(f"[dim]{icon('dot')}[/dim]"),
        TimeElapsedColumn(),
        TimeRemainingColumn(),
        console=console,
        transient=transient,
    )


__all__ = ["create_progress"]
