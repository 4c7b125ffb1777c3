"""Rich tables with the HistFit styling."""

from __future__ import annotations

from typing import Any

from rich import box
from rich.table import Table

from histfit.ui.console import console


def create_table(title: str | None = None, show_header: bool = True) -> Table:
    """Create a table with the standard box, header and border styles."""
    return Table(
        title=title,
        title_style="header" if title else None,
        box=box.ROUNDED,
        show_header=show_header,
        header_style="bold cyan",
        border_style="dim",
    )


def print_summary(items: dict[str, Any], title: str = "Summary") -> None:
    """Print a two-column key/value table."""
    table = create_table(title, show_header=False)
    table.add_column("Item", style="key")
    table.add_column("Value", style="value")
    for key, value in items.items():
        table.add_row(key, str(value))
    console.print(table)


def print_fit_table(rows: list[tuple[str, float, float]], title: str = "Fit parameters") -> None:
    """Print (name, value, error) rows."""
    table = create_table(title)
    table.add_column("Parameter", style="key")
    table.add_column("Value", style="number", justify="right")
    table.add_column("Error", style="number", justify="right")
    for name, value, err in rows:
        table.add_row(name, f"{value:.6g}", f"{err:.3g}")
    console.print(table)


__all__ = ["create_table", "print_fit_table", "print_summary"]
