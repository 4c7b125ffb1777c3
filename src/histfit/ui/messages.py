"""Status lines printed to the terminal (and mirrored to the session log)."""

from __future__ import annotations

from histfit.ui.console import console, icon
from histfit.ui.logging import log, log_section


def show_header(text: str, do_log: bool = True) -> None:
    """Display a prominent section header."""
    rule = icon("separator") * 60
    console.print(f"[header]{rule}[/header]")
    console.print(f"[header]  {text}[/header]")
    console.print(f"[header]{rule}[/header]")
    if do_log:
        log_section(text)


def success(message: str, indent: int = 0, do_log: bool = True) -> None:
    spaces = "  " * indent
    console.print(f"{spaces}[success]{icon('check')}[/success] {message}")
    if do_log:
        log(message)


def warning(message: str, indent: int = 0, do_log: bool = True) -> None:
    spaces = "  " * indent
    console.print(f"{spaces}[warning]{icon('warn')}[/warning]  {message}")
    if do_log:
        log(message, level="warning")


def error(message: str, indent: int = 0, do_log: bool = True) -> None:
    spaces = "  " * indent
    # Errors must stay visible in quiet mode
    quiet, console.quiet = console.quiet, False
    try:
        console.print(f"{spaces}[error]{icon('error')}[/error] {message}")
    finally:
        console.quiet = quiet
    if do_log:
        log(message, level="error")


def info(message: str, indent: int = 0, do_log: bool = True) -> None:
    spaces = "  " * indent
    console.print(f"{spaces}[dim]{icon('info')}[/dim] {message}")
    if do_log:
        log(message)


def action(message: str) -> None:
    """Display an action message with a blank line before it."""
    console.print(f"\n[bold yellow]{icon('dot')}[/bold yellow] {message}")
    log(message)


def bullet(message: str, indent: int = 1) -> None:
    spaces = "  " * indent
    console.print(f"{spaces}[cyan]{icon('bullet')}[/cyan] {message}")


def print_next_steps(steps: list[str]) -> None:
    """Print numbered follow-up suggestions."""
    console.print("\n[header]Next steps:[/header]")
    for i, step in enumerate(steps, 1):
        console.print(f"  {i}. {step}")
    console.print()


__all__ = [
    "action",
    "bullet",
    "error",
    "info",
    "print_next_steps",
    "show_header",
    "success",
    "warning",
]
