"""CLI command modules for HistFit.

Each module exports one command function; ``histfit.cli.app`` registers
them with the Typer application.
"""

from histfit.cli.commands.compare import compare_command
from histfit.cli.commands.fit import fit_command
from histfit.cli.commands.generate import generate_command
from histfit.cli.commands.info import info_command
from histfit.cli.commands.init import init_command
from histfit.cli.commands.pvalue import pvalue_command
from histfit.cli.commands.scan import scan_command
from histfit.cli.commands.trials import trials_command

__all__ = [
    "compare_command",
    "fit_command",
    "generate_command",
    "info_command",
    "init_command",
    "pvalue_command",
    "scan_command",
    "trials_command",
]
