"""Command-line interface for HistFit."""

from histfit.cli.app import app

__all__ = ["app"]
