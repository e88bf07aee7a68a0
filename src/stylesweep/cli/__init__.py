"""Command-line interface."""

from stylesweep.cli.main import cli

__all__ = ["cli"]
