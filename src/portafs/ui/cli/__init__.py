"""Command line interface package."""

from portafs.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
