"""Command line interface package."""

from pathabbrev.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
