"""Command execution package for CLI."""

from pathabbrev.ui.cli.commands.abbreviate import AbbreviateCommand

__all__ = ["AbbreviateCommand"]
