"""Command line argument handling package."""

from pathabbrev.ui.cli.args.options import AbbreviateArgs
from pathabbrev.ui.cli.args.parser import ArgumentParser

__all__ = ["AbbreviateArgs", "ArgumentParser"]
