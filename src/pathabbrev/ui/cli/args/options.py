"""Command line argument options."""

from dataclasses import dataclass
from typing import final

from pathabbrev.features.colorize import EscapeMode


@final
@dataclass(slots=True, frozen=True)
class AbbreviateArgs:
    """Resolved options for one run, after config file and defaults are applied."""

    paths: tuple[str, ...]
    project_files: tuple[str, ...]
    env_roots: tuple[str, ...]
    home_dirs: tuple[str, ...]
    color: str
    prompt_escape: EscapeMode
    abbreviate: bool
    verbose: bool = False
    quiet: bool = False


__all__ = ["AbbreviateArgs"]
