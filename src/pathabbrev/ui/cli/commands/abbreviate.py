"""src/pathabbrev/ui/cli/commands/abbreviate.py
What: Build the abbreviation policy from resolved options and print each path.
Why: Keep environment lookup and output wiring out of the feature packages.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import TextIO, final

from pathabbrev.features.abbreviation import (
    LocalFilesystemAdapter,
    PathAbbreviationPolicy,
    PathAbbreviator,
    RootRegistry,
)
from pathabbrev.features.colorize import Colorizer, RichStyleResolver
from pathabbrev.ui.cli.args.options import AbbreviateArgs


@final
class AbbreviateCommand:
    """Command that abbreviates every path argument, one output line each."""

    def __init__(
        self,
        args: AbbreviateArgs,
        environ: Mapping[str, str] | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.args = args
        self.stream = stream if stream is not None else sys.stdout
        self.policy = self.build_policy(args, environ)
        self.abbreviator = PathAbbreviator(self.policy, LocalFilesystemAdapter())

    @staticmethod
    def build_policy(
        args: AbbreviateArgs,
        environ: Mapping[str, str] | None = None,
    ) -> PathAbbreviationPolicy:
        """Create the run's policy; environment roots are resolved here, once."""

        return PathAbbreviationPolicy(
            roots=RootRegistry.from_environment(args.env_roots, args.home_dirs, environ),
            project_markers=args.project_files,
            abbreviate=args.abbreviate,
            colorizer=Colorizer.from_spec(args.color, RichStyleResolver(), args.prompt_escape),
        )

    def execute(self) -> list[str]:
        """Execute the command.

        Returns:
            list[str]: Abbreviated paths in argument order.
        """
        results: list[str] = []
        # Raw writes: the lines may already carry control sequences.
        for line in self.abbreviator.shorten_all(self.args.paths):
            _ = self.stream.write(f"{line}\n")
            results.append(line)
        self.stream.flush()
        return results
