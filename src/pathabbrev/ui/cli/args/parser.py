"""Command line argument parser."""

import argparse
import logging
import os
import sys
from collections.abc import Mapping, Sequence
from typing import TypeVar, final

from pathabbrev.config import (
    DEFAULT_COLOR_SPEC,
    DEFAULT_ENV_ROOTS,
    DEFAULT_PROJECT_FILES,
    DEFAULT_PROMPT_ESCAPE,
    Config,
)
from pathabbrev.features.colorize import EscapeMode
from pathabbrev.platform.logging import logger, setup_logger
from pathabbrev.shared import split_list
from pathabbrev.ui.cli.args.options import AbbreviateArgs

_T = TypeVar("_T")


def _first_set(*candidates: _T | None, default: _T) -> _T:
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return default


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="pathabbrev",
            description="Abbreviate directory paths for display in a shell prompt.",
            epilog=(
                "Options not given on the command line are read from the config file "
                "($PATHABBREV_CONFIG or ~/.config/pathabbrev/config.toml)."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "paths",
            nargs="*",
            help="Directory paths to abbreviate",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "--project-files",
            type=str,
            help=(
                "Files/directories that indicate a repository root when present "
                f"(default: {','.join(DEFAULT_PROJECT_FILES)})"
            ),
            metavar="LIST",
        )
        _ = parser.add_argument(
            "--home",
            type=str,
            help=(
                'Directories to abbreviate as "~", comma-separated; the first match '
                "wins (default: $HOME)"
            ),
            metavar="LIST",
        )
        _ = parser.add_argument(
            "--env-roots",
            type=str,
            help=(
                "Environment variables naming directories to abbreviate as $NAME "
                f"(default: {','.join(DEFAULT_ENV_ROOTS)})"
            ),
            metavar="LIST",
        )
        _ = parser.add_argument(
            "--color",
            type=str,
            help=(
                "Color attributes as role=ATTR pairs for the roles root, project, "
                f"separator, ellipsis and default (default: {DEFAULT_COLOR_SPEC})"
            ),
            metavar="SPEC",
        )
        escape_group = parser.add_mutually_exclusive_group()
        _ = escape_group.add_argument(
            "--prompt-escape",
            type=str,
            choices=[mode.value for mode in EscapeMode],
            help="Wrap color sequences in zero-width markers for zsh or bash prompts",
        )
        _ = escape_group.add_argument(
            "--zsh-escape-color",
            dest="prompt_escape",
            action="store_const",
            const=EscapeMode.ZSH.value,
            help="Same as --prompt-escape zsh",
        )
        _ = parser.add_argument(
            "--abbrev",
            dest="abbreviate",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Collapse intermediate directories where possible (default: on)",
        )
        verbosity_group = parser.add_mutually_exclusive_group()
        _ = verbosity_group.add_argument(
            "--verbose",
            action="store_true",
            help="Log diagnostic details to stderr",
        )
        _ = verbosity_group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all diagnostics except errors",
        )

        return parser

    @staticmethod
    def process_args(
        args_list: Sequence[str] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> AbbreviateArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            environ: Environment used for the default home directory.

        Returns:
            AbbreviateArgs: Options merged from command line, config file and defaults.

        Raises:
            SystemExit: If no path was given.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if not parsed_args.paths:
            parser.print_help(sys.stderr)
            sys.exit(1)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        _ = setup_logger(console_level=log_level)
        configuration = Config.load()
        if configuration.log_file is not None:
            _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        mapping = environ if environ is not None else os.environ

        return AbbreviateArgs(
            paths=tuple(parsed_args.paths),
            project_files=_first_set(
                ArgumentParser._split_option(parsed_args.project_files),
                configuration.project_files,
                default=DEFAULT_PROJECT_FILES,
            ),
            env_roots=_first_set(
                ArgumentParser._split_option(parsed_args.env_roots),
                configuration.env_roots,
                default=DEFAULT_ENV_ROOTS,
            ),
            home_dirs=_first_set(
                ArgumentParser._split_option(parsed_args.home),
                configuration.home,
                default=split_list(mapping.get("HOME", "")),
            ),
            color=_first_set(parsed_args.color, configuration.color, default=DEFAULT_COLOR_SPEC),
            prompt_escape=ArgumentParser._escape_mode(
                _first_set(
                    parsed_args.prompt_escape,
                    configuration.prompt_escape,
                    default=DEFAULT_PROMPT_ESCAPE,
                )
            ),
            abbreviate=_first_set(parsed_args.abbreviate, configuration.abbreviate, default=True),
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _split_option(value: str | None) -> tuple[str, ...] | None:
        return None if value is None else split_list(value)

    @staticmethod
    def _escape_mode(value: str) -> EscapeMode:
        try:
            return EscapeMode.from_user_input(value)
        except ValueError as e:
            # Only reachable from the config file; argparse validates the flag.
            logger.warning("%s; colors will not be escaped", e)
            return EscapeMode.NONE
