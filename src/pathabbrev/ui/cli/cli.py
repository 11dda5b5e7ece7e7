"""Command line interface for pathabbrev."""

import sys
from typing import final

from pathabbrev.platform.logging import logger
from pathabbrev.ui.cli.args import AbbreviateArgs, ArgumentParser
from pathabbrev.ui.cli.commands import AbbreviateCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: AbbreviateArgs = ArgumentParser.process_args(args_list)
            _ = AbbreviateCommand(args).execute()

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Usage errors and unexpected
        failures exit through ``sys.exit(...)`` before this returns.
    """
    CommandProcessor.process_command()
    return 0
