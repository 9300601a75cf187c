"""Command line interface for pathedit."""

import sys
from collections.abc import Mapping
from typing import final

from pathedit.config.config import ConfigError
from pathedit.features.pathlist import PathEditError
from pathedit.platform.logging import logger
from pathedit.ui.cli.args import ArgumentParser
from pathedit.ui.cli.args.options import CLIArgs, InitArgs
from pathedit.ui.cli.commands import EditCommandExecutor, InitCommand
from pathedit.ui.cli.display.listing import ListingDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(
        args_list: list[str] | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        display: ListingDisplay | None = None,
    ) -> None:
        """Process command line arguments and exit with the command's status.

        Args:
            args_list: List of command line arguments (for testing).
            environ: Environment to read variables from (for testing).
            display: Output display (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, InitArgs):
                status = InitCommand(args, display=display).execute()
            else:
                status = EditCommandExecutor(args, environ=environ, display=display).execute()

        except (PathEditError, ConfigError) as e:
            logger.error("%s", e)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

        sys.exit(status)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code. ``process_command`` always leaves through
        ``sys.exit``, so this return is only reached if that is patched out.
    """
    CommandProcessor.process_command()
    return 0
