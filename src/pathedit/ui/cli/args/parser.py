"""Command line argument parser."""

import argparse
import logging
import textwrap
from collections.abc import Sequence
from typing import Final, final

from pathedit.config.config import Config
from pathedit.features.pathlist import EditCommand, MissingArgumentError
from pathedit.platform.logging import setup_logger
from pathedit.ui.cli.args.options import CLIArgs, EditArgs, InitArgs

SUPPORTED_SHELLS: Final[tuple[str, ...]] = ("bash", "zsh")
REAL_FLAG: Final[str] = "--real"

# Commands that accept --real among their arguments.
_REAL_COMMANDS: Final[frozenset[EditCommand]] = frozenset(
    {
        EditCommand.REMOVE,
        EditCommand.IN,
        EditCommand.PREPEND,
        EditCommand.ADD,
        EditCommand.CLEAN,
    }
)

COMMANDS_HELP: Final[str] = textwrap.dedent(
    """\
    commands:
      VARNAME [ show ]
        Prints path components of $VARNAME.

      VARNAME ( remove | rm | - ) ITEM [ --real ]
        If ITEM is a number, removes the ITEMth component of $VARNAME.
        Otherwise removes every component equal to ITEM.

      VARNAME in ITEM [ --real ]
        Exits 0 if ITEM is a component of $VARNAME, 1 otherwise.

      VARNAME ( prepend | pre | ++ ) ITEM [ --real ]
        Prepends ITEM to $VARNAME, replacing any existing occurrence.

      VARNAME ( add | + ) ITEM [ --real ]
        Appends ITEM to $VARNAME if it is not already a component.

      VARNAME ( move | mv ) SRC [ DST ]
        Moves the component at position SRC to position DST (default 0).

      VARNAME clean [ --real ]
        Removes the second and subsequent occurrence of each component.
        With --real, components naming the same file are also duplicates.

    Mutating commands print `export VARNAME=...`. Use `eval "$(pathedit --init)"`
    in your shell startup file to get a `path` function that applies them.
    """
)


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
            prog="pathedit",
            description="Edit colon-delimited search-path variables such as PATH and PYTHONPATH.",
            epilog=COMMANDS_HELP,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "--init",
            nargs="?",
            const="bash",
            choices=SUPPORTED_SHELLS,
            metavar="SHELL",
            help="Print the shell function that applies edits (bash or zsh)",
        )
        _ = parser.add_argument(
            "--function-name",
            default="path",
            metavar="NAME",
            help="Name of the function printed by --init (default: path)",
        )
        _ = parser.add_argument(
            "--shell",
            action="store_true",
            help="Emit all output as shell code for the --init function to evaluate",
        )
        _ = parser.add_argument(
            "-d",
            "--delimiter",
            metavar="CHAR",
            help="Component separator (overrides the configured delimiter)",
        )
        _ = parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show debug information on stderr",
        )
        _ = parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Suppress all diagnostics except errors",
        )
        _ = parser.add_argument(
            "varname",
            nargs="?",
            metavar="VARNAME",
            help="Variable to edit, or one of its configured short aliases",
        )
        _ = parser.add_argument(
            "command",
            nargs="?",
            metavar="COMMAND",
            help="show, remove, in, prepend, add, move or clean (default: show)",
        )
        _ = parser.add_argument(
            "arguments",
            nargs=argparse.REMAINDER,
            metavar="ARGS",
            help="Arguments for COMMAND",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            MissingArgumentError: If VARNAME is omitted.
            UnknownCommandError: If COMMAND is not recognized.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        if parsed_args.init is not None:
            return InitArgs(shell=parsed_args.init, function_name=parsed_args.function_name)

        return ArgumentParser._process_edit(parsed_args)

    @staticmethod
    def _process_edit(parsed_args: argparse.Namespace) -> EditArgs:
        if not parsed_args.varname:
            raise MissingArgumentError("VARNAME")

        command = EditCommand.from_user_input(parsed_args.command)

        arguments: list[str] = list(parsed_args.arguments)
        real = False
        if command in _REAL_COMMANDS and REAL_FLAG in arguments:
            real = True
            arguments = [arg for arg in arguments if arg != REAL_FLAG]

        return EditArgs(
            varname=parsed_args.varname,
            command=command,
            arguments=tuple(arguments),
            real=real,
            shell=parsed_args.shell,
            delimiter=parsed_args.delimiter,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
