"""Command line argument handling package."""

from pathedit.ui.cli.args.parser import ArgumentParser
from pathedit.ui.cli.args.options import CLIArgs, EditArgs, InitArgs

__all__ = ["ArgumentParser", "CLIArgs", "EditArgs", "InitArgs"]
