"""Command execution package for CLI."""

from pathedit.ui.cli.commands.executor import CommandExecutor
from pathedit.ui.cli.commands.edit import EditCommandExecutor
from pathedit.ui.cli.commands.init import InitCommand

__all__ = [
    "CommandExecutor",
    "EditCommandExecutor",
    "InitCommand",
]
