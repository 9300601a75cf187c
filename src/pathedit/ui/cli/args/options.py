"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from pathedit.features.pathlist import EditCommand


@final
@dataclass(slots=True)
class EditArgs:
    """Command line arguments for editing or inspecting one variable."""

    varname: str
    command: EditCommand
    arguments: tuple[str, ...]
    real: bool
    shell: bool
    delimiter: str | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class InitArgs:
    """Command line arguments for printing the shell integration function."""

    shell: Literal["bash", "zsh"]
    function_name: str


CLIArgs = EditArgs | InitArgs

__all__ = ["CLIArgs", "EditArgs", "InitArgs"]
