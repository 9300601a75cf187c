# Path: `src/pathedit/features/pathlist/__init__.py`
# Summary: Export path-list domain and use case symbols.
# Why: Provide a stable import surface for the service layer and tests.

from pathedit.features.pathlist.domain import (
    EditCommand,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidVariableNameError,
    MissingArgumentError,
    PathEditError,
    PathList,
    UnknownCommandError,
    canonicalize,
)
from pathedit.features.pathlist.usecases import add, clean, contains, move, prepend, remove, show

__all__ = [
    "EditCommand",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "InvalidVariableNameError",
    "MissingArgumentError",
    "PathEditError",
    "PathList",
    "UnknownCommandError",
    "add",
    "canonicalize",
    "clean",
    "contains",
    "move",
    "prepend",
    "remove",
    "show",
]
