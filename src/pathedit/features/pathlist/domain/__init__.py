"""
Summary: Domain types for search-path values.
Why: Give use cases and the CLI a single import path for the path-list model.
"""

from pathedit.features.pathlist.domain.canonical import canonicalize, matches, same_file
from pathedit.features.pathlist.domain.commands import COMMAND_ALIASES, EditCommand
from pathedit.features.pathlist.domain.errors import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidVariableNameError,
    MissingArgumentError,
    PathEditError,
    UnknownCommandError,
)
from pathedit.features.pathlist.domain.path_list import DEFAULT_DELIMITER, PathList, parse, serialize

__all__ = [
    "COMMAND_ALIASES",
    "DEFAULT_DELIMITER",
    "EditCommand",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "InvalidVariableNameError",
    "MissingArgumentError",
    "PathEditError",
    "PathList",
    "UnknownCommandError",
    "canonicalize",
    "matches",
    "parse",
    "same_file",
    "serialize",
]
