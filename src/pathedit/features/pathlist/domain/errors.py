"""
Summary: Error taxonomy raised by path-list parsing, operations and dispatch.
Why: Let the CLI report one-line diagnostics without inspecting message text.
"""

from __future__ import annotations


class PathEditError(Exception):
    """Base exception for all path editing failures."""


class MissingArgumentError(PathEditError):
    """Raised when a required VARNAME, ITEM or index is omitted."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"missing {argument}")


class UnknownCommandError(PathEditError):
    """Raised when a verb is not in the command table."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"invalid command '{command}'")


class IndexOutOfRangeError(PathEditError, IndexError):
    """Raised when a numeric index falls outside ``[0, length)``."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"index {index} out of range for {length} components")


class InvalidArgumentError(PathEditError, ValueError):
    """Raised for malformed indices or unexpected extra arguments."""


class InvalidVariableNameError(PathEditError, ValueError):
    """Raised when a variable name cannot be exported safely."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"invalid variable name '{name}'")


__all__ = [
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "InvalidVariableNameError",
    "MissingArgumentError",
    "PathEditError",
    "UnknownCommandError",
]
