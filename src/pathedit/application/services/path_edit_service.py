"""Application service for editing path variables.

This layer reads the backing variable from an injected environment mapping,
runs exactly one path-list operation and hands back an outcome. Writing the
new value anywhere is left to the caller.
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import final

from pathedit.config.aliases import VARIABLE_NAME_PATTERN, VariableAliases
from pathedit.features.pathlist import (
    EditCommand,
    InvalidArgumentError,
    InvalidVariableNameError,
    MissingArgumentError,
    PathList,
    add,
    clean,
    contains,
    move,
    prepend,
    remove,
    show,
)
from pathedit.features.pathlist.domain import DEFAULT_DELIMITER
from pathedit.features.pathlist.usecases import parse_index
from pathedit.platform.logging import logger


@dataclass(frozen=True)
class EditRequest:
    """Input parameters for a single edit.

    Attributes:
        varname: Variable name as typed, before alias resolution.
        command: Operation to apply.
        arguments: Positional arguments following the command.
        real: Compare by filesystem identity as well as by path.
    """

    varname: str
    command: EditCommand = EditCommand.SHOW
    arguments: Sequence[str] = ()
    real: bool = False


@dataclass(frozen=True)
class EditOutcome:
    """Result of applying an edit.

    Attributes:
        varname: Resolved variable name.
        status: ``False`` only when an ``in`` test fails.
        value: New serialized value for mutating commands, else ``None``.
        listing: ``(index, component)`` pairs for ``show``.
    """

    varname: str
    status: bool = True
    value: str | None = None
    listing: list[tuple[int, str]] = field(default_factory=list)


@final
class PathEditService:
    """Application service that applies one operation to one variable."""

    def __init__(
        self,
        *,
        aliases: VariableAliases | None = None,
        environ: Mapping[str, str] | None = None,
        delimiter: str = DEFAULT_DELIMITER,
        strict_indices: bool = False,
        cwd: str | None = None,
    ) -> None:
        """Create a service.

        Args:
            aliases: Variable alias table. Defaults to the built-in aliases.
            environ: Source of current values. Defaults to ``os.environ``.
            delimiter: Component separator.
            strict_indices: Make ``remove N`` fail for out-of-range ``N``.
            cwd: Working directory for canonicalization.
        """
        self.aliases = aliases if aliases is not None else VariableAliases()
        self.environ = environ if environ is not None else os.environ
        self.delimiter = delimiter
        self.strict_indices = strict_indices
        self.cwd = cwd

    def resolve_varname(self, varname: str) -> str:
        """Expand an alias and check the result is a safe variable name."""

        if not varname:
            raise MissingArgumentError("VARNAME")
        resolved = self.aliases.resolve(varname)
        if VARIABLE_NAME_PATTERN.fullmatch(resolved) is None:
            raise InvalidVariableNameError(resolved)
        return resolved

    def load(self, varname: str) -> PathList:
        """Build a path list from the current value of ``varname``."""

        return PathList.from_string(self.environ.get(varname, ""), self.delimiter)

    def execute(self, request: EditRequest) -> EditOutcome:
        """Apply ``request`` and return its outcome."""

        varname = self.resolve_varname(request.varname)
        path_list = self.load(varname)
        args = list(request.arguments)
        command = request.command

        logger.debug("%s %s %s", varname, command.value, " ".join(args))

        if command is EditCommand.SHOW:
            _expect_arguments(command, args, maximum=0)
            return EditOutcome(varname=varname, listing=show(path_list))

        if command is EditCommand.IN:
            item = _require_item(command, args)
            found = contains(path_list, item, real=request.real, cwd=self.cwd)
            return EditOutcome(varname=varname, status=found)

        if command is EditCommand.REMOVE:
            item = _require_item(command, args)
            result = remove(
                path_list,
                item,
                strict=self.strict_indices,
                real=request.real,
                cwd=self.cwd,
            )
        elif command is EditCommand.PREPEND:
            result = prepend(path_list, _require_item(command, args), real=request.real, cwd=self.cwd)
        elif command is EditCommand.ADD:
            result = add(path_list, _require_item(command, args), real=request.real, cwd=self.cwd)
        elif command is EditCommand.MOVE:
            if not args:
                raise MissingArgumentError("SRC")
            _expect_arguments(command, args, maximum=2)
            src = parse_index(args[0], "SRC")
            dst = parse_index(args[1], "DST") if len(args) > 1 else 0
            result = move(path_list, src, dst)
        else:
            _expect_arguments(command, args, maximum=0)
            result = clean(path_list, real=request.real, cwd=self.cwd)

        value = result.to_string()
        logger.debug("%s=%s", varname, value)
        return EditOutcome(varname=varname, value=value)


def _require_item(command: EditCommand, args: list[str]) -> str:
    if not args:
        raise MissingArgumentError("ITEM")
    _expect_arguments(command, args, maximum=1)
    return args[0]


def _expect_arguments(command: EditCommand, args: list[str], *, maximum: int) -> None:
    if len(args) > maximum:
        extra = " ".join(args[maximum:])
        raise InvalidArgumentError(f"unexpected argument(s) for {command.value}: {extra}")


__all__ = ["EditOutcome", "EditRequest", "PathEditService"]
