"""
Summary: Command verbs accepted by the editor and their aliases.
Why: Resolve user-typed verbs in one place so dispatch stays a plain lookup.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from pathedit.features.pathlist.domain.errors import UnknownCommandError


class EditCommand(str, Enum):
    """Operations that can be applied to a path variable."""

    SHOW = "show"
    REMOVE = "remove"
    IN = "in"
    PREPEND = "prepend"
    ADD = "add"
    MOVE = "move"
    CLEAN = "clean"

    @property
    def mutates(self) -> bool:
        """Whether the command writes a new value back to the variable."""

        return self not in (EditCommand.SHOW, EditCommand.IN)

    @staticmethod
    def from_user_input(value: str | None) -> "EditCommand":
        """Translate a verb or alias into the matching command.

        ``None`` and the empty string select ``show``.
        """
        if not value:
            return EditCommand.SHOW

        normalized = value.strip()
        alias = COMMAND_ALIASES.get(normalized)
        if alias is not None:
            return alias
        for command in EditCommand:
            if command.value == normalized:
                return command
        raise UnknownCommandError(value)


COMMAND_ALIASES: Final[dict[str, EditCommand]] = {
    "rm": EditCommand.REMOVE,
    "-": EditCommand.REMOVE,
    "pre": EditCommand.PREPEND,
    "++": EditCommand.PREPEND,
    "+": EditCommand.ADD,
    "mv": EditCommand.MOVE,
}


__all__ = ["COMMAND_ALIASES", "EditCommand"]
