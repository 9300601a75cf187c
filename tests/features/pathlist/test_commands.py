"""Tests for verb and alias resolution."""

import pytest

from pathedit.features.pathlist import EditCommand, UnknownCommandError


@pytest.mark.parametrize(
    ("verb", "expected"),
    [
        (None, EditCommand.SHOW),
        ("", EditCommand.SHOW),
        ("show", EditCommand.SHOW),
        ("remove", EditCommand.REMOVE),
        ("rm", EditCommand.REMOVE),
        ("-", EditCommand.REMOVE),
        ("in", EditCommand.IN),
        ("prepend", EditCommand.PREPEND),
        ("pre", EditCommand.PREPEND),
        ("++", EditCommand.PREPEND),
        ("add", EditCommand.ADD),
        ("+", EditCommand.ADD),
        ("move", EditCommand.MOVE),
        ("mv", EditCommand.MOVE),
        ("clean", EditCommand.CLEAN),
    ],
)
def test_from_user_input(verb: str | None, expected: EditCommand) -> None:
    assert EditCommand.from_user_input(verb) is expected


def test_unknown_verb() -> None:
    with pytest.raises(UnknownCommandError) as excinfo:
        _ = EditCommand.from_user_input("delete")
    assert str(excinfo.value) == "invalid command 'delete'"


def test_mutating_commands() -> None:
    assert not EditCommand.SHOW.mutates
    assert not EditCommand.IN.mutates
    assert all(
        command.mutates
        for command in (
            EditCommand.REMOVE,
            EditCommand.PREPEND,
            EditCommand.ADD,
            EditCommand.MOVE,
            EditCommand.CLEAN,
        )
    )
