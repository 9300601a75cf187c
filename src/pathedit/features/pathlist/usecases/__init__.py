"""Path-list edit use cases."""

from pathedit.features.pathlist.usecases.operations import (
    add,
    clean,
    contains,
    is_index,
    move,
    parse_index,
    prepend,
    remove,
    show,
)

__all__ = [
    "add",
    "clean",
    "contains",
    "is_index",
    "move",
    "parse_index",
    "prepend",
    "remove",
    "show",
]
