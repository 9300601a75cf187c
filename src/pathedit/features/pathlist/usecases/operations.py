"""
Summary: Pure edit operations over a PathList.
Why: Keep every mutation a value-in, value-out function independent of os.environ.
"""

from __future__ import annotations

import os
import re
from typing import Final

from pathedit.features.pathlist.domain.canonical import canonicalize, matches, same_file
from pathedit.features.pathlist.domain.errors import IndexOutOfRangeError, InvalidArgumentError
from pathedit.features.pathlist.domain.path_list import PathList
from pathedit.platform.logging import logger

_INDEX_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]+")


def is_index(item: str) -> bool:
    """Return whether ``item`` is an unsigned decimal index."""

    return _INDEX_PATTERN.fullmatch(item) is not None


def parse_index(value: str, label: str) -> int:
    """Convert ``value`` to an index or raise ``InvalidArgumentError``."""

    if not is_index(value):
        raise InvalidArgumentError(f"{label} must be a non-negative integer, got '{value}'")
    return int(value)


def show(path_list: PathList) -> list[tuple[int, str]]:
    """Enumerate components as ``(index, component)`` pairs."""

    return list(enumerate(path_list))


def contains(path_list: PathList, item: str, *, real: bool = False, cwd: str | None = None) -> bool:
    """Return whether any component matches ``item`` after canonicalization.

    ``item`` is always treated as a path, never as an index.
    """
    canonical = canonicalize(item, cwd)
    return any(matches(component, canonical, real=real, cwd=cwd) for component in path_list)


def remove(
    path_list: PathList,
    item: str,
    *,
    strict: bool = False,
    real: bool = False,
    cwd: str | None = None,
) -> PathList:
    """Remove a component by index, or every component matching a path.

    Args:
        path_list: Current value.
        item: Unsigned decimal index, or a path to canonicalize and match.
        strict: Raise ``IndexOutOfRangeError`` for an out-of-range index
            instead of leaving the list unchanged.
        real: Also match components that name the same file as ``item``.
        cwd: Working directory for canonicalization.

    Returns:
        PathList: The remaining components in their original order.
    """
    if is_index(item):
        index = int(item)
        if index >= len(path_list):
            if strict:
                raise IndexOutOfRangeError(index, len(path_list))
            logger.debug("Index %d out of range for %d components; nothing removed", index, len(path_list))
            return path_list
        return path_list.replace(c for i, c in enumerate(path_list) if i != index)

    return _remove_matching(path_list, canonicalize(item, cwd), real=real, cwd=cwd)


def prepend(path_list: PathList, item: str, *, real: bool = False, cwd: str | None = None) -> PathList:
    """Move ``item`` to the front, inserting it if absent.

    Existing occurrences are dropped so the canonical form appears exactly once.
    """
    canonical = canonicalize(item, cwd)
    remaining = _remove_matching(path_list, canonical, real=real, cwd=cwd)
    return remaining.replace((canonical, *remaining))


def add(path_list: PathList, item: str, *, real: bool = False, cwd: str | None = None) -> PathList:
    """Append ``item`` unless a matching component is already present."""

    canonical = canonicalize(item, cwd)
    if any(matches(component, canonical, real=real, cwd=cwd) for component in path_list):
        logger.debug("%s already present; leaving path unchanged", canonical)
        return path_list
    return path_list.replace((*path_list, canonical))


def move(path_list: PathList, src: int, dst: int = 0) -> PathList:
    """Reposition the component at ``src`` so that it ends up at ``dst``.

    Components between the two positions shift by one to close the gap.

    Raises:
        IndexOutOfRangeError: If either index is outside ``[0, len)``.
    """
    length = len(path_list)
    for index in (src, dst):
        if not 0 <= index < length:
            raise IndexOutOfRangeError(index, length)

    if src == dst:
        return path_list

    components = list(path_list)
    component = components.pop(src)
    components.insert(dst, component)
    return path_list.replace(components)


def clean(path_list: PathList, *, real: bool = False, cwd: str | None = None) -> PathList:
    """Drop second and later occurrences of each component.

    Components are equal when their text is identical or, with ``real``,
    when they name the same filesystem object, with relative components
    taken against ``cwd``. The first occurrence of each equivalence class
    survives in its original relative order.
    """
    kept: list[str] = []
    for component in path_list:
        duplicate = any(
            component == previous
            or (real and same_file(_against(component, cwd), _against(previous, cwd)))
            for previous in kept
        )
        if not duplicate:
            kept.append(component)

    dropped = len(path_list) - len(kept)
    if dropped:
        logger.debug("Removed %d duplicate component(s)", dropped)
    return path_list.replace(kept)


def _against(component: str, cwd: str | None) -> str:
    """Join a relative component onto ``cwd``; empty components stay empty."""

    if not component or cwd is None:
        return component
    return os.path.join(cwd, component)


def _remove_matching(path_list: PathList, canonical: str, *, real: bool, cwd: str | None) -> PathList:
    """Return ``path_list`` without components matching ``canonical``."""

    return path_list.replace(
        component
        for component in path_list
        if not matches(component, canonical, real=real, cwd=cwd)
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
