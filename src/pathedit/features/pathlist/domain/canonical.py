"""
Summary: Canonical-form and real-identity comparison of path components.
Why: Match components the way ``cd dir && echo $PWD/base`` would, with a lexical fallback.
"""

from __future__ import annotations

import os

from pathedit.platform.logging import logger


def canonicalize(item: str, cwd: str | None = None) -> str:
    """Return the absolute, normalized form of ``item``.

    The directory part is resolved through symbolic links; the trailing
    segment is kept as written. When the directory part cannot be resolved
    (for example because it does not exist) the lexically normalized
    absolute path is returned instead.

    Args:
        item: Component or user-supplied path.
        cwd: Directory relative paths are resolved against. Defaults to the
            process working directory.

    Returns:
        str: Canonical form of ``item``.
    """
    base = cwd if cwd is not None else os.getcwd()
    absolute = os.path.normpath(os.path.join(base, item))
    head, tail = os.path.split(absolute)
    if not tail:
        # Filesystem root.
        return head

    try:
        resolved_head = os.path.realpath(head, strict=True)
    except OSError as exc:
        logger.debug("Could not resolve %s (%s); using lexical form", head, exc)
        return absolute

    return os.path.join(resolved_head, tail)


def same_file(first: str, second: str) -> bool:
    """Return whether two paths name the same filesystem object.

    Comparison follows symbolic links and uses device and inode numbers.
    Paths that cannot be stat'ed never match.
    """
    try:
        return os.path.samefile(first, second)
    except OSError:
        return False


def matches(component: str, canonical_item: str, *, real: bool = False, cwd: str | None = None) -> bool:
    """Return whether ``component`` is equivalent to an already canonical item.

    Args:
        component: Literal component text from the path list.
        canonical_item: Result of :func:`canonicalize` for the user item.
        real: Also treat components naming the same file as equal.
        cwd: Working directory used to canonicalize ``component``.

    Returns:
        bool: ``True`` when both sides share a canonical form, or identity
        when ``real`` is requested.
    """
    canonical_component = canonicalize(component, cwd)
    if canonical_component == canonical_item:
        return True
    return real and same_file(canonical_component, canonical_item)


__all__ = ["canonicalize", "matches", "same_file"]
