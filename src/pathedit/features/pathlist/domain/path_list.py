"""
Summary: Ordered, delimiter-separated path list value type.
Why: Keep parsing and reassembly of search-path values in one immutable type.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import final

DEFAULT_DELIMITER = ":"


def parse(raw: str, delimiter: str = DEFAULT_DELIMITER) -> list[str]:
    """Split ``raw`` on every ``delimiter``.

    Empty components produced by leading, trailing or adjacent delimiters are
    kept as empty strings. An empty value yields an empty list rather than a
    single empty component.

    Args:
        raw: Delimited value, typically an environment variable.
        delimiter: Component separator.

    Returns:
        list[str]: Components in their original order.
    """
    if not raw:
        return []
    return raw.split(delimiter)


def serialize(components: Iterable[str], delimiter: str = DEFAULT_DELIMITER) -> str:
    """Join components with ``delimiter``."""

    return delimiter.join(components)


@final
@dataclass(frozen=True, slots=True)
class PathList:
    """An ordered search path.

    Order encodes search priority and duplicates are allowed. Instances are
    immutable; every operation returns a new ``PathList``.
    """

    components: tuple[str, ...] = field(default_factory=tuple)
    delimiter: str = DEFAULT_DELIMITER

    def __post_init__(self) -> None:
        if len(self.delimiter) != 1:
            raise ValueError(f"Delimiter must be a single character, got {self.delimiter!r}")
        if not isinstance(self.components, tuple):
            object.__setattr__(self, "components", tuple(self.components))

    @classmethod
    def from_string(cls, raw: str, delimiter: str = DEFAULT_DELIMITER) -> PathList:
        """Build a path list from a delimited value."""

        return cls(tuple(parse(raw, delimiter)), delimiter)

    def to_string(self) -> str:
        """Reassemble the delimited value."""

        return serialize(self.components, self.delimiter)

    def replace(self, components: Iterable[str]) -> PathList:
        """Return a path list with the same delimiter and new components."""

        return PathList(tuple(components), self.delimiter)

    def __iter__(self) -> Iterator[str]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __getitem__(self, index: int) -> str:
        return self.components[index]

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["DEFAULT_DELIMITER", "PathList", "parse", "serialize"]
