"""Short-name aliases for path variable names."""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

DEFAULT_ALIASES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "CP": "CLASSPATH",
        "LD": "LD_LIBRARY_PATH",
        "MAN": "MANPATH",
        "PY": "PYTHONPATH",
        "P": "PATH",
    }
)

VARIABLE_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class AliasValidationError(ValueError):
    """Raised when an alias table entry is unusable."""


@dataclass(frozen=True, slots=True)
class VariableAliases(Mapping[str, str]):
    """Immutable alias table with identity fallback.

    Keys are matched exactly (``P`` and ``p`` are different aliases), the
    same way the shell treats variable names.
    """

    entries: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_ALIASES))

    def __post_init__(self) -> None:
        cleaned: dict[str, str] = {}
        for key, value in self.entries.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise AliasValidationError("Alias names and targets must be strings")
            trimmed_key = key.strip()
            trimmed_value = value.strip()
            if not trimmed_key:
                raise AliasValidationError("Alias names must not be empty")
            if VARIABLE_NAME_PATTERN.fullmatch(trimmed_value) is None:
                raise AliasValidationError(
                    f"Alias '{trimmed_key}' targets invalid variable name '{trimmed_value}'"
                )
            cleaned[trimmed_key] = trimmed_value
        object.__setattr__(self, "entries", MappingProxyType(cleaned))

    def resolve(self, name: str) -> str:
        """Return the variable ``name`` stands for, or ``name`` itself."""

        return self.entries.get(name, name)

    def __getitem__(self, key: str) -> str:
        return self.entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


__all__ = [
    "AliasValidationError",
    "DEFAULT_ALIASES",
    "VARIABLE_NAME_PATTERN",
    "VariableAliases",
]
