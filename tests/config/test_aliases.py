"""Tests for variable name aliases."""

import pytest

from pathedit.config.aliases import DEFAULT_ALIASES, AliasValidationError, VariableAliases


def test_default_aliases() -> None:
    aliases = VariableAliases()
    assert aliases.resolve("P") == "PATH"
    assert aliases.resolve("PY") == "PYTHONPATH"
    assert aliases.resolve("LD") == "LD_LIBRARY_PATH"
    assert aliases.resolve("MAN") == "MANPATH"
    assert aliases.resolve("CP") == "CLASSPATH"
    assert dict(aliases) == dict(DEFAULT_ALIASES)


def test_unknown_name_resolves_to_itself() -> None:
    assert VariableAliases().resolve("GOPATH") == "GOPATH"


def test_lookup_is_case_sensitive() -> None:
    assert VariableAliases().resolve("p") == "p"


def test_injected_table_replaces_defaults() -> None:
    aliases = VariableAliases({" NODE ": " NODE_PATH "})
    assert aliases.resolve("NODE") == "NODE_PATH"
    assert aliases.resolve("P") == "P"
    assert len(aliases) == 1
    assert "NODE" in aliases


def test_table_is_read_only() -> None:
    aliases = VariableAliases({"X": "XPATH"})
    with pytest.raises(TypeError):
        aliases.entries["Y"] = "YPATH"  # type: ignore[index]


@pytest.mark.parametrize("entries", [{"": "PATH"}, {"BAD": "not a name"}, {"NUM": "1PATH"}])
def test_invalid_entries_rejected(entries: dict[str, str]) -> None:
    with pytest.raises(AliasValidationError):
        _ = VariableAliases(entries)
