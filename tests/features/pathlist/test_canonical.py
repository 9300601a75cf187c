"""Tests for canonical-form and identity comparisons."""

import os
from pathlib import Path

import pytest

from pathedit.features.pathlist.domain.canonical import canonicalize, matches, same_file


@pytest.fixture
def base(tmp_path: Path) -> Path:
    """Resolved temporary directory holding a real dir and a symlink to it."""

    root = tmp_path.resolve()
    (root / "real").mkdir()
    (root / "link").symlink_to(root / "real", target_is_directory=True)
    return root


def test_relative_item_resolves_against_cwd(base: Path) -> None:
    assert canonicalize("bin", cwd=str(base)) == str(base / "bin")


def test_defaults_to_process_cwd(base: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(base)
    assert canonicalize("bin") == str(base / "bin")


def test_dot_is_the_directory_itself(base: Path) -> None:
    assert canonicalize(".", cwd=str(base / "real")) == str(base / "real")


def test_trailing_symlink_is_kept(base: Path) -> None:
    assert canonicalize(str(base / "link")) == str(base / "link")


def test_symlink_in_directory_part_is_resolved(base: Path) -> None:
    assert canonicalize(str(base / "link" / "bin")) == str(base / "real" / "bin")


def test_missing_prefix_falls_back_to_lexical_form() -> None:
    assert canonicalize("/no-such-dir-pathedit/x/../bin") == "/no-such-dir-pathedit/bin"


def test_root_and_redundant_separators() -> None:
    assert canonicalize("/") == "/"
    assert canonicalize("/usr///bin/") == canonicalize("/usr/bin")


def test_same_file_through_symlink(base: Path) -> None:
    assert same_file(str(base / "link"), str(base / "real"))
    assert not same_file(str(base / "real"), str(base))


def test_same_file_missing_paths_never_match(base: Path) -> None:
    missing = str(base / "missing")
    assert not same_file(missing, missing)


def test_matches_by_canonical_form(base: Path) -> None:
    item = canonicalize("real", cwd=str(base))
    assert matches(str(base / "real" / ".." / "real"), item)
    assert not matches(str(base / "link"), item)


def test_matches_real_identity(base: Path) -> None:
    item = canonicalize(str(base / "real"))
    assert matches(str(base / "link"), item, real=True)


@pytest.mark.skipif(os.sep != "/", reason="POSIX paths")
def test_empty_component_means_cwd(base: Path) -> None:
    assert canonicalize("", cwd=str(base)) == str(base)
