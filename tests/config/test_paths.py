"""Tests for configuration path resolution helpers."""

from pathlib import Path

import pytest

from pathedit.config.paths import (
    default_config_path,
    default_log_dir,
    default_log_file,
    resolve_overridable_path,
)


def test_explicit_override_env(tmp_path: Path) -> None:
    target = tmp_path / "custom.toml"
    env = {"PATHEDIT_CONFIG": str(target)}
    assert default_config_path(env) == target.resolve()


def test_xdg_config_home(tmp_path: Path) -> None:
    env = {"XDG_CONFIG_HOME": str(tmp_path)}
    assert default_config_path(env) == (tmp_path / "pathedit" / "config.toml").resolve()


def test_home_fallback(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_config_path({}) == (tmp_path / ".config" / "pathedit" / "config.toml").resolve()


def test_default_log_paths(tmp_path: Path) -> None:
    """Default log locations should live under the XDG state directory."""

    env = {"XDG_STATE_HOME": str(tmp_path)}
    expected_dir = (tmp_path / "pathedit").resolve()
    assert default_log_dir(env) == expected_dir
    assert default_log_file(env) == expected_dir / "pathedit.log"


def test_blank_env_value_uses_default(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=None,
        env={"SOME_VAR": "   "},
        env_var="SOME_VAR",
        default_factory=lambda: tmp_path / "default",
    )
    assert resolved == (tmp_path / "default").resolve()


def test_explicit_path_wins(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "explicit",
        env={"SOME_VAR": str(tmp_path / "env")},
        env_var="SOME_VAR",
        default_factory=lambda: tmp_path / "default",
    )
    assert resolved == (tmp_path / "explicit").resolve()
