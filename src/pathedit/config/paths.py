"""Shared path utilities for configuration and log locations.

This module centralizes how the application discovers locations for its
config and log files.

Policy (XDG by default):
- Config: ``$PATHEDIT_CONFIG`` when set, else
  ``$XDG_CONFIG_HOME/pathedit/config.toml``, else
  ``~/.config/pathedit/config.toml``.
- Logs: ``$XDG_STATE_HOME/pathedit/pathedit.log``, else
  ``~/.local/state/pathedit/pathedit.log``. File logging only happens when
  the config enables it.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final

_ENV_CONFIG_PATH: Final[str] = "PATHEDIT_CONFIG"
_ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"
_ENV_XDG_STATE_HOME: Final[str] = "XDG_STATE_HOME"
APP_DIR_NAME: Final[str] = "pathedit"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _xdg_base(env_var: str, fallback: str, env: Mapping[str, str] | None = None) -> Path:
    """Return an XDG base directory, falling back below the home directory."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=env_var,
        default_factory=lambda: Path.home() / fallback,
    )


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the main TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_PATH,
        default_factory=lambda: _xdg_base(_ENV_XDG_CONFIG_HOME, ".config", env)
        / APP_DIR_NAME
        / "config.toml",
    )


def default_log_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the default directory for log files."""

    return (_xdg_base(_ENV_XDG_STATE_HOME, ".local/state", env) / APP_DIR_NAME).resolve()


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    """Get the default log file path."""

    return (default_log_dir(env) / "pathedit.log").resolve()


__all__ = [
    "APP_DIR_NAME",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
