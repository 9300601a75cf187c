"""Shared pytest fixtures isolating configuration and logging."""

from __future__ import annotations

from collections.abc import Iterator
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from pathedit.ui.cli.display.listing import ListingDisplay


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the config loader at a temporary file and reset its singleton."""

    config_path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("PATHEDIT_CONFIG", str(config_path))

    import pathedit.config.config as config_module

    monkeypatch.setattr(config_module.Config, "_instance", None)
    monkeypatch.setattr(config_module.Config, "_loaded_from", None)
    yield config_path


@pytest.fixture
def output() -> StringIO:
    """Buffer receiving everything the CLI writes to stdout."""

    return StringIO()


@pytest.fixture
def display(output: StringIO) -> ListingDisplay:
    """Listing display writing plain text into ``output``."""

    console = Console(
        file=output,
        soft_wrap=True,
        highlight=False,
        markup=False,
        emoji=False,
        width=200,
    )
    return ListingDisplay(console)
