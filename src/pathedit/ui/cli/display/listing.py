"""Render path listings and shell output to stdout."""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.text import Text

from pathedit.ui.cli.display.shell import render_export, render_lines


def format_entry(index: int, component: str) -> str:
    """Format one listing row as a right-justified index and the component."""

    return f"{index:>3}: {component}"


def listing_lines(varname: str, entries: Sequence[tuple[int, str]]) -> list[str]:
    """Return the ``VARNAME=`` header followed by one row per component."""

    return [f"{varname}=", *(format_entry(index, component) for index, component in entries)]


@final
class ListingDisplay:
    """Handles stdout output in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize listing display."""
        self.console = console or Console(soft_wrap=True, highlight=False, markup=False, emoji=False)

    def show_listing(self, varname: str, entries: Sequence[tuple[int, str]], *, shell: bool = False) -> None:
        """Display the components of ``varname``.

        Component text bypasses rich so tabs and control characters reach
        stdout unchanged.

        Args:
            varname: Resolved variable name.
            entries: ``(index, component)`` pairs.
            shell: Emit ``printf`` commands instead of plain text.
        """
        if shell:
            self.write_raw(render_lines(listing_lines(varname, entries)) + "\n")
            return

        self.console.print(Text(f"{varname}=", style="bold"))
        for index, component in entries:
            self.console.print(Text.assemble((f"{index:>3}", "cyan"), ": "), end="")
            self.write_raw(component + "\n")

    def show_export(self, varname: str, value: str) -> None:
        """Print the ``export`` statement that applies a new value."""

        self.write_raw(render_export(varname, value) + "\n")

    def write_raw(self, text: str) -> None:
        """Write shell code to the console's file without any rendering."""

        file = self.console.file
        _ = file.write(text)
        file.flush()
