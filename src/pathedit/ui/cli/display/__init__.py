"""Display helpers for the CLI."""

from pathedit.ui.cli.display.listing import ListingDisplay
from pathedit.ui.cli.display.shell import render_export, render_init, render_lines

__all__ = ["ListingDisplay", "render_export", "render_init", "render_lines"]
