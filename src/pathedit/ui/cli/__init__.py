"""CLI package for pathedit."""

from pathedit.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
