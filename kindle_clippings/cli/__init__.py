"""Command-line interface for kindle-clippings."""

from kindle_clippings.cli.main import main

__all__ = ["main"]
