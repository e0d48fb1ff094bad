"""Command line interface package."""

from tagsort.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
