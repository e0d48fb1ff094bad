"""Command line argument handling package."""

from tagsort.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser"]
