"""
Summary: Public surface of the mutagen-backed tag reader.
Why: Callers import the facade and its errors without touching format modules.
"""

from .tag_reader import TagReader, UnreadableFileError, UnsupportedFormatError

__all__ = ["TagReader", "UnreadableFileError", "UnsupportedFormatError"]
