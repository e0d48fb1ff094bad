"""Tag reading feature exports."""

from .usecases.extraction import TagReader, UnreadableFileError, UnsupportedFormatError

__all__ = ["TagReader", "UnreadableFileError", "UnsupportedFormatError"]
