"""File discovery under the base directory."""

from .enumerator import FileEntry, list_files

__all__ = ["FileEntry", "list_files"]
