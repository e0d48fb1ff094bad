"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder, creating missing ancestors."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def is_readable_file(path: Path) -> bool:
    """Return whether ``path`` is a regular file the current user may read."""

    return path.is_file() and os.access(path, os.R_OK)


def same_location(first: Path, second: Path) -> bool:
    """Return whether two paths name the same file.

    Paths are compared after normalisation; when both exist the inode is
    compared too, so symlinked roots are recognised.
    """

    if os.path.normcase(os.path.abspath(first)) == os.path.normcase(os.path.abspath(second)):
        return True
    try:
        return first.samefile(second)
    except (OSError, ValueError):
        return False


__all__ = ["ensure_directory", "is_readable_file", "same_location"]
