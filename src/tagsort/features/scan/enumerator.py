"""Lazy recursive discovery of candidate files."""

from __future__ import annotations

import fnmatch
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from tagsort.config import DEFAULT_PATTERN
from tagsort.platform.logging import logger


@dataclass(frozen=True, slots=True)
class FileEntry:
    """A discovered file: bare name, containing directory and full path."""

    short_name: str
    directory: Path
    full_path: Path


def list_files(root: Path, pattern: str = DEFAULT_PATTERN) -> Iterator[FileEntry]:
    """Yield regular files below ``root`` whose name matches ``pattern``.

    Matching is case-sensitive glob matching on the file name only. Entries are
    produced while walking, so directories created during the run may or may
    not be visited. No ordering is guaranteed.
    """

    def _on_error(error: OSError) -> None:
        logger.warning("Cannot scan %s: %s", error.filename, error.strerror)

    for current, _dirs, names in os.walk(root, onerror=_on_error):
        directory = Path(current)
        for name in names:
            if not fnmatch.fnmatchcase(name, pattern):
                continue
            full_path = directory / name
            if not full_path.is_file():
                continue
            yield FileEntry(short_name=name, directory=directory, full_path=full_path)


__all__ = ["FileEntry", "list_files"]
