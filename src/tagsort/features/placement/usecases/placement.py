"""
Summary: Create target directories and copy or move files into them.
Why: Apply a rendered path to the filesystem, honouring dry-run and copy mode.
"""

from __future__ import annotations

import os
import shutil
from enum import StrEnum
from pathlib import Path
from typing import final

from tagsort.platform.filesystem import ensure_directory, same_location
from tagsort.platform.logging import PlacementEvent, logger


class TargetRootMissingError(FileNotFoundError):
    """The placement root does not exist; no file can be placed."""

    def __init__(self, target_root: Path) -> None:
        super().__init__(f"Target directory '{target_root}' does not exist.")
        self.target_root = target_root


class PlacementOutcome(StrEnum):
    """What ``PlacementEngine.place`` did with one file."""

    UNCHANGED = "unchanged"
    PLANNED = "planned"
    COPIED = "copied"
    MOVED = "moved"
    FAILED = "failed"


def join_under(root: Path, relative_path: str) -> Path:
    """Join a rendered path below ``root``; leading separators are dropped."""

    return root / relative_path.lstrip("/\\")


def is_within(root: Path, candidate: Path) -> bool:
    """Return whether ``candidate`` stays below ``root`` once ``..`` segments are collapsed.

    The comparison is lexical, so symlinked directories below ``root`` are allowed.
    """

    return Path(os.path.abspath(candidate)).is_relative_to(os.path.abspath(root))


def _reason(error: Exception) -> str:
    return getattr(error, "strerror", None) or str(error)


@final
class PlacementEngine:
    """Place files below a fixed target root."""

    target_root: Path
    use_copy: bool
    dry_run: bool

    def __init__(self, target_root: Path, *, use_copy: bool = False, dry_run: bool = False) -> None:
        self.target_root = target_root
        self.use_copy = use_copy
        self.dry_run = dry_run

    def place(self, source_file: Path, relative_path: str, original_filename: str) -> PlacementOutcome:
        """Place ``source_file`` at ``<target_root>/<relative_path>/<original_filename>``.

        Args:
            source_file: File to copy or move.
            relative_path: Rendered directory path relative to the target root.
            original_filename: Leaf name of the destination file.

        Returns:
            PlacementOutcome: The effect applied to this file.

        Raises:
            TargetRootMissingError: If the target root is not a directory.
        """
        if not self.target_root.is_dir():
            raise TargetRootMissingError(self.target_root)

        target_dir = join_under(self.target_root, relative_path)
        target_file = target_dir / original_filename
        log_extra = {
            "source_path": str(source_file),
            "target_path": str(target_file),
            "target_base_path": str(self.target_root),
        }

        if not is_within(self.target_root, target_dir):
            logger.error(
                "Rendered path %r leaves %s",
                relative_path,
                self.target_root,
                extra={
                    "placement_event": PlacementEvent.FILE_ERROR,
                    "error_message": "outside target directory",
                    **log_extra,
                },
            )
            return PlacementOutcome.FAILED

        if not target_dir.is_dir():
            logger.debug(
                "Creating path %s",
                target_dir,
                extra={
                    "placement_event": PlacementEvent.DIRECTORY_CREATE,
                    "target_path": str(target_dir),
                    "target_base_path": str(self.target_root),
                },
            )
            if not self.dry_run:
                try:
                    _ = ensure_directory(target_dir)
                # ValueError covers paths the OS cannot represent, e.g. embedded NUL
                except (OSError, ValueError) as e:
                    logger.error(
                        "Could not create %s: %s",
                        target_dir,
                        _reason(e),
                        extra={
                            "placement_event": PlacementEvent.FILE_ERROR,
                            "error_message": _reason(e),
                            **log_extra,
                        },
                    )
                    return PlacementOutcome.FAILED

        if same_location(source_file, target_file):
            logger.debug(
                "%s is already in place",
                source_file,
                extra={"placement_event": PlacementEvent.FILE_UNCHANGED, **log_extra},
            )
            return PlacementOutcome.UNCHANGED

        if self.use_copy:
            event = PlacementEvent.FILE_COPY
        else:
            event = PlacementEvent.FILE_MOVE
        logger.info(
            "%s -> %s",
            source_file,
            target_file,
            extra={"placement_event": event, **log_extra},
        )

        if self.dry_run:
            return PlacementOutcome.PLANNED
        return self._transfer(source_file, target_file, log_extra)

    def _transfer(self, source_file: Path, target_file: Path, log_extra: dict[str, str]) -> PlacementOutcome:
        """Copy or move one file; failures are logged, not raised."""

        action = "Copy" if self.use_copy else "Move"
        try:
            if self.use_copy:
                _ = shutil.copy2(source_file, target_file)
                return PlacementOutcome.COPIED
            # shutil.move copies then unlinks across devices; the source stays if the copy fails
            _ = shutil.move(source_file, target_file)
            return PlacementOutcome.MOVED
        except (OSError, ValueError) as e:
            reason = _reason(e)
            logger.error(
                "%s failed: %s",
                action,
                reason,
                extra={
                    "placement_event": PlacementEvent.FILE_ERROR,
                    "error_message": reason,
                    **log_extra,
                },
            )
            return PlacementOutcome.FAILED


__all__ = ["PlacementEngine", "PlacementOutcome", "TargetRootMissingError", "is_within", "join_under"]
