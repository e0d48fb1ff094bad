"""src/tagsort/application/services/sort_service.py
What: Drive the scan -> read tags -> render -> place pipeline for one run.
Why: Keep the CLI thin and the per-file error policy in one place.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, final

from tagsort.config import RunConfig
from tagsort.features.metadata import TagReader, UnreadableFileError, UnsupportedFormatError
from tagsort.features.path import Skipped, TemplateRenderer
from tagsort.features.placement import PlacementEngine, PlacementOutcome
from tagsort.features.scan import FileEntry, list_files
from tagsort.platform.logging import PlacementEvent, logger
from tagsort.shared.track_metadata import TrackMetadata


class TagReaderPort(Protocol):
    """Anything that can turn a file path into tags."""

    def read_tags(self, file_path: Path) -> TrackMetadata: ...


FileEnumerator = Callable[[Path, str], Iterable[FileEntry]]


@dataclass(slots=True)
class RunSummary:
    """Counters collected over a run."""

    placed: int = 0
    unchanged: int = 0
    planned: int = 0
    skipped: int = 0
    unreadable: int = 0
    failed: int = 0
    failures: list[str] = field(default_factory=list)
    start_time: float = field(default_factory=time.perf_counter)
    duration_seconds: float = 0.0

    @property
    def total(self) -> int:
        """Number of files the enumerator produced."""
        return self.placed + self.unchanged + self.planned + self.skipped + self.unreadable + self.failed

    def record_outcome(self, outcome: PlacementOutcome, source: Path) -> None:
        """Count a placement outcome."""

        match outcome:
            case PlacementOutcome.COPIED | PlacementOutcome.MOVED:
                self.placed += 1
            case PlacementOutcome.UNCHANGED:
                self.unchanged += 1
            case PlacementOutcome.PLANNED:
                self.planned += 1
            case PlacementOutcome.FAILED:
                self.failed += 1
                self.failures.append(str(source))

    def finish(self) -> None:
        """Freeze the elapsed time."""

        self.duration_seconds = time.perf_counter() - self.start_time


@final
class SortService:
    """Sort every matching file below the base directory."""

    config: RunConfig
    renderer: TemplateRenderer
    engine: PlacementEngine

    def __init__(
        self,
        config: RunConfig,
        *,
        tag_reader: TagReaderPort | None = None,
        enumerate_files: FileEnumerator = list_files,
    ) -> None:
        self.config = config
        self._tag_reader = tag_reader or TagReader()
        self._enumerate_files = enumerate_files
        self.renderer = TemplateRenderer(
            config.template,
            allow_missing_album=config.allow_missing_album_info,
            replace_spaces=config.replace_spaces,
        )
        self.engine = PlacementEngine(
            config.target_dir,
            use_copy=config.use_copy,
            dry_run=config.dry_run,
        )

    def run(self) -> RunSummary:
        """Process each discovered file to completion before the next one.

        Returns:
            RunSummary: Per-outcome counters.

        Raises:
            TargetRootMissingError: If the target directory is missing when the
                first file is placed. Files after it are not processed.
        """
        summary = RunSummary()
        logger.debug(
            "Scanning %s for %s (template=%r, dry_run=%s, copy=%s)",
            self.config.base_dir,
            self.config.pattern,
            self.config.template,
            self.config.dry_run,
            self.config.use_copy,
        )
        for entry in self._enumerate_files(self.config.base_dir, self.config.pattern):
            self.process_entry(entry, summary)
        summary.finish()
        return summary

    def process_entry(self, entry: FileEntry, summary: RunSummary) -> None:
        """Read, render and place a single file, recording what happened."""

        source = entry.full_path
        try:
            tags = self._tag_reader.read_tags(source)
        except UnsupportedFormatError as e:
            self._log_skip(source, str(e))
            summary.skipped += 1
            return
        except UnreadableFileError:
            logger.error(
                "File %s is not readable.",
                source,
                extra={
                    "placement_event": PlacementEvent.FILE_UNREADABLE,
                    "source_path": str(source),
                    "source_base_path": str(self.config.base_dir),
                },
            )
            summary.unreadable += 1
            return

        result = self.renderer.render(tags, entry.short_name)
        if isinstance(result, Skipped):
            self._log_skip(source, result.reason)
            summary.skipped += 1
            return

        outcome = self.engine.place(source, result.relative_path, result.original_filename)
        summary.record_outcome(outcome, source)

    def _log_skip(self, source: Path, reason: str) -> None:
        logger.warning(
            "Ignoring %s (%s)",
            source,
            reason,
            extra={
                "placement_event": PlacementEvent.FILE_SKIP,
                "source_path": str(source),
                "source_base_path": str(self.config.base_dir),
                "reason": reason,
            },
        )


__all__ = ["FileEnumerator", "RunSummary", "SortService", "TagReaderPort"]
