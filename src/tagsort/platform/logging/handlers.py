"""Rich console handler for placement events.

Where: platform/logging/handlers.py
What: Render structured placement records with icons and compact paths.
Why: Keep per-file output readable while log records stay plain text.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

from .events import PlacementEvent


class PlacementRichHandler(RichHandler):
    """Rich handler that styles placement events and the paths they carry."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        PlacementEvent.DIRECTORY_CREATE: ("📁", "cyan", "Creating path "),
        PlacementEvent.FILE_MOVE: ("📦", "magenta", "Moving "),
        PlacementEvent.FILE_COPY: ("📄", "blue", "Copying "),
        PlacementEvent.FILE_UNCHANGED: ("✓", "green", "Already in place "),
        PlacementEvent.FILE_SKIP: ("↪️", "yellow", "Ignoring "),
        PlacementEvent.FILE_UNREADABLE: ("⛔", "red", "Not readable "),
        PlacementEvent.FILE_ERROR: ("⛔", "red", "Failed "),
    }
    _ARROW_EVENTS: ClassVar[frozenset[str]] = frozenset(
        {
            PlacementEvent.FILE_MOVE,
            PlacementEvent.FILE_COPY,
            PlacementEvent.FILE_ERROR,
        }
    )
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path relative to ``base`` with at most a few trailing segments.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Styled path with an ellipsis when leading segments were dropped.
        """
        display_path = self._to_pure_path(path)
        if base:
            try:
                relative = display_path.relative_to(self._to_pure_path(base))
            except ValueError:
                relative = None
            if relative is not None and str(relative) not in {"", "."}:
                display_path = relative

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        parts = [part for part in display_path.parts if part and part != anchor]

        prefix = anchor.rstrip("\\/") + separator if anchor else ""
        if len(parts) > self._PATH_SEGMENT_LIMIT:
            parts = parts[-self._PATH_SEGMENT_LIMIT:]
            prefix = "…" + separator

        text = Text()
        for char in prefix + separator.join(parts) or ".":
            color = "magenta" if char in {separator, "…"} else "white"
            _ = text.append(char, style=Style(color=color))
        return text

    def _render_placement_message(self, record: logging.LogRecord) -> Text | None:
        """Render a record carrying ``placement_event`` extras, if any."""

        event = getattr(record, "placement_event", None)
        if not isinstance(event, str):
            return None

        icon, color, label = self._EVENT_STYLES.get(event, ("ℹ️", "blue", ""))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(label)

        source_path = getattr(record, "source_path", None)
        target_path = getattr(record, "target_path", None)
        if source_path:
            _ = body.append_text(
                self._format_path(str(source_path), getattr(record, "source_base_path", None))
            )
        if target_path and (event in self._ARROW_EVENTS or not source_path):
            if source_path:
                _ = body.append(" → ")
            _ = body.append_text(
                self._format_path(str(target_path), getattr(record, "target_base_path", None))
            )

        detail = getattr(record, "reason", None) or getattr(record, "error_message", None)
        if detail:
            _ = body.append(f" ({detail})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for placement events."""

        placement_text = self._render_placement_message(record)
        if placement_text is not None:
            return placement_text

        if record.levelno >= logging.ERROR:
            return Text(f"❌ {message}", style=Style(color="red"))
        if record.levelno >= logging.WARNING:
            return Text(f"⚠️  {message}", style=Style(color="yellow"))
        return super().render_message(record, message)


__all__ = ["PlacementRichHandler"]
