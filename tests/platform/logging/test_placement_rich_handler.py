"""Tests for the ``PlacementRichHandler`` rendering and logger setup."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from tagsort.platform.logging import (
    PlacementEvent,
    PlacementRichHandler,
    setup_logger,
    verbosity_to_level,
)


def _make_handler() -> PlacementRichHandler:
    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return PlacementRichHandler(console=console)


def _build_record(level: int = logging.INFO, msg: str = "", **extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name="tagsort",
        level=level,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_move_event_relativizes_target_path() -> None:
    handler = _make_handler()
    record = _build_record(
        placement_event=PlacementEvent.FILE_MOVE,
        source_path="/in/song.mp3",
        target_path="/library/Queen/Jazz/song.mp3",
        target_base_path="/library",
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert "Moving /in/song.mp3 → Queen/Jazz/song.mp3" in rendered.plain


def test_long_paths_are_truncated() -> None:
    handler = _make_handler()
    record = _build_record(
        placement_event=PlacementEvent.FILE_UNREADABLE,
        source_path="/home/user/music/incoming/a/b/c/track.mp3",
    )

    plain = handler.render_message(record, "").plain

    assert "…/a/b/c/track.mp3" in plain
    assert "/home/user" not in plain


def test_skip_event_shows_reason() -> None:
    handler = _make_handler()
    record = _build_record(
        level=logging.WARNING,
        placement_event=PlacementEvent.FILE_SKIP,
        source_path="/in/a/song.mp3",
        source_base_path="/in",
        reason="artist info missing",
    )

    plain = handler.render_message(record, "").plain

    assert "Ignoring a/song.mp3 (artist info missing)" in plain


def test_directory_event_shows_target_only() -> None:
    handler = _make_handler()
    record = _build_record(
        level=logging.DEBUG,
        placement_event=PlacementEvent.DIRECTORY_CREATE,
        target_path="/library/Queen",
        target_base_path="/library",
    )

    assert "Creating path Queen" in handler.render_message(record, "").plain


def test_plain_error_records() -> None:
    handler = _make_handler()
    record = _build_record(level=logging.ERROR, msg="boom")

    rendered = handler.render_message(record, "boom")

    assert isinstance(rendered, Text)
    assert "boom" in rendered.plain


def test_verbosity_to_level() -> None:
    assert verbosity_to_level(0) == logging.WARNING
    assert verbosity_to_level(1) == logging.INFO
    assert verbosity_to_level(2) == logging.DEBUG
    assert verbosity_to_level(5) == logging.DEBUG


def test_setup_logger_splits_streams_and_writes_file(tmp_path: Any) -> None:
    log_file = tmp_path / "logs" / "tagsort.log"

    logger = setup_logger(log_file=log_file, console_level=logging.INFO)
    try:
        stdout_handler, stderr_handler, file_handler = logger.handlers
        assert stdout_handler.level == logging.INFO
        assert not stdout_handler.filter(_build_record(level=logging.WARNING))
        assert stdout_handler.filter(_build_record(level=logging.INFO))
        assert stderr_handler.level == logging.WARNING

        logger.debug("written to file only")
        file_handler.flush()
        assert "written to file only" in log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger()
