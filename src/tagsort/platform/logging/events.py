"""Structured event identifiers attached to placement log records."""

from enum import StrEnum


class PlacementEvent(StrEnum):
    """Values stored in ``record.placement_event``."""

    DIRECTORY_CREATE = "placement.directory.create"
    FILE_MOVE = "placement.file.move"
    FILE_COPY = "placement.file.copy"
    FILE_UNCHANGED = "placement.file.unchanged"
    FILE_SKIP = "placement.file.skip"
    FILE_UNREADABLE = "placement.file.unreadable"
    FILE_ERROR = "placement.file.error"


__all__ = ["PlacementEvent"]
