# Where: tagsort.shared.track_metadata
# What: Canonical TrackMetadata dataclass shared across features.
# Why: The tag reader produces it and the template renderer consumes it.

from dataclasses import dataclass


@dataclass(frozen=True)
class TrackMetadata:
    """Metadata for a music track."""

    title: str | None = None
    artist: str | None = None
    album: str | None = None
    genre: str | None = None
    year: int | None = None
    track_number: int | None = None
    track_total: int | None = None
    file_extension: str | None = None


__all__ = ["TrackMetadata"]
