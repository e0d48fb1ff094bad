"""Shared base classes for metadata extractors.

Where: features/metadata/usecases/extraction/_base_extractors.py
What: Define abstract base classes that encapsulate shared tag handling logic.
Why: Each format only declares its mutagen class and tag keys.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any, ClassVar, cast, override

from tagsort.platform.logging import logger
from tagsort.shared.track_metadata import TrackMetadata

from ._tag_utils import clean_text, parse_slash_separated, parse_year, safe_get_first

__all__ = [
    "AudioFormatExtractor",
    "BaseTagExtractor",
    "BaseAudioExtractor",
]


class AudioFormatExtractor(abc.ABC):
    """Abstract base class for audio metadata extractors."""

    @abc.abstractmethod
    def extract_metadata(self, file_path: Path) -> TrackMetadata:
        """Extract metadata from an audio file."""
        raise NotImplementedError


class BaseTagExtractor:
    """Provides common helper methods for tag extraction."""

    @staticmethod
    def get_str_tag(tags: Any, key: str, default: str | None = None) -> str | None:
        """Extract the first string value for a key from a tag collection."""
        value: Any = tags.get(key)
        if isinstance(value, list):
            return safe_get_first(data=cast(list[str], value), default=default or "")
        if isinstance(value, str):
            return value
        return default


class BaseAudioExtractor(AudioFormatExtractor, abc.ABC):
    """Base class for mutagen-backed extractors."""

    FILE_CLASS: ClassVar[type | None] = None
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "",
        "artist": "",
        "album": "",
        "genre": "",
        "track": "",
        "date": "",
    }

    def _open_file(self, file_path: Path) -> Any:
        """Open the audio file with its mutagen class."""
        if self.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")
        return self.FILE_CLASS(file_path, **self.FILE_INIT_PARAMS)

    @abc.abstractmethod
    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        """Get a tag value from the audio file."""
        raise NotImplementedError

    @override
    def extract_metadata(self, file_path: Path) -> TrackMetadata:
        """Extract metadata from an audio file.

        Files without any tag block yield a record with every field unset.
        """
        tags = self._open_file(file_path)
        logger.debug("Opened file %s with tags type: %s", file_path, type(tags))

        track_str: str = self._get_tag_value(tags, key=self.TAG_MAPPING["track"]) or ""
        track_number, track_total = parse_slash_separated(value=track_str)

        date_str: str = self._get_tag_value(tags, key=self.TAG_MAPPING["date"]) or ""

        metadata = TrackMetadata(
            title=clean_text(self._get_tag_value(tags, key=self.TAG_MAPPING["title"])),
            artist=clean_text(self._get_tag_value(tags, key=self.TAG_MAPPING["artist"])),
            album=clean_text(self._get_tag_value(tags, key=self.TAG_MAPPING["album"])),
            genre=clean_text(self._get_tag_value(tags, key=self.TAG_MAPPING["genre"])),
            year=parse_year(date_str.strip()),
            track_number=track_number,
            track_total=track_total,
            file_extension=file_path.suffix.lower(),
        )
        logger.debug("Extracted metadata: %s", metadata)
        return metadata
