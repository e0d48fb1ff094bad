"""Audio file tag reading.

Where: features/metadata/usecases/extraction/tag_reader.py
What: Provide the TagReader facade routing files to format extractors.
Why: The sort pipeline needs one call that either returns tags or signals failure.
"""

from pathlib import Path
from typing import ClassVar

from mutagen import MutagenError

from tagsort.platform.filesystem import is_readable_file
from tagsort.shared.track_metadata import TrackMetadata

from ._base_extractors import AudioFormatExtractor
from .format_extractors import (
    DsfExtractor,
    FlacExtractor,
    M4aExtractor,
    Mp3Extractor,
    OggVorbisExtractor,
    OpusExtractor,
)

__all__ = ["TagReader", "UnreadableFileError", "UnsupportedFormatError"]


class UnreadableFileError(OSError):
    """Raised when a file cannot be opened or its tags cannot be parsed."""


class UnsupportedFormatError(ValueError):
    """Raised for file extensions without a registered extractor."""


class TagReader:
    """Facade for reading tags from audio files.

    The extractor is chosen by file extension.
    """

    _format_map: ClassVar[dict[str, AudioFormatExtractor]] = {
        ".mp3": Mp3Extractor(),
        ".flac": FlacExtractor(),
        ".ogg": OggVorbisExtractor(),
        ".opus": OpusExtractor(),
        ".m4a": M4aExtractor(),
        ".dsf": DsfExtractor(),
    }

    @classmethod
    def supported_formats(cls) -> frozenset[str]:
        """Return the lower-case extensions this reader understands."""
        return frozenset(cls._format_map)

    def read_tags(self, file_path: Path) -> TrackMetadata:
        """Read the tags of a single audio file.

        Args:
            file_path: Path to the audio file.

        Returns:
            TrackMetadata: Extracted tags; fields missing in the file are None.

        Raises:
            UnsupportedFormatError: If the extension has no extractor.
            UnreadableFileError: If the file cannot be read or parsed.
        """
        ext = file_path.suffix.lower()
        extractor = self._format_map.get(ext)
        if extractor is None:
            raise UnsupportedFormatError(f"Unsupported file format: {ext or file_path.name}")

        if not is_readable_file(file_path):
            raise UnreadableFileError(f"File {file_path} is not readable.")

        try:
            return extractor.extract_metadata(file_path)
        except (MutagenError, OSError) as e:
            raise UnreadableFileError(f"File {file_path} is not readable.") from e
