"""Format-specific metadata extractors.

Where: features/metadata/usecases/extraction/format_extractors.py
What: Define concrete metadata extractors for supported audio formats.
Why: Separate format logic from the facade to simplify future extensions.
"""

from __future__ import annotations

from typing import Any, ClassVar, cast

from mutagen.dsf import DSF
from mutagen.easyid3 import EasyID3
from mutagen.flac import FLAC
from mutagen.mp3 import MP3
from mutagen.mp4 import MP4
from mutagen.oggopus import OggOpus
from mutagen.oggvorbis import OggVorbis

from tagsort.platform.logging import logger

from ._base_extractors import BaseAudioExtractor, BaseTagExtractor
from ._tag_utils import parse_tuple_numbers

__all__ = [
    "Mp3Extractor",
    "FlacExtractor",
    "OggVorbisExtractor",
    "OpusExtractor",
    "M4aExtractor",
    "DsfExtractor",
]

_VORBIS_MAPPING: dict[str, str] = {
    "title": "title",
    "artist": "artist",
    "album": "album",
    "genre": "genre",
    "track": "tracknumber",
    "date": "date",
}


class Mp3Extractor(BaseAudioExtractor):
    """Extractor for MP3 files using EasyID3 tags."""

    FILE_CLASS: ClassVar[type | None] = MP3
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {"ID3": EasyID3}
    TAG_MAPPING: ClassVar[dict[str, str]] = dict(_VORBIS_MAPPING)

    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        return BaseTagExtractor.get_str_tag(tags, key)


class FlacExtractor(BaseAudioExtractor):
    """Extractor for FLAC files."""

    FILE_CLASS: ClassVar[type | None] = FLAC
    TAG_MAPPING: ClassVar[dict[str, str]] = dict(_VORBIS_MAPPING)

    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        return BaseTagExtractor.get_str_tag(tags, key)


class OggVorbisExtractor(BaseAudioExtractor):
    """Extractor for Ogg Vorbis (.ogg) files."""

    FILE_CLASS: ClassVar[type | None] = OggVorbis
    TAG_MAPPING: ClassVar[dict[str, str]] = dict(_VORBIS_MAPPING)

    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        return BaseTagExtractor.get_str_tag(tags, key)


class OpusExtractor(BaseAudioExtractor):
    """Extractor for Opus (.opus) files using Vorbis comments."""

    FILE_CLASS: ClassVar[type | None] = OggOpus
    TAG_MAPPING: ClassVar[dict[str, str]] = dict(_VORBIS_MAPPING)

    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        return BaseTagExtractor.get_str_tag(tags, key)


class M4aExtractor(BaseAudioExtractor):
    """Extractor for M4A/AAC files using MP4 atoms."""

    FILE_CLASS: ClassVar[type | None] = MP4
    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "\xa9nam",
        "artist": "\xa9ART",
        "album": "\xa9alb",
        "genre": "\xa9gen",
        "track": "trkn",
        "date": "\xa9day",
    }

    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        if key == "trkn":
            value = cast(list[tuple[int, int]] | None, tags.get(key))
            if not value:
                return None
            num, total = parse_tuple_numbers(data=value)
            return f"{num or ''}/{total or ''}"
        return BaseTagExtractor.get_str_tag(tags, key)


class DsfExtractor(BaseAudioExtractor):
    """Extractor for DSF files, which carry raw ID3 frames."""

    FILE_CLASS: ClassVar[type | None] = DSF
    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "TIT2",
        "artist": "TPE1",
        "album": "TALB",
        "genre": "TCON",
        "track": "TRCK",
        "date": "TDRC",
    }

    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        frame: Any = tags.get(key)
        if frame is None:
            return None
        text: Any = getattr(frame, "text", None)
        if isinstance(text, (list, tuple)):
            return str(text[0]) if text else None
        if text is None:
            logger.debug("ID3 frame %r carries no text", key)
            return None
        return str(text)
