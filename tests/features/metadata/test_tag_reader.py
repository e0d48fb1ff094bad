"""Tests for tag reading."""

from pathlib import Path
from typing import TypeAlias

import pytest
from mutagen import MutagenError
from pytest_mock import MockerFixture

from tagsort.features.metadata import TagReader, UnreadableFileError, UnsupportedFormatError
from tagsort.features.metadata.usecases.extraction._tag_utils import (
    clean_text,
    parse_slash_separated,
    parse_year,
)
from tagsort.features.metadata.usecases.extraction.format_extractors import (
    DsfExtractor,
    FlacExtractor,
    M4aExtractor,
    Mp3Extractor,
)
from tagsort.shared.track_metadata import TrackMetadata

TagDict: TypeAlias = dict[str, object]


@pytest.fixture
def mock_mp3_metadata() -> TagDict:
    """EasyID3-style tags as mutagen exposes them."""
    return {
        "title": ["We Will Rock You"],
        "artist": ["Queen"],
        "album": ["News of the World"],
        "genre": ["Rock"],
        "tracknumber": ["1/11"],
        "date": ["1977-10-28"],
    }


def _audio_file(tmp_path: Path, name: str) -> Path:
    path = tmp_path / name
    _ = path.write_bytes(b"\x00" * 16)
    return path


class TestTagReader:
    """Test cases for TagReader."""

    def test_mp3_extraction(
        self, tmp_path: Path, mocker: MockerFixture, mock_mp3_metadata: TagDict
    ) -> None:
        file_class = mocker.Mock(return_value=mock_mp3_metadata)
        _ = mocker.patch.object(Mp3Extractor, "FILE_CLASS", file_class)
        path = _audio_file(tmp_path, "track.MP3")

        metadata = TagReader().read_tags(path)

        assert metadata == TrackMetadata(
            title="We Will Rock You",
            artist="Queen",
            album="News of the World",
            genre="Rock",
            year=1977,
            track_number=1,
            track_total=11,
            file_extension=".mp3",
        )
        assert file_class.call_args.kwargs == {"ID3": mocker.ANY}

    def test_missing_tags_yield_empty_record(self, tmp_path: Path, mocker: MockerFixture) -> None:
        _ = mocker.patch.object(FlacExtractor, "FILE_CLASS", mocker.Mock(return_value={}))
        path = _audio_file(tmp_path, "track.flac")

        metadata = TagReader().read_tags(path)

        assert metadata == TrackMetadata(file_extension=".flac")

    def test_blank_values_become_none(self, tmp_path: Path, mocker: MockerFixture) -> None:
        tags = {"artist": ["  "], "album": [""], "title": [" Song "]}
        _ = mocker.patch.object(Mp3Extractor, "FILE_CLASS", mocker.Mock(return_value=tags))

        metadata = TagReader().read_tags(_audio_file(tmp_path, "a.mp3"))

        assert metadata.artist is None
        assert metadata.album is None
        assert metadata.title == "Song"

    def test_m4a_track_tuple(self, tmp_path: Path, mocker: MockerFixture) -> None:
        tags = {"\xa9ART": ["Daft Punk"], "\xa9gen": ["House"], "trkn": [(3, 14)], "\xa9day": ["2001"]}
        _ = mocker.patch.object(M4aExtractor, "FILE_CLASS", mocker.Mock(return_value=tags))

        metadata = TagReader().read_tags(_audio_file(tmp_path, "a.m4a"))

        assert metadata.artist == "Daft Punk"
        assert metadata.genre == "House"
        assert (metadata.track_number, metadata.track_total) == (3, 14)
        assert metadata.year == 2001

    def test_dsf_id3_frames(self, tmp_path: Path, mocker: MockerFixture) -> None:
        frame = mocker.Mock(text=["Kraftwerk"])
        _ = mocker.patch.object(
            DsfExtractor, "FILE_CLASS", mocker.Mock(return_value={"TPE1": frame})
        )

        metadata = TagReader().read_tags(_audio_file(tmp_path, "a.dsf"))

        assert metadata.artist == "Kraftwerk"
        assert metadata.album is None

    def test_unsupported_format(self, tmp_path: Path) -> None:
        with pytest.raises(UnsupportedFormatError, match="Unsupported file format"):
            _ = TagReader().read_tags(_audio_file(tmp_path, "notes.txt"))

    def test_nonexistent_file(self, tmp_path: Path) -> None:
        with pytest.raises(UnreadableFileError, match="is not readable"):
            _ = TagReader().read_tags(tmp_path / "missing.mp3")

    def test_mutagen_error_is_unreadable(self, tmp_path: Path, mocker: MockerFixture) -> None:
        _ = mocker.patch.object(
            Mp3Extractor, "FILE_CLASS", mocker.Mock(side_effect=MutagenError("can't sync"))
        )

        with pytest.raises(UnreadableFileError) as excinfo:
            _ = TagReader().read_tags(_audio_file(tmp_path, "broken.mp3"))

        assert isinstance(excinfo.value.__cause__, MutagenError)

    def test_supported_formats(self) -> None:
        assert {".mp3", ".flac", ".m4a", ".ogg", ".opus", ".dsf"} == TagReader.supported_formats()


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("3/12", (3, 12)), ("7", (7, None)), ("", (None, None)), ("x/2", (None, 2)), (" 4 / 9 ", (4, 9))],
)
def test_parse_slash_separated(raw: str, expected: tuple[int | None, int | None]) -> None:
    assert parse_slash_separated(raw) == expected


def test_parse_year() -> None:
    assert parse_year("1977-10-28") == 1977
    assert parse_year("77") is None


def test_clean_text() -> None:
    assert clean_text(None) is None
    assert clean_text("  ") is None
    assert clean_text(" Queen ") == "Queen"
