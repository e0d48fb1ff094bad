"""
Summary: Parse placeholder templates and render them from track tags.
Why: Turn per-file tags into a relative directory path or an explicit skip.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Final, final

from tagsort.shared.track_metadata import TrackMetadata


class TemplateField(StrEnum):
    """Tag fields a template can reference, in the order they are checked."""

    ARTIST = "artist"
    ALBUM = "album"
    TITLE = "title"
    GENRE = "genre"
    TRACK = "track"


PLACEHOLDER_PREFIX: Final[str] = "%"

TOKEN_FIELDS: Final[dict[str, TemplateField]] = {
    "a": TemplateField.ARTIST,
    "A": TemplateField.ALBUM,
    "t": TemplateField.TITLE,
    "g": TemplateField.GENRE,
    "n": TemplateField.TRACK,
}


@dataclass(frozen=True, slots=True)
class LiteralSegment:
    """Template text copied verbatim into the rendered path."""

    text: str


@dataclass(frozen=True, slots=True)
class PlaceholderSegment:
    """A recognised ``%x`` token standing for one tag field."""

    field: TemplateField


TemplateSegment = LiteralSegment | PlaceholderSegment


@dataclass(frozen=True, slots=True)
class Rendered:
    """Successful render: directory path relative to the target root."""

    relative_path: str
    original_filename: str


@dataclass(frozen=True, slots=True)
class Skipped:
    """The file must not be placed; ``reason`` says why."""

    reason: str


RenderResult = Rendered | Skipped


def parse_template(template: str) -> tuple[TemplateSegment, ...]:
    """Split a template into literal and placeholder segments in one scan.

    A ``%`` not followed by a recognised token letter is kept as literal text.

    Args:
        template: Raw template such as ``"%a/%A"``.

    Returns:
        tuple[TemplateSegment, ...]: Ordered segments; adjacent literal text
        is merged into a single segment.
    """
    segments: list[TemplateSegment] = []
    literal: list[str] = []
    index = 0
    length = len(template)

    while index < length:
        char = template[index]
        token = template[index + 1] if index + 1 < length else ""
        if char == PLACEHOLDER_PREFIX and token in TOKEN_FIELDS:
            if literal:
                segments.append(LiteralSegment("".join(literal)))
                literal.clear()
            segments.append(PlaceholderSegment(TOKEN_FIELDS[token]))
            index += 2
            continue
        literal.append(char)
        index += 1

    if literal:
        segments.append(LiteralSegment("".join(literal)))
    return tuple(segments)


def _present(value: str | None) -> str | None:
    return value if value and value.strip() else None


def field_value(tags: TrackMetadata, field: TemplateField) -> str | None:
    """Return the text substituted for ``field``, or None when the tag is absent."""

    match field:
        case TemplateField.ARTIST:
            return _present(tags.artist)
        case TemplateField.ALBUM:
            return _present(tags.album)
        case TemplateField.TITLE:
            return _present(tags.title)
        case TemplateField.GENRE:
            return _present(tags.genre)
        case TemplateField.TRACK:
            return str(tags.track_number) if tags.track_number is not None else None


@final
class TemplateRenderer:
    """Render one template for many files with fixed run options."""

    _WHITESPACE: ClassVar[re.Pattern[str]] = re.compile(r"\s")

    template: str
    segments: tuple[TemplateSegment, ...]
    allow_missing_album: bool
    replace_spaces: bool

    def __init__(
        self,
        template: str,
        *,
        allow_missing_album: bool = True,
        replace_spaces: bool = False,
    ) -> None:
        self.template = template
        self.segments = parse_template(template)
        self.allow_missing_album = allow_missing_album
        self.replace_spaces = replace_spaces

    @property
    def referenced_fields(self) -> tuple[TemplateField, ...]:
        """Fields used by the template, in check order."""
        used = {segment.field for segment in self.segments if isinstance(segment, PlaceholderSegment)}
        return tuple(field for field in TemplateField if field in used)

    def render(self, tags: TrackMetadata, original_filename: str = "") -> RenderResult:
        """Render the template from ``tags``.

        Referenced fields are checked in ``TemplateField`` order and the first
        missing one decides the skip reason. A missing album renders as an
        empty string when ``allow_missing_album`` is set. Substituted values
        are never scanned for tokens again.

        Args:
            tags: Tags read from the file.
            original_filename: On-disk file name, returned unchanged.

        Returns:
            RenderResult: ``Rendered`` with the relative path, or ``Skipped``.
        """
        values: dict[TemplateField, str] = {}
        for field in self.referenced_fields:
            value = field_value(tags, field)
            if value is None:
                if field is TemplateField.ALBUM and self.allow_missing_album:
                    value = ""
                else:
                    return Skipped(f"{field.value} info missing")
            values[field] = value

        rendered = "".join(
            segment.text if isinstance(segment, LiteralSegment) else values[segment.field]
            for segment in self.segments
        )
        if self.replace_spaces:
            rendered = self._WHITESPACE.sub("_", rendered)
        return Rendered(relative_path=rendered, original_filename=original_filename)


def render(
    template: str,
    tags: TrackMetadata,
    original_filename: str = "",
    *,
    allow_missing_album: bool = True,
    replace_spaces: bool = False,
) -> RenderResult:
    """Render ``template`` once; see ``TemplateRenderer.render``."""

    renderer = TemplateRenderer(
        template,
        allow_missing_album=allow_missing_album,
        replace_spaces=replace_spaces,
    )
    return renderer.render(tags, original_filename)


__all__ = [
    "LiteralSegment",
    "PLACEHOLDER_PREFIX",
    "PlaceholderSegment",
    "RenderResult",
    "Rendered",
    "Skipped",
    "TOKEN_FIELDS",
    "TemplateField",
    "TemplateRenderer",
    "TemplateSegment",
    "field_value",
    "parse_template",
    "render",
]
