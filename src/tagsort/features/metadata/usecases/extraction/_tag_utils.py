"""Tag utility helpers.

Where: features/metadata/usecases/extraction/_tag_utils.py
What: Pure helpers for parsing raw tag strings.
Why: Keep the extractors free of string munging.
"""

from __future__ import annotations

__all__ = [
    "clean_text",
    "safe_get_first",
    "parse_slash_separated",
    "parse_tuple_numbers",
    "parse_year",
]


def clean_text(value: str | None) -> str | None:
    """Strip surrounding whitespace and collapse blank values to None."""
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def safe_get_first(data: list[str] | None, default: str = "") -> str:
    """Safely get the first element from a list or return the default."""
    return data[0] if data else default


def parse_slash_separated(value: str) -> tuple[int | None, int | None]:
    """Parse a string in 'number/total' format.

    Returns a tuple (number, total) or (None, None) if conversion fails.
    """
    parts: list[str] = [part.strip() for part in value.split(sep="/")] if value else []
    num: int | None = int(parts[0]) if parts and parts[0].isdigit() else None
    total: int | None = int(parts[1]) if len(parts) > 1 and parts[1].isdigit() else None
    return num, total


def parse_tuple_numbers(data: list[tuple[int, int]] | None) -> tuple[int | None, int | None]:
    """Parse a list of numeric tuples and return the first tuple with zeros converted to None."""
    if data:
        first: tuple[int, int] = data[0]
        num: int | None = first[0] if first[0] != 0 else None
        total: int | None = first[1] if first[1] != 0 else None
        return num, total
    return None, None


def parse_year(date_str: str) -> int | None:
    """Parse a year from a string (expects the first 4 characters to be digits)."""
    return int(date_str[:4]) if date_str and len(date_str) >= 4 and date_str[:4].isdigit() else None
