"""Shared value objects used across features."""

from .track_metadata import TrackMetadata

__all__ = ["TrackMetadata"]
