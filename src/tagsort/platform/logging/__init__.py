"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export configured logger, setup helpers, and the Rich handler.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import logger, setup_logger, verbosity_to_level
from .events import PlacementEvent
from .handlers import PlacementRichHandler

__all__ = [
    "PlacementEvent",
    "PlacementRichHandler",
    "logger",
    "setup_logger",
    "verbosity_to_level",
]
