"""Application services."""

from .sort_service import RunSummary, SortService

__all__ = ["RunSummary", "SortService"]
