"""Console rendering for run results."""

from .summary import SummaryDisplay

__all__ = ["SummaryDisplay"]
