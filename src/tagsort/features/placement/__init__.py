"""
Summary: Placement feature exports.
Why: Expose the engine, its outcomes and the fatal root error together.
"""

from .usecases.placement import PlacementEngine, PlacementOutcome, TargetRootMissingError

__all__ = ["PlacementEngine", "PlacementOutcome", "TargetRootMissingError"]
