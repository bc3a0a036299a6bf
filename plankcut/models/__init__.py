from .geometry import Point2D, RoomBounds, get_room_bounds
from .cutting import (
    CutPosition, CutRequirement, BoardRef, Offcut, PlankAllocation, CutList, CutSummary,
)
from .parameters import ProjectConfig, OptimizationWeights
from .context import AllocationContext

__all__ = [
    "Point2D", "RoomBounds", "get_room_bounds",
    "CutPosition", "CutRequirement", "BoardRef", "Offcut", "PlankAllocation", "CutList", "CutSummary",
    "ProjectConfig", "OptimizationWeights",
    "AllocationContext",
]
