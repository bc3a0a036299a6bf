"""Project configuration — the snapshot a cut analysis runs against."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .geometry import Point2D


def _default_room() -> list[Point2D]:
    return [
        Point2D(x=0, y=0),
        Point2D(x=5000, y=0),
        Point2D(x=5000, y=4000),
        Point2D(x=0, y=4000),
    ]


class OptimizationWeights(BaseModel):
    """Relative weights a layout search balances when ranking offsets."""
    cutting_simplicity: float = 50
    waste_minimization: float = 50
    visual_randomness: float = 50


class ProjectConfig(BaseModel):
    """
    User-adjustable flooring parameters. All lengths in millimetres.

    Values are taken as given: non-positive plank dimensions or kerf are
    a caller error and the analysis result for them is undefined.
    """
    name: str = "Untitled Project"

    plank_full_length: float = 2400
    plank_width: float = 190
    plank_thickness: float = 14
    visual_gap: float = 2           # Drawn gap between planks, not cut

    room_polygon: list[Point2D] = Field(default_factory=_default_room)

    saw_kerf: float = 3             # Lost to the blade on every cut
    min_cut_length: float = 300     # Shorter offcuts are trimmed to waste

    row_offsets: list[float] = []   # Start of each row's first board, may be negative

    optimization_weights: OptimizationWeights = Field(default_factory=OptimizationWeights)
    max_unique_cuts: int | None = None

    def row_offset(self, row_index: int) -> float:
        """Offset for a row; rows past the end of `row_offsets` start at 0."""
        if row_index < len(self.row_offsets):
            return self.row_offsets[row_index]
        return 0

    def with_row_offsets(self, row_offsets: list[float]) -> ProjectConfig:
        """Copy of this config with a different set of row offsets."""
        return self.model_copy(update={"row_offsets": list(row_offsets)})
