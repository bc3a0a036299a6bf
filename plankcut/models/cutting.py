"""Cut analysis models — requirements, offcuts, plank allocations, results."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict


class CutPosition(str, Enum):
    TOP = "top"         # Board starts above the room edge, cut at its start
    FULL = "full"       # Whole board visible, or spans the room on both sides
    BOTTOM = "bottom"   # Board runs past the far wall, cut at its end


class CutRequirement(BaseModel):
    """One visible board segment that has to be produced."""
    model_config = ConfigDict(frozen=True)

    length: int
    row_index: int
    board_index: int
    position: CutPosition


class BoardRef(BaseModel):
    """Row/board slot a piece ends up in."""
    row_index: int
    board_index: int


class Offcut(BaseModel):
    """
    Leftover material from a cut.

    Starts free. An offcut is allocated at most once, when a requirement
    is cut from it, and never goes back to being free.
    """
    length: float
    source_row: int
    source_board: int
    source_plank: int
    allocated: bool = False
    allocated_to: BoardRef | None = None

    def mark_allocated(self, row_index: int, board_index: int) -> None:
        if self.allocated:
            raise ValueError(
                f"Offcut from plank {self.source_plank} is already allocated"
            )
        self.allocated = True
        self.allocated_to = BoardRef(row_index=row_index, board_index=board_index)


class PlankAllocation(BaseModel):
    """What was cut from one purchased plank, and what was left over."""
    plank_number: int
    cuts: list[int] = []
    offcut_length: float = 0


class CutList(BaseModel):
    """The complete cut analysis for one configuration."""
    full_planks: int
    cuts: dict[int, int]            # Cut length -> number of pieces
    offcuts: list[Offcut]
    waste: float
    total_material: float
    efficiency: float               # Percent of purchased material used
    unique_cuts: int
    requirements: list[CutRequirement]
    plank_allocations: list[PlankAllocation]

    @property
    def total_cuts(self) -> int:
        """Pieces that needed a saw cut."""
        return sum(self.cuts.values())

    @property
    def total_pieces(self) -> int:
        """Cut pieces plus purchased planks, as printed on the cut sheet."""
        return self.total_cuts + self.full_planks

    @property
    def leftover_length(self) -> float:
        """Length of all offcuts nothing was cut from."""
        return sum(o.length for o in self.offcuts if not o.allocated)

    @property
    def reused_offcuts(self) -> int:
        return sum(1 for o in self.offcuts if o.allocated)

    def sorted_cuts(self) -> list[tuple[int, int]]:
        """Histogram entries, longest cut first."""
        return sorted(self.cuts.items(), key=lambda item: item[0], reverse=True)


class CutSummary(BaseModel):
    """Headline figures for a cut analysis."""
    full_planks: int = 0
    total_pieces: int = 0
    unique_cuts: int = 0
    reused_offcuts: int = 0
    leftover_length: float = 0
    waste: float = 0
    total_material: float = 0
    efficiency: float = 0

    @classmethod
    def from_cut_list(cls, cut_list: CutList) -> CutSummary:
        return cls(
            full_planks=cut_list.full_planks,
            total_pieces=cut_list.total_pieces,
            unique_cuts=cut_list.unique_cuts,
            reused_offcuts=cut_list.reused_offcuts,
            leftover_length=cut_list.leftover_length,
            waste=cut_list.waste,
            total_material=cut_list.total_material,
            efficiency=cut_list.efficiency,
        )
