"""Allocation context — working state of a single allocation pass."""

from __future__ import annotations
from pydantic import BaseModel

from .cutting import Offcut, PlankAllocation


class AllocationContext(BaseModel):
    """
    Holds all state while requirements are assigned to stock.

    The offcut pool is an arena: offcuts are appended in creation order
    and addressed by index, and the first-fit scan walks it front to back.
    A context belongs to one run and is discarded with it.
    """
    # Input
    plank_length: float
    saw_kerf: float
    min_cut_length: float

    # Offcut arena, allocated and free alike
    offcuts: list[Offcut] = []

    # Output
    plank_allocations: list[PlankAllocation] = []
    allocations_by_plank: dict[int, PlankAllocation] = {}
    cuts: dict[int, int] = {}
    full_planks: int = 0
    total_material: float = 0
    waste: float = 0
    plank_counter: int = 0

    def record_cut(self, length: int) -> None:
        self.cuts[length] = self.cuts.get(length, 0) + 1

    def add_waste(self, length: float) -> None:
        self.waste += length

    def consume_full_plank(self) -> None:
        """Account for a plank bought; it gets no allocation record."""
        self.full_planks += 1
        self.total_material += self.plank_length

    def purchase_plank(self) -> PlankAllocation:
        """Buy a new numbered plank to cut from."""
        self.consume_full_plank()
        self.plank_counter += 1
        allocation = PlankAllocation(plank_number=self.plank_counter)
        self.plank_allocations.append(allocation)
        self.allocations_by_plank[allocation.plank_number] = allocation
        return allocation

    def get_allocation(self, plank_number: int) -> PlankAllocation | None:
        return self.allocations_by_plank.get(plank_number)

    def find_offcut(self, min_length: float) -> int | None:
        """Index of the first free offcut at least `min_length` long."""
        for index, offcut in enumerate(self.offcuts):
            if not offcut.allocated and offcut.length >= min_length:
                return index
        return None

    def keep_remainder(
        self, remainder: float, source_row: int, source_board: int, source_plank: int,
    ) -> None:
        """
        Pool a remainder if it is long enough to reuse, otherwise
        trim it to waste. Zero and negative remainders add nothing.
        """
        if remainder >= self.min_cut_length:
            self.offcuts.append(Offcut(
                length=remainder,
                source_row=source_row,
                source_board=source_board,
                source_plank=source_plank,
            ))
        elif remainder > 0:
            self.waste += remainder
