"""Stock allocation — assigns each required cut to a plank or an offcut.

Largest-first greedy with first-fit offcut reuse:

1. Requirements are taken longest first. The sort is stable, so equal
   lengths keep their row/board order; that order decides which
   requirement claims an offcut first.
2. A requirement exactly one plank long takes a whole plank. It is not
   counted as a cut and leaves no offcut.
3. Anything else is cut from the first free offcut in the pool that can
   hold it plus one kerf, or from a newly bought plank when none can.
4. Whatever is left after a cut goes back into the pool if it is at
   least `min_cut_length`, otherwise it is trimmed to waste. Every cut
   also loses one kerf to waste.
5. Offcuts still free at the end are waste.

This is a heuristic, not an optimal cutting-stock solution.
"""

from __future__ import annotations
import logging

from pydantic import BaseModel

from plankcut.models import (
    AllocationContext, CutRequirement, Offcut, PlankAllocation, ProjectConfig,
)

logger = logging.getLogger(__name__)


class AllocationResult(BaseModel):
    """Raw allocator output, before summary statistics."""
    full_planks: int
    cuts: dict[int, int]
    offcuts: list[Offcut]
    waste: float
    total_material: float
    plank_allocations: list[PlankAllocation]


class Allocator:
    """Stateless; every call builds its own offcut pool."""

    def allocate(
        self, requirements: list[CutRequirement], config: ProjectConfig,
    ) -> AllocationResult:
        context = AllocationContext(
            plank_length=config.plank_full_length,
            saw_kerf=config.saw_kerf,
            min_cut_length=config.min_cut_length,
        )

        ordered = sorted(requirements, key=lambda r: r.length, reverse=True)
        for requirement in ordered:
            self._place(requirement, context)

        self._collect_leftovers(context)

        logger.debug(
            "Allocated %d requirements: %d planks, %d offcuts, waste %s",
            len(requirements), context.full_planks, len(context.offcuts), context.waste,
        )
        return AllocationResult(
            full_planks=context.full_planks,
            cuts=context.cuts,
            offcuts=context.offcuts,
            waste=context.waste,
            total_material=context.total_material,
            plank_allocations=context.plank_allocations,
        )

    def _place(self, requirement: CutRequirement, context: AllocationContext) -> None:
        if requirement.length == context.plank_length:
            context.consume_full_plank()
            return

        index = context.find_offcut(requirement.length + context.saw_kerf)
        if index is not None:
            self._cut_from_offcut(requirement, context.offcuts[index], context)
        else:
            self._cut_from_new_plank(requirement, context)

    def _cut_from_offcut(
        self, requirement: CutRequirement, offcut: Offcut, context: AllocationContext,
    ) -> None:
        offcut.mark_allocated(requirement.row_index, requirement.board_index)
        context.record_cut(requirement.length)

        allocation = context.get_allocation(offcut.source_plank)
        if allocation is not None:
            allocation.cuts.append(requirement.length)

        # The remainder stays attributed to the board the plank was first cut for
        context.keep_remainder(
            offcut.length - requirement.length - context.saw_kerf,
            source_row=offcut.source_row,
            source_board=offcut.source_board,
            source_plank=offcut.source_plank,
        )
        context.add_waste(context.saw_kerf)

    def _cut_from_new_plank(
        self, requirement: CutRequirement, context: AllocationContext,
    ) -> None:
        allocation = context.purchase_plank()
        allocation.cuts.append(requirement.length)
        context.record_cut(requirement.length)

        context.keep_remainder(
            context.plank_length - requirement.length - context.saw_kerf,
            source_row=requirement.row_index,
            source_board=requirement.board_index,
            source_plank=allocation.plank_number,
        )
        context.add_waste(context.saw_kerf)

    def _collect_leftovers(self, context: AllocationContext) -> None:
        for offcut in context.offcuts:
            if offcut.allocated:
                continue
            context.add_waste(offcut.length)
            allocation = context.get_allocation(offcut.source_plank)
            if allocation is not None:
                # Last free offcut of a plank wins
                allocation.offcut_length = offcut.length
