"""Result aggregation — folds allocator output into a CutList."""

from __future__ import annotations

from plankcut.models import CutList, CutRequirement
from plankcut.core.allocator import AllocationResult


class ResultAggregator:

    def aggregate(
        self, requirements: list[CutRequirement], allocation: AllocationResult,
    ) -> CutList:
        return CutList(
            full_planks=allocation.full_planks,
            cuts=allocation.cuts,
            offcuts=allocation.offcuts,
            waste=allocation.waste,
            total_material=allocation.total_material,
            efficiency=self.efficiency(allocation.total_material, allocation.waste),
            unique_cuts=len(allocation.cuts),
            requirements=requirements,
            plank_allocations=allocation.plank_allocations,
        )

    @staticmethod
    def efficiency(total_material: float, waste: float) -> float:
        """Percentage of purchased material that ends up on the floor."""
        if total_material <= 0:
            return 0.0
        return (total_material - waste) / total_material * 100
