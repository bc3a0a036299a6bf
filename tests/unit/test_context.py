"""Tests for AllocationContext bookkeeping."""

from __future__ import annotations

import pytest

from plankcut.models import AllocationContext, Offcut


@pytest.fixture
def context() -> AllocationContext:
    return AllocationContext(plank_length=2400, saw_kerf=3, min_cut_length=300)


class TestAllocationContext:

    def test_purchase_numbers_planks(self, context: AllocationContext) -> None:
        first = context.purchase_plank()
        second = context.purchase_plank()
        assert (first.plank_number, second.plank_number) == (1, 2)
        assert context.full_planks == 2
        assert context.total_material == 4800
        assert context.get_allocation(2) is second
        assert context.get_allocation(3) is None

    def test_consume_full_plank_has_no_record(self, context: AllocationContext) -> None:
        context.consume_full_plank()
        assert context.full_planks == 1
        assert context.plank_allocations == []
        assert context.plank_counter == 0

    def test_record_cut(self, context: AllocationContext) -> None:
        context.record_cut(600)
        context.record_cut(600)
        context.record_cut(1200)
        assert context.cuts == {600: 2, 1200: 1}

    def test_find_offcut_skips_allocated_and_short(self, context: AllocationContext) -> None:
        context.offcuts = [
            Offcut(length=900, source_row=0, source_board=0, source_plank=1, allocated=True),
            Offcut(length=400, source_row=0, source_board=0, source_plank=1),
            Offcut(length=900, source_row=1, source_board=0, source_plank=2),
            Offcut(length=1500, source_row=2, source_board=0, source_plank=3),
        ]
        assert context.find_offcut(603) == 2
        assert context.find_offcut(400) == 1
        assert context.find_offcut(2000) is None

    @pytest.mark.parametrize(
        ("remainder", "pooled", "waste"),
        [(300, [300], 0), (299, [], 299), (0, [], 0), (-5, [], 0)],
    )
    def test_keep_remainder(
        self, context: AllocationContext, remainder: float, pooled: list[float], waste: float,
    ) -> None:
        context.keep_remainder(remainder, source_row=0, source_board=1, source_plank=1)
        assert [o.length for o in context.offcuts] == pooled
        assert context.waste == waste

    def test_contexts_do_not_share_state(self) -> None:
        a = AllocationContext(plank_length=2400, saw_kerf=3, min_cut_length=300)
        b = AllocationContext(plank_length=2400, saw_kerf=3, min_cut_length=300)
        a.purchase_plank()
        a.record_cut(600)
        assert b.plank_allocations == []
        assert b.cuts == {}
