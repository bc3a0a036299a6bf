"""Requirement generation — which board segments a layout needs."""

from __future__ import annotations
import logging
import math

from plankcut.models import (
    CutPosition, CutRequirement, ProjectConfig, get_room_bounds,
)

logger = logging.getLogger(__name__)


DEFAULT_ROOM_HEIGHT = 4000  # Used when the room outline has fewer than 2 points
DEFAULT_ROOM_WIDTH = 5000


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit, halves rounding up."""
    return math.floor(value + 0.5)


class RequirementGenerator:
    """
    Walks every row of the layout and emits one requirement per
    visible board segment.

    Rows run along the room height. Each row starts at its configured
    offset and lays boards end to end; the parts of each board that
    fall inside [0, room_height] are what has to be cut.
    """

    def room_height(self, config: ProjectConfig) -> float:
        if len(config.room_polygon) < 2:
            return DEFAULT_ROOM_HEIGHT
        return get_room_bounds(config.room_polygon).height

    def room_width(self, config: ProjectConfig) -> float:
        if len(config.room_polygon) < 2:
            return DEFAULT_ROOM_WIDTH
        return get_room_bounds(config.room_polygon).width

    def row_count(self, config: ProjectConfig) -> int:
        return math.ceil(self.room_width(config) / config.plank_width)

    def generate(self, config: ProjectConfig) -> list[CutRequirement]:
        room_height = self.room_height(config)
        board_length = config.plank_full_length
        # One extra board so any offset still reaches the far wall
        boards_per_row = math.ceil(room_height / board_length) + 1

        requirements: list[CutRequirement] = []
        for row_index in range(self.row_count(config)):
            board_start = config.row_offset(row_index)
            for board_index in range(boards_per_row):
                requirement = self._visible_segment(
                    row_index, board_index, board_start, board_length, room_height,
                )
                if requirement is not None:
                    requirements.append(requirement)
                board_start += board_length

        logger.debug(
            "Generated %d requirements over %d rows (room height %s)",
            len(requirements), self.row_count(config), room_height,
        )
        return requirements

    def _visible_segment(
        self,
        row_index: int,
        board_index: int,
        board_start: float,
        board_length: float,
        room_height: float,
    ) -> CutRequirement | None:
        board_end = board_start + board_length
        inside_start = max(0, board_start)
        inside_end = min(room_height, board_end)
        if inside_end <= inside_start:
            return None

        if board_start < 0 and board_end <= room_height:
            position = CutPosition.TOP
        elif board_start >= 0 and board_end > room_height:
            position = CutPosition.BOTTOM
        else:
            # Spans the whole room, or lies entirely inside it
            position = CutPosition.FULL

        return CutRequirement(
            length=round_half_up(inside_end - inside_start),
            row_index=row_index,
            board_index=board_index,
            position=position,
        )
