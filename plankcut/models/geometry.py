"""Geometric primitives for the room outline."""

from __future__ import annotations
from pydantic import BaseModel


class Point2D(BaseModel):
    """Point on the floor plane, in millimetres."""
    x: float
    y: float


class RoomBounds(BaseModel):
    """Axis-aligned extent of a room polygon."""
    width: float
    height: float


def get_room_bounds(polygon: list[Point2D]) -> RoomBounds:
    """Width and height of the bounding box around the polygon."""
    if not polygon:
        return RoomBounds(width=0, height=0)

    xs = [p.x for p in polygon]
    ys = [p.y for p in polygon]
    return RoomBounds(
        width=max(xs) - min(xs),
        height=max(ys) - min(ys),
    )
