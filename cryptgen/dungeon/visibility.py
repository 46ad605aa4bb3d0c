"""Line-of-sight between grid cells.

A target is visible when the direct ray reaches it over walkable cells, or
when the ray to any of its eight neighbours does ("peeking"). Peeking lets a
viewer see wall corners and other unwalkable cells that border open space it
can see.
"""

from __future__ import annotations

from .geometry import Point
from .line import GridLine

# Orthogonal first, then diagonals.
NEIGHBOR_OFFSETS = (
    Point(1, 0),
    Point(0, 1),
    Point(-1, 0),
    Point(0, -1),
    Point(-1, -1),
    Point(1, -1),
    Point(1, 1),
    Point(-1, 1),
)


def check_line_of_sight(grid, viewer: Point, target: Point, is_neighbor: bool = False) -> bool:
    """Trace one ray from ``viewer`` (excluded) to ``target`` (included).

    Every cell on the ray must be walkable. Neighbour probes additionally
    reject an unwalkable target up front, which covers ``target == viewer``.
    """
    if is_neighbor and not grid.is_walkable(target):
        return False
    for point in GridLine(viewer, target, include_a=False, include_b=True):
        if not grid.is_walkable(point):
            return False
    return True


def has_line_of_sight(grid, viewer: Point, target: Point) -> bool:
    if check_line_of_sight(grid, viewer, target):
        return True
    return any(check_line_of_sight(grid, viewer, target + offset, is_neighbor=True) for offset in NEIGHBOR_OFFSETS)


__all__ = ["NEIGHBOR_OFFSETS", "check_line_of_sight", "has_line_of_sight"]
