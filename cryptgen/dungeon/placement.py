from __future__ import annotations

from ..logging_utils import get_logger
from .errors import DungeonGenerationError
from .geometry import Point

_log = get_logger("dungeon.placement")


def select_random_location(grid, rng) -> Point:
    """Uniformly pick a walkable cell by redrawing (x, then y) until one is walkable."""
    if not any(grid.is_walkable(Point(x, y)) for x in range(grid.width) for y in range(grid.height)):
        raise DungeonGenerationError("map has no walkable cell", phase="placement")
    draws = 0
    while True:
        draws += 1
        location = Point(rng.randint(0, grid.width - 1), rng.randint(0, grid.height - 1))
        if grid.is_walkable(location):
            _log.debug(event="location_selected", x=location.x, y=location.y, draws=draws)
            return location


__all__ = ["select_random_location"]
