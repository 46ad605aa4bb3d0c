from __future__ import annotations

from typing import List

from ..logging_utils import get_logger
from .geometry import Point, Rect
from .tiles import Tile

_log = get_logger("dungeon.doors")


def room_door_sites(room: Rect) -> List[Point]:
    """Cells just outside a room's edges where a tunnel can meet it, every 2 cells along each edge."""
    sites: List[Point] = []
    for x in range(room.a.x, room.b.x, 2):
        sites += [Point(x, room.a.y - 1), Point(x, room.b.y)]
    for y in range(room.a.y, room.b.y, 2):
        sites += [Point(room.a.x - 1, y), Point(room.b.x, y)]
    return sites


def place_room_doors(grid, rooms: List[Rect]) -> int:
    """Turn every open cell on a room's wall ring into a closed door; returns the number placed."""
    placed = 0
    for room in rooms:
        for site in room_door_sites(room):
            if grid.is_walkable(site):
                grid[site] = Tile.CLOSED_DOOR
                placed += 1
    _log.debug(event="room_doors", placed=placed)
    return placed


__all__ = ["room_door_sites", "place_room_doors"]
