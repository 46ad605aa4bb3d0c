from __future__ import annotations

from typing import List, Tuple

from .config import DungeonConfig
from .geometry import Point, Rect
from .tiles import Tile


def place_rooms(config: DungeonConfig, rng) -> Tuple[List[Rect], int]:
    """Rejection-sample up to ``config.max_rooms`` non-overlapping rooms.

    Rooms are laid out on the 2-cell lattice: a room ``size`` lattice cells
    across placed at lattice position ``place`` spans
    ``Rect(place*2 + (1, 1), (place + size)*2)``, so its min corner is odd,
    its exclusive max corner is even and the interior span is ``2*size - 1``.
    A candidate is rejected if its rectangle padded by ``room_padding``
    touches any accepted room.

    Returns (rooms, attempts_used). Fewer rooms than requested is a normal
    outcome once attempts run out.
    """
    places = Point(config.width - 2, config.height - 2) // 2
    rooms: List[Rect] = []
    attempts = 0
    while attempts < config.placement_attempts and len(rooms) < config.max_rooms:
        attempts += 1
        size = Point(rng.randint(*config.room_width_range), rng.randint(*config.room_height_range))
        place = Point(rng.randint(0, places.x - size.x), rng.randint(0, places.y - size.y))
        room = Rect(place * 2 + Point(1, 1), (place + size) * 2)
        expanded = room.expanded(config.room_padding)
        if any(expanded.intersects(other) for other in rooms):
            continue
        rooms.append(room)
    return rooms, attempts


def carve_rooms(grid, rooms: List[Rect]) -> None:
    """Fill the whole map with wall, then open every room interior."""
    grid.fill(grid.bounds, Tile.WALL)
    for room in rooms:
        grid.fill(room, Tile.FLOOR)


__all__ = ["place_rooms", "carve_rooms"]
