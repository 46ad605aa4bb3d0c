"""Structural diagnostics for generated levels.

Doors of every kind count as passable here: a closed or secret door is a
connection a player can eventually use, even though it blocks walking and
sight until opened.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Dict, List, Set

from .geometry import CARDINALS, Point, Rect
from .tiles import Tile


def is_passable(tile: Tile) -> bool:
    return tile.walkable or tile.is_door


def flood_passable(grid, start: Point) -> Set[Point]:
    """Return the set of cells reachable from ``start`` through passable cells (4-connected)."""
    if not is_passable(grid.tile(start)):
        return set()
    seen = {start}
    q = deque([start])
    while q:
        p = q.popleft()
        for d in CARDINALS:
            n = p + d
            if n not in seen and is_passable(grid.tile(n)):
                seen.add(n)
                q.append(n)
    return seen


def unreachable_rooms(grid, rooms: List[Rect]) -> List[int]:
    if not rooms:
        return []
    reached = flood_passable(grid, rooms[0].a)
    return [i for i, room in enumerate(rooms) if room.a not in reached]


def malformed_passages(level) -> List[int]:
    """Indices of passages whose ends are not secret doors or whose inner cells are not floor.

    A later passage may seal one of its own doors inside an earlier one, so
    an inner secret door is accepted when it is the start or end of another
    recorded passage.
    """
    grid = level.map
    passages = level.secret_passages
    bad = []
    for i, passage in enumerate(passages):
        foreign_doors = {p for j, other in enumerate(passages) if j != i for p in (other.start, other.end)}
        ends_ok = grid.tile(passage.start) is Tile.SECRET_DOOR and grid.tile(passage.end) is Tile.SECRET_DOOR
        inner_ok = all(
            grid.tile(p) is Tile.FLOOR or (grid.tile(p) is Tile.SECRET_DOOR and p in foreign_doors)
            for p in passage.cells[1:-1]
        )
        if not (ends_ok and inner_ok):
            bad.append(i)
    return bad


def off_lattice_doors(grid) -> List[Point]:
    """Closed doors must sit between a lattice cell and a wall line: one odd, one even coordinate."""
    return [p for p in grid.positions(Tile.CLOSED_DOOR) if p.x % 2 == p.y % 2]


def analyze(level) -> Dict[str, Any]:
    return {
        "unreachable_rooms": unreachable_rooms(level.map, level.rooms),
        "malformed_passages": malformed_passages(level),
        "off_lattice_doors": [tuple(p) for p in off_lattice_doors(level.map)],
    }


__all__ = ["is_passable", "flood_passable", "unreachable_rooms", "malformed_passages", "off_lattice_doors", "analyze"]
