"""Corridor intersection scan and secret passage carving.

An intersection is a lattice cell (odd/odd) that is walkable, has no
walkable diagonal neighbour (so it is not inside a room) and has at least
three walkable orthogonal neighbours. Selected intersections get a secret
passage: one of their exits is sealed with a secret door and the corridor
behind it is followed to the next branch point, where the last corridor
cell becomes a second secret door.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..logging_utils import get_logger
from .errors import DungeonGenerationError
from .geometry import CARDINALS, Direction, Point
from .tiles import Tile

_log = get_logger("dungeon.secret_doors")

_DIAGONALS = (Point(-1, -1), Point(1, -1), Point(1, 1), Point(-1, 1))


@dataclass
class SecretPassage:
    origin: Point  # intersection the passage branches from
    start: Point
    end: Point
    cells: List[Point] = field(default_factory=list)  # start..end inclusive, in walk order


def is_intersection(grid, p: Point) -> bool:
    if not grid.is_walkable(p):
        return False
    if any(grid.is_walkable(p + d) for d in _DIAGONALS):
        return False
    return sum(1 for d in CARDINALS if grid.is_walkable(p + d)) >= 3


def enumerate_intersections(grid) -> List[Point]:
    return [
        Point(x, y)
        for y in range(1, grid.height - 1, 2)
        for x in range(1, grid.width - 1, 2)
        if is_intersection(grid, Point(x, y))
    ]


def _forward_exits(grid, current: Point, last: Point) -> List[Point]:
    exits = []
    for d in CARDINALS:
        p = current + d
        if p != last and grid.is_walkable(p):
            exits.append(p)
    return exits


def _sealed_neighbor(grid, current: Point, last: Point) -> Optional[Point]:
    for d in CARDINALS:
        p = current + d
        if p != last and grid.tile(p) is Tile.SECRET_DOOR:
            return p
    return None


def seal_passage(grid, origin: Point, direction: Direction, max_steps: Optional[int] = None) -> SecretPassage:
    """Seal the exit of ``origin`` toward ``direction`` and the far end of that corridor.

    Walks forward from the new door until the current cell has two or more
    walkable neighbours besides the one just left; the cell walked from
    becomes the closing secret door. A walk that runs into an earlier
    passage (no forward exit) ends at that passage's door.
    """
    limit = max_steps if max_steps is not None else grid.width * grid.height
    door = origin + direction
    grid[door] = Tile.SECRET_DOOR
    cells = [door]
    last, current = door, door + direction
    for _ in range(limit):
        exits = _forward_exits(grid, current, last)
        if len(exits) >= 2:
            grid[last] = Tile.SECRET_DOOR
            return SecretPassage(origin, door, last, cells)
        if not exits:
            sealed = _sealed_neighbor(grid, current, last)
            _log.warn(event="secret_walk_dead_end", x=current.x, y=current.y, sealed=sealed is not None)
            if sealed is None:
                grid[last] = Tile.SECRET_DOOR
                return SecretPassage(origin, door, last, cells)
            cells += [current, sealed]
            return SecretPassage(origin, door, sealed, cells)
        last, current = current, exits[0]
        cells.append(last)
    raise DungeonGenerationError(
        f"secret walk from ({origin.x}, {origin.y}) found no branch point in {limit} steps", phase="secret_doors"
    )


def place_secret_passages(grid, rng, intersections: List[Point], chance: float) -> List[SecretPassage]:
    passages: List[SecretPassage] = []
    for point in intersections:
        if rng.random() >= chance:
            continue
        while True:
            direction = CARDINALS[rng.randint(0, 3)]
            if grid.tile(point + direction) is not Tile.WALL:
                break
        passages.append(seal_passage(grid, point, direction))
    _log.debug(event="secret_passages", intersections=len(intersections), placed=len(passages))
    return passages


__all__ = [
    "SecretPassage",
    "is_intersection",
    "enumerate_intersections",
    "seal_passage",
    "place_secret_passages",
]
