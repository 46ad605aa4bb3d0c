"""Tunnel carving between rooms.

Every room after the first is joined to one earlier room chosen at random,
so the tunnels form a spanning tree over the rooms. A tunnel leaves each
room through a wall facing the other room, lands on the 2-cell lattice just
outside, then runs as an L: part of the main axis, the whole side axis, the
rest of the main axis. Steps are always two cells so the corridor stays on
odd/odd lattice junctions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..logging_utils import get_logger
from .errors import DungeonGenerationError
from .geometry import Direction, Point, Rect
from .tiles import Tile

_log = get_logger("dungeon.tunnels")

DoorCandidate = Tuple[Point, Direction]


@dataclass(frozen=True)
class Tunnel:
    room_index: int
    partner_index: int
    door_a: Point  # wall cells opened beside each room
    door_b: Point
    start: Point  # lattice landing points
    end: Point
    turn: int


def enumerate_door_candidates(room: Rect, other: Rect) -> List[DoorCandidate]:
    """Edge cells of ``room`` on every face that ``other`` lies strictly beyond, every 2 cells."""
    candidates: List[DoorCandidate] = []
    if other.a.x > room.b.x:
        candidates += [(Point(room.b.x - 1, y), Direction.EAST) for y in range(room.a.y, room.b.y, 2)]
    if other.b.x < room.a.x:
        candidates += [(Point(room.a.x, y), Direction.WEST) for y in range(room.a.y, room.b.y, 2)]
    if other.a.y > room.b.y:
        candidates += [(Point(x, room.b.y - 1), Direction.SOUTH) for x in range(room.a.x, room.b.x, 2)]
    if other.b.y < room.a.y:
        candidates += [(Point(x, room.a.y), Direction.NORTH) for x in range(room.a.x, room.b.x, 2)]
    return candidates


def _pick(rng, items):
    return items[rng.randint(0, len(items) - 1)]


def carve_tunnel(grid, rng, room_a: Rect, room_b: Rect, room_index: int = -1, partner_index: int = -1) -> Tunnel:
    doors_a = enumerate_door_candidates(room_a, room_b)
    doors_b = enumerate_door_candidates(room_b, room_a)
    if not doors_a or not doors_b:
        raise DungeonGenerationError(f"no facing wall between rooms {room_a} and {room_b}", phase="tunnels")
    cell_a, dir_a = _pick(rng, doors_a)
    cell_b, dir_b = _pick(rng, doors_b)
    start = cell_a + dir_a.offset * 2
    end = cell_b + dir_b.offset * 2

    delta = end - start
    span = abs(delta) // 2
    step_main = Point(1 if delta.x > 0 else -1, 0)
    step_side = Point(0, 1 if delta.y > 0 else -1)
    main_len, side_len = span.x, span.y
    if side_len > main_len:
        main_len, side_len = side_len, main_len
        step_main, step_side = step_side, step_main
    turn = rng.randint(0, main_len)

    point = start
    grid[point] = Tile.FLOOR
    for step, count in ((step_main, turn), (step_side, side_len), (step_main, main_len - turn)):
        for _ in range(count):
            point += step
            grid[point] = Tile.FLOOR
            point += step
            grid[point] = Tile.FLOOR

    door_a = cell_a + dir_a
    door_b = cell_b + dir_b
    grid[door_a] = Tile.FLOOR
    grid[door_b] = Tile.FLOOR
    return Tunnel(room_index, partner_index, door_a, door_b, start, end, turn)


def connect_rooms(grid, rooms: List[Rect], rng) -> List[Tunnel]:
    tunnels: List[Tunnel] = []
    for i in range(1, len(rooms)):
        j = rng.randint(0, i - 1)
        tunnels.append(carve_tunnel(grid, rng, rooms[i], rooms[j], room_index=i, partner_index=j))
    _log.debug(event="tunnels_carved", count=len(tunnels))
    return tunnels


__all__ = ["Tunnel", "DoorCandidate", "enumerate_door_candidates", "carve_tunnel", "connect_rooms"]
