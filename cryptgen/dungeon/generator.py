"""Level generation pipeline.

Phases, in order (the order also fixes the sequence of random draws):
    * place rooms by rejection sampling on the 2-cell lattice
    * fill the map with wall and open the rooms
    * carve one tunnel from every room to a random earlier room
    * scan for corridor intersections and seal some behind secret doors
    * put closed doors wherever an open cell meets a room's wall ring

``rng`` is anything with ``randint(a, b)`` (inclusive) and ``random()``;
``random.Random`` in practice. The same seed always yields the same level.
"""

from __future__ import annotations

import time
from typing import Any, Dict, List, NamedTuple, Optional

from ..logging_utils import get_logger
from .config import DungeonConfig
from .doors import place_room_doors
from .geometry import Point, Rect
from .grid import Map
from .metrics import init_metrics
from .rooms import carve_rooms, place_rooms
from .secret_doors import SecretPassage, enumerate_intersections, place_secret_passages
from .tiles import Tile
from .tunnels import Tunnel, connect_rooms

_log = get_logger("dungeon.generator")


class Level(NamedTuple):
    map: Map
    rooms: List[Rect]
    tunnels: List[Tunnel]
    intersections: List[Point]
    secret_passages: List[SecretPassage]
    doors_placed: int
    metrics: Dict[str, Any]


class LevelGenerator:
    def __init__(self, config: Optional[DungeonConfig] = None, rng=None):
        if rng is None:
            raise ValueError("LevelGenerator needs a random source")
        self.config = config or DungeonConfig()
        self.rng = rng

    def run(self) -> Level:
        cfg = self.config
        metrics = init_metrics()
        phase_times: Dict[str, int] = {}
        start = time.perf_counter()

        def _phase(label, fn, *a, **k):
            ps = time.perf_counter()
            r = fn(*a, **k)
            phase_times[label] = int((time.perf_counter() - ps) * 1000)
            return r

        rooms, attempts = _phase('place_rooms', place_rooms, cfg, self.rng)
        _log.debug(event="rooms_placed", count=len(rooms), attempts=attempts)
        grid = Map(cfg.width, cfg.height)
        _phase('carve_rooms', carve_rooms, grid, rooms)
        tunnels = _phase('tunnels', connect_rooms, grid, rooms, self.rng)
        intersections = _phase('intersections', enumerate_intersections, grid)
        passages = _phase(
            'secret_doors', place_secret_passages, grid, self.rng, intersections, cfg.secret_door_chance
        )
        doors = _phase('room_doors', place_room_doors, grid, rooms)

        metrics.update(
            rooms_attempts=attempts,
            rooms_placed=len(rooms),
            tunnels_carved=len(tunnels),
            intersections=len(intersections),
            secret_passages=len(passages),
            secret_doors=grid.count(Tile.SECRET_DOOR),
            closed_doors=grid.count(Tile.CLOSED_DOOR),
            tiles_floor=grid.count(Tile.FLOOR),
            tiles_wall=grid.count(Tile.WALL),
        )
        metrics['runtime_ms'] = int((time.perf_counter() - start) * 1000)
        metrics['phase_ms'] = phase_times
        _log.debug(
            event="level_generated",
            rooms=len(rooms),
            tunnels=len(tunnels),
            secret_passages=len(passages),
            doors=doors,
            runtime_ms=metrics['runtime_ms'],
        )
        return Level(grid, rooms, tunnels, intersections, passages, doors, metrics)


def generate_level(rng, config: Optional[DungeonConfig] = None) -> Level:
    return LevelGenerator(config, rng).run()


def generate_map(rng, config: Optional[DungeonConfig] = None) -> Map:
    """One-shot entry point: a fully carved map drawn from ``rng``."""
    return generate_level(rng, config).map


__all__ = ["Level", "LevelGenerator", "generate_level", "generate_map"]
