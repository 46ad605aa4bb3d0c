"""Seeded dungeon level facade.

Public contract consumed by gameplay code:
    Dungeon(seed=1234) OR Dungeon(DungeonConfig(...))
    Attributes: config, seed, map, rooms, level, metrics
    Queries: tile(p), is_walkable(p), has_line_of_sight(viewer, target),
             select_random_location()

The dungeon owns its ``random.Random``; generation and later placement draws
come from it, so a seed reproduces both the layout and the placement
sequence. External use of the ``random`` module does not affect it.
"""

from __future__ import annotations

import dataclasses
import random
from typing import Any, Dict, List, Optional

from ..logging_utils import get_logger
from .config import DungeonConfig
from .generator import Level, LevelGenerator
from .geometry import Point, Rect
from .grid import Map
from .placement import select_random_location
from .tiles import Tile

_log = get_logger("dungeon")


class Dungeon:
    def __init__(self, config: Optional[DungeonConfig] = None, *, seed: Optional[int] = None):
        if config is None:
            config = DungeonConfig()
        if seed is None:
            seed = config.seed
        if seed is None:
            seed = random.randint(0, 2**31 - 1)
        # own copy; the caller's config keeps its seed
        self.config = dataclasses.replace(config, seed=seed)
        self.seed = seed
        self._rng = random.Random(self.seed)
        self.level: Level = LevelGenerator(self.config, self._rng).run()
        _log.debug(event="dungeon_ready", seed=self.seed, rooms=len(self.rooms))

    @property
    def map(self) -> Map:
        return self.level.map

    @property
    def rooms(self) -> List[Rect]:
        return self.level.rooms

    @property
    def metrics(self) -> Dict[str, Any]:
        return self.level.metrics

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def tile(self, p: Point) -> Tile:
        return self.map.tile(p)

    def is_walkable(self, p: Point) -> bool:
        return self.map.is_walkable(p)

    def has_line_of_sight(self, viewer: Point, target: Point) -> bool:
        return self.map.has_line_of_sight(viewer, target)

    def select_random_location(self) -> Point:
        return select_random_location(self.map, self._rng)

    def __repr__(self) -> str:
        return f"Dungeon(seed={self.seed}, size={self.width}x{self.height}, rooms={len(self.rooms)})"


__all__ = ["Dungeon"]
