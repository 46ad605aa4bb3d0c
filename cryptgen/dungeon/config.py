from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

# Odd so every lattice cell (odd/odd) keeps its eight neighbours on the map.
MAP_WIDTH = 79
MAP_HEIGHT = 41


@dataclass
class DungeonConfig:
    width: int = MAP_WIDTH
    height: int = MAP_HEIGHT
    max_rooms: int = 8
    placement_attempts: int = 1000
    room_width_range: Tuple[int, int] = (3, 5)
    room_height_range: Tuple[int, int] = (2, 4)
    room_padding: int = 2
    secret_door_chance: float = 0.2
    seed: Optional[int] = None

    def __post_init__(self):
        if self.max_rooms < 1:
            raise ValueError("max_rooms must be at least 1")
        if self.placement_attempts < 1:
            raise ValueError("placement_attempts must be at least 1")
        for label, (lo, hi) in (
            ("room_width_range", self.room_width_range),
            ("room_height_range", self.room_height_range),
        ):
            if lo < 1 or hi < lo:
                raise ValueError(f"{label} must satisfy 1 <= min <= max, got {(lo, hi)}")
        if self.room_padding < 0:
            raise ValueError("room_padding must not be negative")
        if not 0.0 <= self.secret_door_chance <= 1.0:
            raise ValueError("secret_door_chance must be within [0, 1]")
        if self.width % 2 == 0 or self.height % 2 == 0:
            raise ValueError(f"map dimensions must be odd, got {self.width}x{self.height}")
        # Room placement samples lattice places in [0, (dim-2)//2 - size].
        if (self.width - 2) // 2 < self.room_width_range[1]:
            raise ValueError(f"width {self.width} too small for rooms {self.room_width_range[1]} lattice cells wide")
        if (self.height - 2) // 2 < self.room_height_range[1]:
            raise ValueError(f"height {self.height} too small for rooms {self.room_height_range[1]} lattice cells tall")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "DungeonConfig":
        """Build a config from ``DUNGEON_*`` environment variables.

        Explicit keyword overrides win over the environment; unset variables
        keep the dataclass defaults.
        """
        env = os.environ if environ is None else environ
        env_map = {
            "DUNGEON_WIDTH": ("width", int),
            "DUNGEON_HEIGHT": ("height", int),
            "DUNGEON_MAX_ROOMS": ("max_rooms", int),
            "DUNGEON_PLACEMENT_ATTEMPTS": ("placement_attempts", int),
            "DUNGEON_SECRET_DOOR_CHANCE": ("secret_door_chance", float),
            "DUNGEON_SEED": ("seed", int),
        }
        values = {}
        for env_key, (attr, cast) in env_map.items():
            raw = env.get(env_key, "").strip()
            if not raw:
                continue
            try:
                values[attr] = cast(raw)
            except ValueError:
                raise ValueError(f"{env_key} must be a number, got {raw!r}") from None
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


__all__ = ["DungeonConfig", "MAP_WIDTH", "MAP_HEIGHT"]
