"""Public dungeon package interface."""

from .config import MAP_HEIGHT, MAP_WIDTH, DungeonConfig  # noqa: F401
from .dungeon import Dungeon  # noqa: F401
from .errors import DungeonError, DungeonGenerationError, MapBoundsError  # noqa: F401
from .generator import Level, LevelGenerator, generate_level, generate_map  # noqa: F401
from .geometry import CARDINALS, Direction, Point, Rect  # noqa: F401
from .grid import Map  # noqa: F401
from .line import GridLine  # noqa: F401
from .placement import select_random_location  # noqa: F401
from .tiles import Tile  # noqa: F401
from .visibility import has_line_of_sight  # noqa: F401

__all__ = [
    "Dungeon",
    "DungeonConfig",
    "MAP_WIDTH",
    "MAP_HEIGHT",
    "DungeonError",
    "DungeonGenerationError",
    "MapBoundsError",
    "Level",
    "LevelGenerator",
    "generate_level",
    "generate_map",
    "CARDINALS",
    "Direction",
    "Point",
    "Rect",
    "Map",
    "GridLine",
    "select_random_location",
    "Tile",
    "has_line_of_sight",
]
