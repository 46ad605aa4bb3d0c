from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence

from .config import MAP_HEIGHT, MAP_WIDTH
from .errors import MapBoundsError
from .geometry import Point, Rect
from .tiles import ASCII_GLYPHS, ASCII_TILES, Tile
from .visibility import has_line_of_sight


class Map:
    """Fixed-size tile grid owned by one level.

    Lookups outside the grid answer ``Tile.VOID`` (unwalkable, opaque) so
    neighbour probes near the border never need their own bounds checks.
    Writes outside the grid raise :class:`MapBoundsError`.
    """

    __slots__ = ("_w", "_h", "_tiles")

    def __init__(self, width: int = MAP_WIDTH, height: int = MAP_HEIGHT, fill: Tile = Tile.VOID):
        if width <= 0 or height <= 0:
            raise ValueError("Map dimensions must be positive")
        self._w = int(width)
        self._h = int(height)
        # column-major: _tiles[x][y]
        self._tiles: List[List[Tile]] = [[fill for _ in range(self._h)] for _ in range(self._w)]

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    @property
    def bounds(self) -> Rect:
        return Rect(Point(0, 0), Point(self._w, self._h))

    def in_bounds(self, p: Point) -> bool:
        return 0 <= p.x < self._w and 0 <= p.y < self._h

    def tile(self, p: Point) -> Tile:
        if not self.in_bounds(p):
            return Tile.VOID
        return self._tiles[p.x][p.y]

    def set(self, p: Point, tile: Tile) -> None:
        if not isinstance(tile, Tile):
            raise TypeError("tile must be a Tile member")
        if not self.in_bounds(p):
            raise MapBoundsError(f"({p.x}, {p.y}) outside {self._w}x{self._h} map", p)
        self._tiles[p.x][p.y] = tile

    __getitem__ = tile
    __setitem__ = set

    def fill(self, rect: Rect, tile: Tile) -> None:
        if not self.bounds.contains_rect(rect):
            raise MapBoundsError(f"{rect} outside {self._w}x{self._h} map", rect)
        for x in range(rect.a.x, rect.b.x):
            column = self._tiles[x]
            for y in range(rect.a.y, rect.b.y):
                column[y] = tile

    def is_walkable(self, p: Point) -> bool:
        return self.tile(p).walkable

    def has_line_of_sight(self, viewer: Point, target: Point) -> bool:
        return has_line_of_sight(self, viewer, target)

    def positions(self, tile: Tile) -> Iterator[Point]:
        for x, column in enumerate(self._tiles):
            for y, t in enumerate(column):
                if t is tile:
                    yield Point(x, y)

    def count(self, tile: Tile) -> int:
        return sum(column.count(tile) for column in self._tiles)

    @classmethod
    def from_lines(cls, lines: Sequence[str], mapping: Optional[Dict[str, Tile]] = None) -> "Map":
        """Build a map from rows of ASCII glyphs (see ``ASCII_GLYPHS``); unknown characters become VOID."""
        if not lines:
            raise ValueError("lines must not be empty")
        width = len(lines[0])
        for i, row in enumerate(lines):
            if len(row) != width:
                raise ValueError(f"All rows must have equal width; row 0 has {width}, row {i} has {len(row)}")
        mapping = mapping or ASCII_TILES
        grid = cls(width, len(lines))
        for y, row in enumerate(lines):
            for x, ch in enumerate(row):
                grid._tiles[x][y] = mapping.get(ch, Tile.VOID)
        return grid

    def to_lines(self, glyphs: Optional[Dict[Tile, str]] = None) -> List[str]:
        glyphs = glyphs or ASCII_GLYPHS
        return ["".join(glyphs[self._tiles[x][y]] for x in range(self._w)) for y in range(self._h)]

    def __repr__(self) -> str:
        return f"Map(width={self._w}, height={self._h})"


__all__ = ["Map"]
