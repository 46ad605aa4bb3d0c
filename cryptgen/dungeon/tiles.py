"""Closed set of tile kinds.

Each kind carries a fixed walkability flag plus a display descriptor (label,
glyph, colour name). Generation and visibility only consume walkability.
``ASCII_GLYPHS`` is the plain-text form used for debug dumps and test maps.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict


class Tile(Enum):
    VOID = ("void", False, " ", "black")
    FLOOR = ("dirt floor", True, ".", "gray")
    WALL = ("wall", False, "▓", "blue")
    SECRET_DOOR = ("secret door", False, "▒", "blue")  # sealed until discovered
    CLOSED_DOOR = ("closed door", False, "+", "brown")
    OPEN_DOOR = ("open door", True, "/", "brown")

    def __init__(self, label: str, walkable: bool, glyph: str, color: str):
        self.label = label
        self.walkable = walkable
        self.glyph = glyph
        self.color = color

    @property
    def is_door(self) -> bool:
        return self in DOOR_TILES


DOOR_TILES = frozenset({Tile.SECRET_DOOR, Tile.CLOSED_DOOR, Tile.OPEN_DOOR})

ASCII_GLYPHS: Dict[Tile, str] = {
    Tile.VOID: " ",
    Tile.FLOOR: ".",
    Tile.WALL: "#",
    Tile.SECRET_DOOR: "S",
    Tile.CLOSED_DOOR: "+",
    Tile.OPEN_DOOR: "/",
}
ASCII_TILES: Dict[str, Tile] = {ch: t for t, ch in ASCII_GLYPHS.items()}


__all__ = ["Tile", "DOOR_TILES", "ASCII_GLYPHS", "ASCII_TILES"]
