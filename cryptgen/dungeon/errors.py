"""Exception types raised by map access and level generation."""

from __future__ import annotations


class DungeonError(Exception):
    """Base class for dungeon errors."""


class MapBoundsError(DungeonError, IndexError):
    def __init__(self, message: str, where=None):
        super().__init__(message)
        self.message = message
        self.where = where


class DungeonGenerationError(DungeonError, RuntimeError):
    """A generation invariant did not hold (fatal for the current level)."""

    def __init__(self, message: str, phase: str):
        super().__init__(f"{phase}: {message}")
        self.message = message
        self.phase = phase


__all__ = ["DungeonError", "MapBoundsError", "DungeonGenerationError"]
