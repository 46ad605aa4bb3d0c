"""Integer grid primitives: points, cardinal directions and half-open rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple, Union


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __add__(self, other: Union["Point", "Direction"]) -> "Point":
        if isinstance(other, Direction):
            other = other.offset
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Union["Point", "Direction"]) -> "Point":
        if isinstance(other, Direction):
            other = other.offset
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: int) -> "Point":
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __floordiv__(self, k: int) -> "Point":
        return Point(self.x // k, self.y // k)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __abs__(self) -> "Point":
        return Point(abs(self.x), abs(self.y))

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y


class Direction(Enum):
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def offset(self) -> Point:
        return Point(*self.value)


# Index order matters: random direction draws use randint(0, 3) over this tuple.
CARDINALS = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)


class Rect(NamedTuple):
    """Axis-aligned rectangle with inclusive min corner ``a`` and exclusive max corner ``b``."""

    a: Point
    b: Point

    @property
    def width(self) -> int:
        return self.b.x - self.a.x

    @property
    def height(self) -> int:
        return self.b.y - self.a.y

    def contains(self, p: Point) -> bool:
        return self.a.x <= p.x < self.b.x and self.a.y <= p.y < self.b.y

    def contains_rect(self, other: "Rect") -> bool:
        return self.a.x <= other.a.x and self.a.y <= other.a.y and other.b.x <= self.b.x and other.b.y <= self.b.y

    def intersects(self, other: "Rect") -> bool:
        return self.a.x < other.b.x and other.a.x < self.b.x and self.a.y < other.b.y and other.a.y < self.b.y

    def expanded(self, pad: int) -> "Rect":
        return Rect(self.a - Point(pad, pad), self.b + Point(pad, pad))

    def cells(self) -> Iterator[Point]:
        for y in range(self.a.y, self.b.y):
            for x in range(self.a.x, self.b.x):
                yield Point(x, y)


__all__ = ["Point", "Direction", "CARDINALS", "Rect"]
