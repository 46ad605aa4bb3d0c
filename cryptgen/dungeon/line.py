"""Bresenham-style grid ray walker.

``GridLine(a, b)`` is a lazy, finite, restartable sequence of the cells on
the 8-connected digital line from ``a`` to ``b``. Each endpoint can be
included or excluded independently:

    >>> [tuple(p) for p in GridLine(Point(0, 0), Point(3, 1))]
    [(0, 0), (1, 0), (2, 1), (3, 1)]
    >>> [tuple(p) for p in GridLine(Point(0, 0), Point(3, 1), include_a=False)]
    [(1, 0), (2, 1), (3, 1)]

The walk is bounded by two cursors stepped independently from ``a`` and
``b``: the start cursor is advanced once when ``a`` is excluded, the stop
cursor once when ``b`` is included. Both begin with the same error term, so
the start cursor lands exactly on the stop cursor after the last cell.
"""

from __future__ import annotations

from typing import Iterator, Tuple

from .geometry import Direction, Point


class GridLine:
    __slots__ = ("a", "b", "include_a", "include_b", "_main_step", "_side_step", "_main_delta", "_side_delta")

    def __init__(self, a: Point, b: Point, include_a: bool = True, include_b: bool = True):
        self.a = a
        self.b = b
        self.include_a = include_a
        self.include_b = include_b
        main_delta, side_delta = abs(b.x - a.x), abs(b.y - a.y)
        main_step = Direction.EAST if a.x < b.x else Direction.WEST
        side_step = Direction.SOUTH if a.y < b.y else Direction.NORTH
        if side_delta > main_delta:
            main_delta, side_delta = side_delta, main_delta
            main_step, side_step = side_step, main_step
        self._main_step = main_step.offset
        self._side_step = side_step.offset
        self._main_delta = main_delta
        self._side_delta = side_delta

    def _advance(self, point: Point, error: int) -> Tuple[Point, int]:
        point = point + self._main_step
        error -= self._side_delta
        if error < 0:
            point = point + self._side_step
            error += self._main_delta
        return point, error

    def __iter__(self) -> Iterator[Point]:
        start_error = self._main_delta // 2
        stop = self.b
        if self.include_b:
            stop, _ = self._advance(stop, start_error)
        point, error = self.a, start_error
        if not self.include_a and point != stop:
            point, error = self._advance(point, error)
        while point != stop:
            yield point
            point, error = self._advance(point, error)

    def __len__(self) -> int:
        if self.a == self.b:
            # single-cell line: present only when both endpoints are kept
            return 1 if self.include_a and self.include_b else 0
        return self._main_delta - 1 + int(self.include_a) + int(self.include_b)

    def __repr__(self) -> str:
        return f"GridLine({tuple(self.a)}, {tuple(self.b)}, include_a={self.include_a}, include_b={self.include_b})"


__all__ = ["GridLine"]
