"""Single-precision 2-D points and bounded poly-lines."""

from __future__ import annotations

import struct
from typing import Iterator

MAX_POINTS = 10

_FLOAT32 = struct.Struct("<f")


def _f32(value: float) -> float:
    """Round a number to the nearest single-precision float."""
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


class PolyLineFullError(ValueError):
    """Raised when a point is added to a poly-line that is already full."""


class Point:
    """An immutable point whose coordinates are single-precision floats."""

    __slots__ = ("_x", "_y")

    def __init__(self, x: float, y: float) -> None:
        self._x = _f32(x)
        self._y = _f32(y)

    @property
    def x(self) -> float:
        """The x coordinate."""
        return self._x

    @property
    def y(self) -> float:
        """The y coordinate."""
        return self._y

    def dot(self, other: Point) -> float:
        """Dot product with another point."""
        return _f32(_f32(self._x * other._x) + _f32(self._y * other._y))

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self._x + other._x, self._y + other._y)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self._x - other._x, self._y - other._y)

    def __mul__(self, operand: object) -> Point:
        if not isinstance(operand, (int, float)) or isinstance(operand, bool):
            return NotImplemented
        factor = _f32(operand)
        return Point(self._x * factor, self._y * factor)

    def __rmul__(self, operand: object) -> Point:
        return self.__mul__(operand)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __repr__(self) -> str:
        return f"Point({self._x!r}, {self._y!r})"


class PolyLine:
    """An ordered sequence of at most ten points."""

    def __init__(self) -> None:
        self._points: list[Point] = []

    def add_point(self, x: float, y: float) -> None:
        """Append a point built from x and y; raise PolyLineFullError when full."""
        self.add(Point(x, y))

    def add(self, point: Point) -> None:
        """Append point; raise PolyLineFullError when the line holds ten points."""
        if len(self._points) >= MAX_POINTS:
            raise PolyLineFullError(f"a poly-line holds at most {MAX_POINTS} points")
        self._points.append(point)

    def remove_point(self, index: int) -> None:
        """Remove the point at index; raise IndexError when there is none."""
        if not 0 <= index < len(self._points):
            raise IndexError("poly-line index out of range")
        del self._points[index]

    def min_bounding_rectangle(self) -> tuple[Point, Point]:
        """Return the lower-left and upper-right corners enclosing every point.

        Raises ValueError for an empty poly-line.
        """
        if not self._points:
            raise ValueError("an empty poly-line has no bounding rectangle")
        xs = [point.x for point in self._points]
        ys = [point.y for point in self._points]
        return Point(min(xs), min(ys)), Point(max(xs), max(ys))

    def copy(self) -> PolyLine:
        """Return an independent poly-line holding the same points."""
        duplicate = PolyLine()
        duplicate._points = list(self._points)
        return duplicate

    def __getitem__(self, index: int) -> Point:
        if not 0 <= index < len(self._points):
            raise IndexError("poly-line index out of range")
        return self._points[index]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)