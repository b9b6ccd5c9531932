"""Lawns of several shapes with grass, sod-roll and fence cost estimates."""

from __future__ import annotations

import math
import struct
from abc import ABC, abstractmethod
from enum import Enum

_FLOAT32 = struct.Struct("<f")


def _f32(value: float) -> float:
    """Round a number to the nearest single-precision float."""
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


# Single-precision constants widened to double, as the estimates expect.
GRASS_AREA = _f32(0.3)
FENCE_LENGTH = _f32(0.25)
PI = 3.14


def _check_length(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


class GrassType(Enum):
    """Kinds of grass, each with a price per unit of area."""

    BERMUDA = 8.0
    BAHIA = 5.0
    BENTGRASS = 3.0
    PERENNIAL_RYEGRASS = 2.5
    ST_AUGUSTINE = 4.5

    @property
    def price(self) -> float:
        """Price per unit of area."""
        return self.value


class FenceType(Enum):
    """Kinds of fence, each with a price per four fence pieces."""

    RED_CEDAR = 6
    SPRUCE = 7

    @property
    def price(self) -> int:
        """Price per four fence pieces."""
        return self.value


class Lawn(ABC):
    """A lawn with an area that can be covered with grass."""

    @abstractmethod
    def area(self) -> int:
        """Area of the lawn, rounded to a whole number."""

    def grass_price(self, grass_type: GrassType) -> int:
        """Cost of covering the lawn with the given grass, rounded."""
        price = _f32(_f32(grass_type.price) * _f32(self.area()))
        return int(_f32(price + 0.5))

    def minimum_sod_rolls_count(self) -> int:
        """Number of sod rolls needed to cover the lawn."""
        return int(self.area() / GRASS_AREA + 0.9)


class Fenceable(ABC):
    """Something that can be fenced in."""

    @abstractmethod
    def minimum_fences_count(self) -> int:
        """Number of fence pieces needed to surround it."""

    def fence_price(self, fence_type: FenceType) -> int:
        """Cost of fencing it with the given fence type."""
        return self.minimum_fences_count() // 4 * fence_type.price


class RectangleLawn(Lawn, Fenceable):
    """A rectangular lawn."""

    def __init__(self, width: int, height: int) -> None:
        self._width = _check_length("width", width)
        self._height = _check_length("height", height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def area(self) -> int:
        return self._width * self._height

    def minimum_fences_count(self) -> int:
        perimeter = _f32(2 * (self._width + self._height))
        return int(_f32(_f32(perimeter / FENCE_LENGTH) + 0.5))

    def fence_price(self, fence_type: FenceType) -> int:
        return super().fence_price(fence_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RectangleLawn):
            return NotImplemented
        return (self._width, self._height) == (other._width, other._height)

    def __hash__(self) -> int:
        return hash((self._width, self._height))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._width}, {self._height})"


class SquareLawn(RectangleLawn):
    """A square lawn."""

    def __init__(self, width: int) -> None:
        super().__init__(width, width)

    def __repr__(self) -> str:
        return f"SquareLawn({self._width})"


class CircleLawn(Lawn):
    """A circular lawn given by its radius."""

    def __init__(self, half_radius: int) -> None:
        self._half_radius = _check_length("radius", half_radius)

    @property
    def half_radius(self) -> int:
        return self._half_radius

    def area(self) -> int:
        return int(self._half_radius**2 * PI + 0.5)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CircleLawn):
            return NotImplemented
        return self._half_radius == other._half_radius

    def __hash__(self) -> int:
        return hash(self._half_radius)

    def __repr__(self) -> str:
        return f"CircleLawn({self._half_radius})"


class EquilateralTriangleLawn(Lawn, Fenceable):
    """A lawn shaped as an equilateral triangle."""

    def __init__(self, side: int) -> None:
        self._side = _check_length("side", side)

    @property
    def side(self) -> int:
        return self._side

    def area(self) -> int:
        side = float(self._side)
        half = _f32(side / 2.0)
        height = math.sqrt(side**2 - half**2)
        return int(height * side / 2.0 + 0.5)

    def minimum_fences_count(self) -> int:
        return int(self._side * 3.0 / FENCE_LENGTH + 0.5)

    def fence_price(self, fence_type: FenceType) -> int:
        return super().fence_price(fence_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EquilateralTriangleLawn):
            return NotImplemented
        return self._side == other._side

    def __hash__(self) -> int:
        return hash(self._side)

    def __repr__(self) -> str:
        return f"EquilateralTriangleLawn({self._side})"