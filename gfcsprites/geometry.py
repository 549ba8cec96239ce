"""Two-dimensional vectors and axis-aligned rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class Vector:
    """An immutable 2D vector supporting the usual arithmetic."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __mul__(self, other: Vector | Number) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y)
        return Vector(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Vector | Number) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x / other.x, self.y / other.y)
        return Vector(self.x / other, self.y / other)

    def __iter__(self):
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0:
            return Vector(0.0, 0.0)
        return Vector(self.x / length, self.y / length)


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its bottom-left corner and size."""

    x: float = 0
    y: float = 0
    w: float = 0
    h: float = 0

    def center_x(self) -> float:
        return self.x + self.w / 2

    def center_y(self) -> float:
        return self.y + self.h / 2

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y

    @property
    def top(self) -> float:
        return self.y + self.h

    def intersects(self, other: Rectangle) -> bool:
        """True if the two rectangles share some area."""
        return (
            self.left < other.right
            and other.left < self.right
            and self.bottom < other.top
            and other.bottom < self.top
        )

    def grow(self, left: float, top: float, right: float, bottom: float) -> Rectangle:
        """Return a rectangle with each edge pushed outwards by the given amount."""
        return Rectangle(
            self.x - left,
            self.y - bottom,
            self.w + left + right,
            self.h + top + bottom,
        )