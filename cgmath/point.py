"""Two-dimensional location record."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from cgmath.config import get_geometry_config
from cgmath.numeric import collect, divide, is_scalar, mean_pairs
from cgmath.size import Size
from cgmath.vector import Vector


@dataclass(slots=True)
class Point:
    """Location in 2D space; NaN and infinity pass through unchecked."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> Point:
        return cls(0.0, 0.0)

    @classmethod
    def uniform(cls, value: float) -> Point:
        """Return a point with both coordinates set to ``value``."""
        return cls(value, value)

    @classmethod
    def from_size(cls, size: Size) -> Point:
        """Return a point taking x from width and y from height."""
        return cls(size.width, size.height)

    @classmethod
    def average(cls, *points: Point | Iterable[Point]) -> Point:
        """Return the centroid of points given as varargs or one iterable.

        An empty input divides by zero and yields NaN coordinates.
        """
        items = collect(points, cls)
        x, y = mean_pairs((point.x, point.y) for point in items)
        return cls(x, y)

    def copy(self) -> Point:
        return Point(self.x, self.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def with_x(self, x: float) -> Point:
        return Point(x, self.y)

    def with_y(self, y: float) -> Point:
        return Point(self.x, y)

    def distance_squared(self, other: Point) -> float:
        """Squared Euclidean distance, computed without a square root."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance(self, other: Point) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def is_close(
        self,
        other: Point,
        *,
        rel_tol: float | None = None,
        abs_tol: float | None = None,
    ) -> bool:
        """Return whether both coordinates match within tolerance."""
        config = get_geometry_config()
        rel = config.rel_tolerance if rel_tol is None else rel_tol
        abs_ = config.abs_tolerance if abs_tol is None else abs_tol
        return math.isclose(self.x, other.x, rel_tol=rel, abs_tol=abs_) and math.isclose(
            self.y, other.y, rel_tol=rel, abs_tol=abs_
        )

    def __add__(self, other: float | Point | Size | Vector) -> Point:
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y)
        if isinstance(other, Size):
            return Point(self.x + other.width, self.y + other.height)
        if isinstance(other, Vector):
            return Point(self.x + other.dx, self.y + other.dy)
        if is_scalar(other):
            return Point(self.x + other, self.y + other)
        return NotImplemented

    def __sub__(self, other: float | Point | Size | Vector) -> Point:
        if isinstance(other, Point):
            return Point(self.x - other.x, self.y - other.y)
        if isinstance(other, Size):
            return Point(self.x - other.width, self.y - other.height)
        if isinstance(other, Vector):
            return Point(self.x - other.dx, self.y - other.dy)
        if is_scalar(other):
            return Point(self.x - other, self.y - other)
        return NotImplemented

    def __mul__(self, other: float | Vector) -> Point:
        if isinstance(other, Vector):
            return Point(self.x * other.dx, self.y * other.dy)
        if is_scalar(other):
            return Point(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: float | Vector) -> Point:
        if isinstance(other, Vector):
            return Point(divide(self.x, other.dx), divide(self.y, other.dy))
        if is_scalar(other):
            return Point(divide(self.x, other), divide(self.y, other))
        return NotImplemented

    def __iadd__(self, other: float | Point | Size | Vector) -> Point:
        if isinstance(other, Point):
            self.x += other.x
            self.y += other.y
        elif isinstance(other, Size):
            self.x += other.width
            self.y += other.height
        elif isinstance(other, Vector):
            self.x += other.dx
            self.y += other.dy
        elif is_scalar(other):
            self.x += other
            self.y += other
        else:
            return NotImplemented
        return self

    def __isub__(self, other: float | Point | Size | Vector) -> Point:
        if isinstance(other, Point):
            self.x -= other.x
            self.y -= other.y
        elif isinstance(other, Size):
            self.x -= other.width
            self.y -= other.height
        elif isinstance(other, Vector):
            self.x -= other.dx
            self.y -= other.dy
        elif is_scalar(other):
            self.x -= other
            self.y -= other
        else:
            return NotImplemented
        return self

    def __imul__(self, other: float | Vector) -> Point:
        if isinstance(other, Vector):
            self.x *= other.dx
            self.y *= other.dy
        elif is_scalar(other):
            self.x *= other
            self.y *= other
        else:
            return NotImplemented
        return self

    def __itruediv__(self, other: float | Vector) -> Point:
        if isinstance(other, Vector):
            self.x = divide(self.x, other.dx)
            self.y = divide(self.y, other.dy)
        elif is_scalar(other):
            self.x = divide(self.x, other)
            self.y = divide(self.y, other)
        else:
            return NotImplemented
        return self
