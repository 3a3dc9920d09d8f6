"""Two-dimensional extent record."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from cgmath.config import get_geometry_config
from cgmath.numeric import collect, divide, is_scalar, mean_pairs
from cgmath.vector import Vector

if TYPE_CHECKING:
    from cgmath.point import Point


@dataclass(slots=True)
class Size:
    """Width and height; negative values are allowed and propagate."""

    width: float = 0.0
    height: float = 0.0

    @classmethod
    def zero(cls) -> Size:
        return cls(0.0, 0.0)

    @classmethod
    def uniform(cls, value: float) -> Size:
        """Return a square size."""
        return cls(value, value)

    @classmethod
    def from_point(cls, point: Point) -> Size:
        return cls(point.x, point.y)

    @classmethod
    def average(cls, *sizes: Size | Iterable[Size]) -> Size:
        """Return the mean width and height of sizes given as varargs or one iterable."""
        items = collect(sizes, cls)
        width, height = mean_pairs((size.width, size.height) for size in items)
        return cls(width, height)

    def copy(self) -> Size:
        return Size(self.width, self.height)

    def as_tuple(self) -> tuple[float, float]:
        return (self.width, self.height)

    @property
    def half_size(self) -> Size:
        return Size(self.width / 2.0, self.height / 2.0)

    def with_width(self, width: float) -> Size:
        return Size(width, self.height)

    def with_height(self, height: float) -> Size:
        return Size(self.width, height)

    def is_close(
        self,
        other: Size,
        *,
        rel_tol: float | None = None,
        abs_tol: float | None = None,
    ) -> bool:
        """Return whether both dimensions match within tolerance."""
        config = get_geometry_config()
        rel = config.rel_tolerance if rel_tol is None else rel_tol
        abs_ = config.abs_tolerance if abs_tol is None else abs_tol
        return math.isclose(self.width, other.width, rel_tol=rel, abs_tol=abs_) and math.isclose(
            self.height, other.height, rel_tol=rel, abs_tol=abs_
        )

    def __add__(self, other: float | Size | Vector) -> Size:
        if isinstance(other, Size):
            return Size(self.width + other.width, self.height + other.height)
        if isinstance(other, Vector):
            return Size(self.width + other.dx, self.height + other.dy)
        if is_scalar(other):
            return Size(self.width + other, self.height + other)
        return NotImplemented

    def __sub__(self, other: float | Size | Vector) -> Size:
        if isinstance(other, Size):
            return Size(self.width - other.width, self.height - other.height)
        if isinstance(other, Vector):
            return Size(self.width - other.dx, self.height - other.dy)
        if is_scalar(other):
            return Size(self.width - other, self.height - other)
        return NotImplemented

    def __mul__(self, other: float | Vector) -> Size:
        if isinstance(other, Vector):
            return Size(self.width * other.dx, self.height * other.dy)
        if is_scalar(other):
            return Size(self.width * other, self.height * other)
        return NotImplemented

    def __truediv__(self, other: float | Vector) -> Size:
        if isinstance(other, Vector):
            return Size(divide(self.width, other.dx), divide(self.height, other.dy))
        if is_scalar(other):
            return Size(divide(self.width, other), divide(self.height, other))
        return NotImplemented

    def __iadd__(self, other: float | Size | Vector) -> Size:
        if isinstance(other, Size):
            self.width += other.width
            self.height += other.height
        elif isinstance(other, Vector):
            self.width += other.dx
            self.height += other.dy
        elif is_scalar(other):
            self.width += other
            self.height += other
        else:
            return NotImplemented
        return self

    def __isub__(self, other: float | Size | Vector) -> Size:
        if isinstance(other, Size):
            self.width -= other.width
            self.height -= other.height
        elif isinstance(other, Vector):
            self.width -= other.dx
            self.height -= other.dy
        elif is_scalar(other):
            self.width -= other
            self.height -= other
        else:
            return NotImplemented
        return self

    def __imul__(self, other: float | Vector) -> Size:
        if isinstance(other, Vector):
            self.width *= other.dx
            self.height *= other.dy
        elif is_scalar(other):
            self.width *= other
            self.height *= other
        else:
            return NotImplemented
        return self

    def __itruediv__(self, other: float | Vector) -> Size:
        if isinstance(other, Vector):
            self.width = divide(self.width, other.dx)
            self.height = divide(self.height, other.dy)
        elif is_scalar(other):
            self.width = divide(self.width, other)
            self.height = divide(self.height, other)
        else:
            return NotImplemented
        return self
