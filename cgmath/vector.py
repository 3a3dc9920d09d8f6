"""Two-dimensional displacement record."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from cgmath.config import get_geometry_config
from cgmath.numeric import collect, divide, is_scalar, mean_pairs

if TYPE_CHECKING:
    from cgmath.size import Size


@dataclass(slots=True)
class Vector:
    """Displacement or direction in 2D space."""

    dx: float = 0.0
    dy: float = 0.0

    @classmethod
    def zero(cls) -> Vector:
        return cls(0.0, 0.0)

    @classmethod
    def uniform(cls, value: float) -> Vector:
        """Return a vector with both components set to ``value``."""
        return cls(value, value)

    @classmethod
    def from_size(cls, size: Size) -> Vector:
        """Return a vector taking dx from width and dy from height."""
        return cls(size.width, size.height)

    @classmethod
    def average(cls, *vectors: Vector | Iterable[Vector]) -> Vector:
        """Return the component-wise mean of vectors given as varargs or one iterable."""
        items = collect(vectors, cls)
        dx, dy = mean_pairs((vector.dx, vector.dy) for vector in items)
        return cls(dx, dy)

    def copy(self) -> Vector:
        return Vector(self.dx, self.dy)

    def as_tuple(self) -> tuple[float, float]:
        return (self.dx, self.dy)

    def with_dx(self, dx: float) -> Vector:
        return Vector(dx, self.dy)

    def with_dy(self, dy: float) -> Vector:
        return Vector(self.dx, dy)

    @property
    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dx * self.dx + self.dy * self.dy)

    @property
    def normalized(self) -> Vector:
        """Unit vector in the same direction; the zero vector yields NaN components."""
        k = math.sqrt(self.dx * self.dx + self.dy * self.dy)
        return Vector(divide(self.dx, k), divide(self.dy, k))

    def dot(self, other: Vector) -> float:
        return self.dx * other.dx + self.dy * other.dy

    def cross(self, other: Vector) -> float:
        """Signed area of the parallelogram spanned by both vectors."""
        return self.dx * other.dy - self.dy * other.dx

    def distance_squared(self, other: Vector) -> float:
        ddx = self.dx - other.dx
        ddy = self.dy - other.dy
        return ddx * ddx + ddy * ddy

    def distance(self, other: Vector) -> float:
        ddx = self.dx - other.dx
        ddy = self.dy - other.dy
        return math.sqrt(ddx * ddx + ddy * ddy)

    def is_close(
        self,
        other: Vector,
        *,
        rel_tol: float | None = None,
        abs_tol: float | None = None,
    ) -> bool:
        """Return whether both components match within tolerance."""
        config = get_geometry_config()
        rel = config.rel_tolerance if rel_tol is None else rel_tol
        abs_ = config.abs_tolerance if abs_tol is None else abs_tol
        return math.isclose(self.dx, other.dx, rel_tol=rel, abs_tol=abs_) and math.isclose(
            self.dy, other.dy, rel_tol=rel, abs_tol=abs_
        )

    # No + or - between vectors.

    def __mul__(self, other: float | Vector) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.dx * other.dx, self.dy * other.dy)
        if is_scalar(other):
            return Vector(self.dx * other, self.dy * other)
        return NotImplemented

    def __truediv__(self, other: float | Vector) -> Vector:
        if isinstance(other, Vector):
            return Vector(divide(self.dx, other.dx), divide(self.dy, other.dy))
        if is_scalar(other):
            return Vector(divide(self.dx, other), divide(self.dy, other))
        return NotImplemented

    def __imul__(self, other: float | Vector) -> Vector:
        if isinstance(other, Vector):
            self.dx *= other.dx
            self.dy *= other.dy
        elif is_scalar(other):
            self.dx *= other
            self.dy *= other
        else:
            return NotImplemented
        return self

    def __itruediv__(self, other: float | Vector) -> Vector:
        if isinstance(other, Vector):
            self.dx = divide(self.dx, other.dx)
            self.dy = divide(self.dy, other.dy)
        elif is_scalar(other):
            self.dx = divide(self.dx, other)
            self.dy = divide(self.dy, other)
        else:
            return NotImplemented
        return self
