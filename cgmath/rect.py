"""Axis-aligned rectangle record."""

from __future__ import annotations

from dataclasses import dataclass, field

from cgmath.logging import get_logger
from cgmath.numeric import divide, is_scalar
from cgmath.point import Point
from cgmath.size import Size
from cgmath.vector import Vector

_LOG = get_logger("cgmath.rect")


@dataclass(slots=True)
class Rect:
    """Axis-aligned box made of an origin point and a size.

    The constructor copies ``origin`` and ``size`` so a rectangle never shares
    them with the caller. ``center``, ``min`` and ``max`` are computed views;
    their ``set_*`` counterparts move ``origin`` and keep ``size``.
    """

    origin: Point = field(default_factory=Point.zero)
    size: Size = field(default_factory=Size.zero)

    def __post_init__(self) -> None:
        self.origin = Point(self.origin.x, self.origin.y)
        self.size = Size(self.size.width, self.size.height)

    @classmethod
    def zero(cls) -> Rect:
        return cls(Point.zero(), Size.zero())

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> Rect:
        return cls(Point(x, y), Size(width, height))

    @classmethod
    def from_center_and_size(cls, center: Point, size: Size) -> Rect:
        origin = Point(center.x - size.width / 2.0, center.y - size.height / 2.0)
        return cls(origin, size)

    @classmethod
    def absolute(cls, p1: Point, p2: Point) -> Rect:
        """Return the non-negative rectangle spanning two corners in any order."""
        return cls.from_xywh(
            min(p1.x, p2.x),
            min(p1.y, p2.y),
            abs(p1.x - p2.x),
            abs(p1.y - p2.y),
        )

    def copy(self) -> Rect:
        return Rect(self.origin, self.size)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.origin.x, self.origin.y, self.size.width, self.size.height)

    @property
    def x(self) -> float:
        return self.origin.x

    @property
    def y(self) -> float:
        return self.origin.y

    @property
    def width(self) -> float:
        return self.size.width

    @property
    def height(self) -> float:
        return self.size.height

    @property
    def min_x(self) -> float:
        return self.origin.x

    @property
    def mid_x(self) -> float:
        return self.origin.x + self.size.width / 2.0

    @property
    def max_x(self) -> float:
        return self.origin.x + self.size.width

    @property
    def min_y(self) -> float:
        return self.origin.y

    @property
    def mid_y(self) -> float:
        return self.origin.y + self.size.height / 2.0

    @property
    def max_y(self) -> float:
        return self.origin.y + self.size.height

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    def set_center(self, center: Point) -> None:
        """Move the rectangle so its center lands on ``center``."""
        self.origin = Point(center.x - self.size.width / 2.0, center.y - self.size.height / 2.0)

    @property
    def min(self) -> Point:
        return self.origin.copy()

    def set_min(self, point: Point) -> None:
        self.origin = point.copy()

    @property
    def max(self) -> Point:
        return Point(self.max_x, self.max_y)

    def set_max(self, point: Point) -> None:
        """Move the rectangle so its far corner lands on ``point``."""
        self.origin = Point(point.x - self.size.width, point.y - self.size.height)

    @property
    def transposed(self) -> Rect:
        """Swap x/y and width/height; this relabels axes, it is not a reflection."""
        return Rect.from_xywh(self.origin.y, self.origin.x, self.size.height, self.size.width)

    def with_x(self, x: float) -> Rect:
        return Rect.from_xywh(x, self.origin.y, self.size.width, self.size.height)

    def with_y(self, y: float) -> Rect:
        return Rect.from_xywh(self.origin.x, y, self.size.width, self.size.height)

    def with_width(self, width: float) -> Rect:
        return Rect.from_xywh(self.origin.x, self.origin.y, width, self.size.height)

    def with_height(self, height: float) -> Rect:
        return Rect.from_xywh(self.origin.x, self.origin.y, self.size.width, height)

    def with_origin(self, origin: Point) -> Rect:
        return Rect(origin, self.size)

    def with_size(self, size: Size) -> Rect:
        return Rect(self.origin, size)

    def with_center(self, center: Point) -> Rect:
        return Rect.from_center_and_size(center, self.size)

    def center_in_rect(self, outer: Rect) -> Rect:
        """Return a rectangle of this size centered on ``outer``."""
        return Rect.from_center_and_size(outer.center, self.size)

    def offset_by(self, dx: float, dy: float) -> Rect:
        return Rect.from_xywh(self.origin.x + dx, self.origin.y + dy, self.size.width, self.size.height)

    def offset(self, delta: Point | Size | Vector) -> Rect:
        """Translate by a point, size or vector read as (dx, dy)."""
        if isinstance(delta, Point):
            return self.offset_by(delta.x, delta.y)
        if isinstance(delta, Size):
            return self.offset_by(delta.width, delta.height)
        if isinstance(delta, Vector):
            return self.offset_by(delta.dx, delta.dy)
        raise TypeError(f"cannot offset Rect by {type(delta).__name__}")

    def fit_inside_with_aspect_ratio(self, aspect_size: Size) -> Rect:
        """Return the largest rectangle with ``aspect_size``'s ratio centered in this one.

        When this rectangle is relatively wider, the height is kept and the
        width shrinks to the target ratio. Otherwise the result is
        ``Size(target_ratio * width, width)``; that branch keeps the
        historical field mapping, which only matches the target ratio for
        square results.
        """
        aspect_ratio = divide(self.size.width, self.size.height)
        target_aspect_ratio = divide(aspect_size.width, aspect_size.height)
        if aspect_ratio > target_aspect_ratio:
            target_width = target_aspect_ratio * self.size.height
            fitted = Size(target_width, self.size.height)
        else:
            target_height = target_aspect_ratio * self.size.width
            fitted = Size(target_height, self.size.width)
        _LOG.debug(
            "fit_inside_with_aspect_ratio: ratio=%r target=%r fitted=%r",
            aspect_ratio,
            target_aspect_ratio,
            fitted,
        )
        return Rect.from_center_and_size(self.center, fitted)

    def is_close(
        self,
        other: Rect,
        *,
        rel_tol: float | None = None,
        abs_tol: float | None = None,
    ) -> bool:
        return self.origin.is_close(other.origin, rel_tol=rel_tol, abs_tol=abs_tol) and self.size.is_close(
            other.size, rel_tol=rel_tol, abs_tol=abs_tol
        )

    # Rect + Point translates, Rect + Size grows; there is no Rect + Vector.

    def __add__(self, other: Point | Size) -> Rect:
        if isinstance(other, Point):
            return Rect(self.origin + other, self.size)
        if isinstance(other, Size):
            return Rect(self.origin, self.size + other)
        return NotImplemented

    def __sub__(self, other: Point | Size) -> Rect:
        if isinstance(other, Point):
            return Rect(self.origin - other, self.size)
        if isinstance(other, Size):
            return Rect(self.origin, self.size - other)
        return NotImplemented

    def __mul__(self, other: float) -> Rect:
        if is_scalar(other):
            return Rect(self.origin * other, self.size * other)
        return NotImplemented

    def __iadd__(self, other: Point | Size) -> Rect:
        if isinstance(other, Point):
            self.origin += other
        elif isinstance(other, Size):
            self.size += other
        else:
            return NotImplemented
        return self

    def __isub__(self, other: Point | Size) -> Rect:
        if isinstance(other, Point):
            self.origin -= other
        elif isinstance(other, Size):
            self.size -= other
        else:
            return NotImplemented
        return self
