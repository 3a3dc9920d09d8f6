from __future__ import annotations

import math

import pytest

from cgmath.point import Point
from cgmath.rect import Rect
from cgmath.size import Size
from cgmath.vector import Vector


def test_point_addition_and_subtraction() -> None:
    assert Point(10, 20) + Point(5, 15) == Point(15, 35)
    assert Point(10, 20) + 1 == Point(11, 21)
    assert Point(10, 20) + 0.5 == Point(10.5, 20.5)
    assert Point(10, 20) + Size(1, 2) == Point(11, 22)
    assert Point(10, 20) + Vector(-1, -2) == Point(9, 18)
    assert Point(10, 20) - Point(5, 15) == Point(5, 5)
    assert Point(10, 20) - 1 == Point(9, 19)
    assert Point(10, 20) - Size(1, 2) == Point(9, 18)
    assert Point(10, 20) - Vector(1, 2) == Point(9, 18)


def test_point_scaling() -> None:
    assert Point(10, 20) * 2.0 == Point(20, 40)
    assert Point(10, 20) * Vector(2, 3) == Point(20, 60)
    assert Point(10, 20) / 2 == Point(5, 10)
    assert Point(10, 20) / Vector(2, 4) == Point(5, 5)


def test_point_binary_operators_do_not_mutate_operands() -> None:
    left = Point(1, 2)
    right = Point(3, 4)
    result = left + right
    assert result is not left
    assert left == Point(1, 2)
    assert right == Point(3, 4)


def test_point_in_place_operators_mutate_left_operand() -> None:
    point = Point(1, 2)
    alias = point
    point += Point(1, 1)
    point += Size(1, 1)
    point += Vector(1, 1)
    point += 1
    assert point is alias
    assert point == Point(5, 6)
    point -= Point(1, 1)
    point -= Size(1, 1)
    point -= Vector(1, 1)
    point -= 1
    assert point == Point(1, 2)
    point *= 4
    point *= Vector(0.5, 2)
    assert point == Point(2, 16)
    point /= 2
    point /= Vector(1, 4)
    assert point is alias
    assert point == Point(1, 2)


def test_size_operators() -> None:
    assert Size(10, 20) + Size(1, 2) == Size(11, 22)
    assert Size(10, 20) + 5 == Size(15, 25)
    assert Size(10, 20) + Vector(1, 1) == Size(11, 21)
    assert Size(10, 20) - Size(1, 2) == Size(9, 18)
    assert Size(10, 20) - 5 == Size(5, 15)
    assert Size(10, 20) - Vector(1, 1) == Size(9, 19)
    assert Size(10, 20) * 3 == Size(30, 60)
    assert Size(10, 20) * Vector(2, 0.5) == Size(20, 10)
    assert Size(10, 20) / 10 == Size(1, 2)
    assert Size(10, 20) / Vector(5, 4) == Size(2, 5)


def test_size_in_place_operators() -> None:
    size = Size(10, 20)
    alias = size
    size += Size(1, 1)
    size += Vector(1, 1)
    size += 1
    size -= 3
    assert size == Size(10, 20)
    size -= Size(5, 5)
    size -= Vector(5, 5)
    assert size == Size(0, 10)
    size *= 2
    size *= Vector(1, 0.5)
    size /= 2
    size /= Vector(1, 5)
    assert size is alias
    assert size == Size(0, 1)


def test_vector_operators() -> None:
    assert Vector(2, 4) * 0.5 == Vector(1, 2)
    assert Vector(2, 4) * Vector(3, 2) == Vector(6, 8)
    assert Vector(2, 4) / 2 == Vector(1, 2)
    assert Vector(2, 4) / Vector(2, 4) == Vector(1, 1)
    vector = Vector(2, 4)
    alias = vector
    vector *= 2
    vector *= Vector(1, 0.5)
    vector /= 4
    vector /= Vector(0.5, 0.5)
    assert vector is alias
    assert vector == Vector(2, 2)


def test_rect_operators() -> None:
    rect = Rect.from_xywh(10, 10, 20, 20)
    assert rect + Point(5, 5) == Rect.from_xywh(15, 15, 20, 20)
    assert rect + Size(5, 5) == Rect.from_xywh(10, 10, 25, 25)
    assert rect - Point(5, 5) == Rect.from_xywh(5, 5, 20, 20)
    assert rect - Size(5, 5) == Rect.from_xywh(10, 10, 15, 15)
    assert rect * 2 == Rect.from_xywh(20, 20, 40, 40)
    assert rect == Rect.from_xywh(10, 10, 20, 20)


def test_rect_in_place_operators() -> None:
    rect = Rect.from_xywh(10, 10, 20, 20)
    alias = rect
    rect += Point(1, 2)
    rect += Size(3, 4)
    assert rect == Rect.from_xywh(11, 12, 23, 24)
    rect -= Point(1, 2)
    rect -= Size(3, 4)
    assert rect is alias
    assert rect == Rect.from_xywh(10, 10, 20, 20)


def test_rect_multiply_assign_rebinds_instead_of_mutating() -> None:
    rect = Rect.from_xywh(1, 1, 1, 1)
    original = rect
    rect *= 3
    assert rect == Rect.from_xywh(3, 3, 3, 3)
    assert original == Rect.from_xywh(1, 1, 1, 1)


def test_division_by_zero_propagates_infinity_and_nan() -> None:
    result = Point(1, 0) / 0
    assert result.x == math.inf
    assert math.isnan(result.y)
    size = Size(-1, 1)
    size /= 0.0
    assert size == Size(-math.inf, math.inf)
    vector = Vector(1, 1) / Vector(0, 1)
    assert vector.dx == math.inf and vector.dy == 1.0


@pytest.mark.parametrize(
    ("left", "right"),
    [
        (Vector(1, 1), Vector(1, 1)),
        (Vector(1, 1), 1),
        (Rect.zero(), Vector(1, 1)),
        (Size(1, 1), Point(1, 1)),
        (Point(1, 1), "1"),
    ],
)
def test_unsupported_additions_raise_type_error(left: object, right: object) -> None:
    with pytest.raises(TypeError):
        left + right  # type: ignore[operator]
    with pytest.raises(TypeError):
        left - right  # type: ignore[operator]


@pytest.mark.parametrize(
    ("left", "right"),
    [
        (Point(1, 1), Point(1, 1)),
        (Point(1, 1), Size(1, 1)),
        (Size(1, 1), Size(1, 1)),
        (Rect.zero(), Vector(1, 1)),
    ],
)
def test_unsupported_multiplications_raise_type_error(left: object, right: object) -> None:
    with pytest.raises(TypeError):
        left * right  # type: ignore[operator]


def test_operators_are_left_operand_only() -> None:
    with pytest.raises(TypeError):
        2 * Point(1, 1)  # type: ignore[operator]
    with pytest.raises(TypeError):
        1 + Size(1, 1)  # type: ignore[operator]
    with pytest.raises(TypeError):
        Rect.zero() / 2  # type: ignore[operator]


def test_unsupported_in_place_operation_raises_and_leaves_operand_intact() -> None:
    vector = Vector(1, 2)
    with pytest.raises(TypeError):
        vector += Vector(1, 1)  # type: ignore[operator]
    assert vector == Vector(1, 2)
