"""Scalar helpers shared by the geometry records."""

from __future__ import annotations

import numbers
from collections.abc import Iterable
from typing import TypeVar, cast

import numpy as np

from cgmath.logging import get_logger

_LOG = get_logger("cgmath.numeric")

T = TypeVar("T")


def is_scalar(value: object) -> bool:
    """Return whether a value is accepted as a scalar operand."""
    return isinstance(value, numbers.Real)


def divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics instead of raising on a zero divisor."""
    if denominator != 0:
        return numerator / denominator
    with np.errstate(divide="ignore", invalid="ignore"):
        result = float(np.true_divide(np.float64(numerator), np.float64(denominator)))
    _LOG.debug("zero divisor propagated: %r / %r -> %r", numerator, denominator, result)
    return result


def collect(values: tuple[object, ...], kind: type[T]) -> list[T]:
    """Accept either varargs of ``kind`` or a single iterable of them."""
    if len(values) == 1 and not isinstance(values[0], kind):
        only = values[0]
        if not isinstance(only, Iterable):
            raise TypeError(f"expected {kind.__name__} values or an iterable of them, got {only!r}")
        return list(only)
    return cast(list[T], list(values))


def mean_pairs(pairs: Iterable[tuple[float, float]]) -> tuple[float, float]:
    """Return the component-wise mean; empty input yields NaN components."""
    first = 0.0
    second = 0.0
    count = 0
    for a, b in pairs:
        first += a
        second += b
        count += 1
    return divide(first, count), divide(second, count)
