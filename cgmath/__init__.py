"""Arithmetic operators and convenience helpers for 2D geometry records."""

from cgmath.config import (
    GeometryConfig,
    get_geometry_config,
    load_geometry_config,
    set_geometry_config,
)
from cgmath.logging import configure_logging, get_logger, setup_logging
from cgmath.point import Point
from cgmath.rect import Rect
from cgmath.size import Size
from cgmath.vector import Vector

__all__ = [
    "GeometryConfig",
    "Point",
    "Rect",
    "Size",
    "Vector",
    "configure_logging",
    "get_geometry_config",
    "get_logger",
    "load_geometry_config",
    "set_geometry_config",
    "setup_logging",
]
