"""Package configuration sourced from environment."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

_LOG_FORMATS = frozenset({"text", "json"})


@dataclass(frozen=True, slots=True)
class GeometryConfig:
    """Immutable tolerance and logging configuration."""

    rel_tolerance: float = 1e-9
    abs_tolerance: float = 1e-9
    log_level: str = "WARNING"
    log_format: str = "text"  # text|json


_GEOMETRY_CONFIG: ContextVar[GeometryConfig | None] = ContextVar(
    "cgmath_geometry_config", default=None
)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def resolve_log_level_name(default: str = "WARNING", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("CGMATH_LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = _text("LOG_LEVEL", default, env=env)
    return value.strip().upper()


def load_geometry_config(*, env: Mapping[str, str] | None = None) -> GeometryConfig:
    """Load configuration from env vars, falling back to defaults on bad values."""
    log_format = _text("CGMATH_LOG_FORMAT", "text", env=env).lower()
    if log_format not in _LOG_FORMATS:
        log_format = "text"
    return GeometryConfig(
        rel_tolerance=_float("CGMATH_REL_TOLERANCE", 1e-9, minimum=0.0, env=env),
        abs_tolerance=_float("CGMATH_ABS_TOLERANCE", 1e-9, minimum=0.0, env=env),
        log_level=resolve_log_level_name(env=env),
        log_format=log_format,
    )


def initialize_geometry_config(*, env: Mapping[str, str] | None = None) -> GeometryConfig:
    config = load_geometry_config(env=env)
    _GEOMETRY_CONFIG.set(config)
    return config


def set_geometry_config(config: GeometryConfig) -> GeometryConfig:
    _GEOMETRY_CONFIG.set(config)
    return config


def get_geometry_config() -> GeometryConfig:
    config = _GEOMETRY_CONFIG.get()
    if config is not None:
        return config
    return initialize_geometry_config()


def reset_geometry_config() -> None:
    """Drop the active config so the next lookup re-reads the environment."""
    _GEOMETRY_CONFIG.set(None)


__all__ = [
    "GeometryConfig",
    "get_geometry_config",
    "initialize_geometry_config",
    "load_geometry_config",
    "reset_geometry_config",
    "resolve_log_level_name",
    "set_geometry_config",
]
