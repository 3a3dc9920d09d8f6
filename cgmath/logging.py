"""Package logging helpers."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime

from cgmath.config import GeometryConfig, get_geometry_config

PACKAGE_LOGGER_NAME = "cgmath"

_STANDARD_RECORD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
    }
)


class JsonFormatter(logging.Formatter):
    """JSON formatter with extra-field preservation."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        extras = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_RECORD_FIELDS}
        if extras:
            payload["fields"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=repr)


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the package namespace."""
    if name == PACKAGE_LOGGER_NAME or name.startswith(f"{PACKAGE_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{name}")


def configure_logging(config: GeometryConfig) -> logging.Logger:
    """Install a single stream handler on the package logger."""
    level = getattr(logging, config.log_level.upper(), logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING
    handler = logging.StreamHandler()
    handler.setFormatter(_resolve_formatter(config.log_format))

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def setup_logging() -> logging.Logger:
    """Configure package logging from the active config unless already configured."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if logger.handlers:
        return logger
    return configure_logging(get_geometry_config())


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")


__all__ = [
    "JsonFormatter",
    "PACKAGE_LOGGER_NAME",
    "configure_logging",
    "get_logger",
    "setup_logging",
]
