from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from cgmath.config import reset_geometry_config
from cgmath.logging import PACKAGE_LOGGER_NAME


@pytest.fixture(autouse=True)
def fresh_geometry_config() -> Iterator[None]:
    reset_geometry_config()
    yield
    reset_geometry_config()


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    original_handlers = list(logger.handlers)
    original_level = logger.level
    try:
        logger.handlers.clear()
        yield logger
    finally:
        logger.handlers.clear()
        logger.handlers.extend(original_handlers)
        logger.setLevel(original_level)
