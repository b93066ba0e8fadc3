"""Shared pytest fixtures for sklog tests."""

from unittest.mock import patch

import pytest
from loguru import logger

from sklog import LogLevel, set_default_colorize, set_default_level


@pytest.fixture(autouse=True)
def disable_loguru():
    """Keep the package's own loguru tracing quiet during tests."""
    logger.disable("sklog")
    yield
    logger.disable("sklog")


@pytest.fixture(autouse=True)
def default_settings():
    """Start every test from the documented defaults and restore them after."""
    set_default_level(LogLevel.DEBUG)
    set_default_colorize(True)
    yield
    set_default_level(LogLevel.DEBUG)
    set_default_colorize(True)


@pytest.fixture
def frozen_time():
    """Pin the timestamp written on every log line."""
    with patch("sklog.logger.current_time", return_value="2024-12-02 09:30:05.007"):
        yield "2024-12-02 09:30:05.007"
