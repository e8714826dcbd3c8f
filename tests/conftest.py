"""
Pytest configuration and fixtures for the lifecycle logger test suite.
"""

import io
from datetime import datetime

import pytest

from lifecycle_logger import LifecycleLogger, LoggerConfig, MessageComposer, OutputSink, reset_loggers
from lifecycle_logger.core.logging import setup_logging


FIXED_TIME = datetime(2024, 5, 17, 9, 5, 7)


@pytest.fixture
def stream():
    """In-memory console stream."""
    return io.StringIO()


@pytest.fixture
def console(stream):
    """Console logger writing to the in-memory stream."""
    return setup_logging(stream)


@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_TIME."""
    return lambda: FIXED_TIME


@pytest.fixture
def config():
    """Active config independent of the interpreter and environment."""
    return LoggerConfig(debug_build=True)


@pytest.fixture
def lifecycle(config, console, fixed_clock):
    """Logger wired to the in-memory console and a fixed clock."""
    return LifecycleLogger(
        config=config,
        sink=OutputSink(config, logger=console),
        composer=MessageComposer(clock=fixed_clock)
    )


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove lifecycle settings from the environment and shared instances."""
    for name in ("LIFECYCLE_LOG_DEBUG", "LIFECYCLE_LOG_ENABLED", "LIFECYCLE_LOG_PREFIX", "LIFECYCLE_LOG_SUFFIX"):
        monkeypatch.delenv(name, raising=False)
    reset_loggers()
    yield
    reset_loggers()
    setup_logging()
