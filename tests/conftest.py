"""
Pytest configuration for throttled_stream tests.

Configures pytest-asyncio for async test support.
"""

import pytest

from throttled_stream.logging.config import LoggingConfig
from throttled_stream.logging.models import Entry, LogLevel

from tests.unit.mocks import ManualClock


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "asyncio: mark test as async"
    )


@pytest.fixture(autouse=True)
def quiet_logging():
    config = LoggingConfig()
    config.update(log_level="info", log_output="stderr", log_format="text")
    yield
    config.update(log_level="info", log_output="stderr", log_format="text")


@pytest.fixture
def manual_clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def sample_entry() -> Entry:
    return Entry(
        message="Test log message",
        level=LogLevel.INFO,
    )
