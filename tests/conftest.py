"""Pytest configuration for Pushover SDK tests."""

import pytest

from pushover_sdk import PushoverClient, PushoverConfig


@pytest.fixture(autouse=True)
def configure_structlog():
    """Configure structlog for testing."""
    import structlog

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@pytest.fixture
def config():
    """Create a test configuration pointing at a fake API."""
    return PushoverConfig(
        messages_url="http://test-pushover:8080/1/messages.json",
        validate_url="http://test-pushover:8080/1/users/validate.json",
        timeout=5.0,
    )


@pytest.fixture
def client(config):
    """Create a test client."""
    return PushoverClient(config)
