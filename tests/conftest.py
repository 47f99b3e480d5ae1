"""Pytest configuration and shared fixtures.

Fixtures:
    mock_logger: MagicMock standing in for the container logger, patched
        into DetailedError so every construction records its call.
    public_error: UnexpectedServerError instance.
"""

from unittest.mock import MagicMock, patch

import pytest

from api_error.domain.public_error import UnexpectedServerError


@pytest.fixture
def mock_logger():
    """Patch the container logger used by DetailedError."""
    logger = MagicMock()
    with patch("api_error.domain.detailed_error.get_logger", return_value=logger):
        yield logger


@pytest.fixture
def public_error() -> UnexpectedServerError:
    return UnexpectedServerError()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real structlog and FastAPI"
    )
