"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import logging

import pytest
import structlog

from line_filter.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.

    Ignores any .env file so results don't depend on the developer machine.
    """
    return Settings(
        _env_file=None,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        OLLAMA_BASE_URL="http://localhost:11434",
        OLLAMA_MODEL="llama3.1:latest",
        OLLAMA_TIMEOUT=30.0,
    )


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo configure_logging() side effects after each test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()
