"""
Pytest configuration and fixtures.
"""
import logging

import pytest
import structlog

from daffodil.authorship_domain import AuthorshipDomain
from daffodil.config import get_settings
from daffodil.presentation import BooksScreen, SplashScreen


@pytest.fixture
def books_screen():
    """Create a fresh books screen."""
    return BooksScreen()


@pytest.fixture
def splash_screen():
    """Create a fresh splash screen."""
    return SplashScreen()


@pytest.fixture
def domain():
    """Create a fresh authorship domain."""
    return AuthorshipDomain()


@pytest.fixture
def clean_settings(monkeypatch, tmp_path):
    """Run with an empty DAFFODIL_* environment and no cached settings."""
    monkeypatch.chdir(tmp_path)  # keep a developer's .env out of the test
    for key in ("DAFFODIL_APP_NAME", "DAFFODIL_APP_ENV", "DAFFODIL_LOG_LEVEL", "DAFFODIL_JSON_LOGS"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_logging():
    """Undo global logging configuration done by a test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
    structlog.reset_defaults()
