"""Shared fixtures for the hgts test suite."""

import logging

import pytest
import structlog

from hgts.logging import PACKAGE_LOGGER, setup
from hgts.providers import get_settings, get_translator


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset application-scoped providers around every test."""
    get_settings.cache_clear()
    get_translator.cache_clear()
    yield
    get_settings.cache_clear()
    get_translator.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo configure_logging after each test.

    Leaves structlog on its defaults and the hgts logger with only its
    NullHandler, which is how an application sees hgts before configuring it.
    """
    yield
    structlog.reset_defaults()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    setup._handler = None
