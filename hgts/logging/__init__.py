"""Structured logging for hgts.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_logger(): Get a logger for a module
"""

from hgts.logging.setup import (
    PACKAGE_LOGGER,
    configure_logging,
    get_logger,
)

__all__ = [
    "PACKAGE_LOGGER",
    "configure_logging",
    "get_logger",
]
