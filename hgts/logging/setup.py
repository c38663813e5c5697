"""Structlog configuration and logger setup.

hgts logs through the standard library ``logging`` module, under the
``hgts`` logger. That logger carries a ``NullHandler``, so nothing is
printed until the application configures ``logging`` or calls
``configure_logging()`` once at startup.

Usage:
    from hgts.logging import configure_logging, get_logger

    # Configure logging at app startup
    configure_logging()

    # Get a logger for your module
    logger = get_logger(__name__)
    logger.info("event_name", key="value")

Dependencies:
    - hgts.configuration.Settings
"""

import logging
import sys
from typing import IO, Optional

import structlog
from structlog.stdlib import BoundLogger

from hgts.configuration import Settings, get_settings

PACKAGE_LOGGER = "hgts"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

# Handler installed by configure_logging, replaced on reconfiguration
_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> BoundLogger:
    """Get a logger for a module.

    The logger wraps ``logging.getLogger(name)``, so its output follows the
    standard library configuration for that name.

    Args:
        name: Logger name, typically ``__name__`` of the calling module.

    Returns:
        Logger bound with ``component`` and ``module_path`` context.

    Example:
        # In hgts/translator.py
        logger = get_logger(__name__)
        # context: {"component": "translator", "module_path": "hgts.translator"}
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=BoundLogger,
        component=name.rsplit(".", 1)[-1],
        module_path=name,
    )


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional[Settings] = None,
    stream: Optional[IO[str]] = None,
) -> BoundLogger:
    """Configure structured logging for hgts.

    Installs one stream handler on the ``hgts`` logger; calling again
    replaces it.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production if not provided. Controls JSON vs console output.
        settings: Settings to read defaults from (default: get_settings()).
        stream: Where log lines are written (default: sys.stderr).

    Returns:
        Logger for the hgts package.
    """
    global _handler

    if log_level is None or is_production is None:
        settings = settings or get_settings()
    prod_mode = is_production if is_production is not None else settings.is_production
    effective_log_level = log_level or settings.LOG_LEVEL

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if not prod_mode:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(_handler)
    package_logger.setLevel(getattr(logging, effective_log_level.upper(), logging.INFO))
    package_logger.propagate = False

    return get_logger(PACKAGE_LOGGER)
