"""Logging configuration.

Modules log through ``structlog.get_logger(__name__)``; this wires
structlog onto the standard library root logger.
"""

import logging
import sys

import structlog

from sales.infrastructure.config import Settings


def setup_stdlib_logging(settings: Settings) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(settings.log_level)
    root_logger.addHandler(console_handler)


def setup_structlog(settings: Settings) -> None:
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.contextvars.merge_contextvars,
    ]

    if settings.environment in ["production", "staging"]:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(settings: Settings) -> None:
    """Configure all logging for the application."""
    setup_stdlib_logging(settings)
    setup_structlog(settings)
