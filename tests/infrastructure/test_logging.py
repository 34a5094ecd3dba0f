"""Tests for logging setup."""

import logging
from decimal import Decimal
from pathlib import Path

import pytest
import structlog

from sales.infrastructure.config import Settings
from sales.infrastructure.logging import configure_logging


def _settings(environment: str, log_level: str = "INFO") -> Settings:
    return Settings(
        data_dir=Path("data"),
        current_user=None,
        offer_delta=Decimal("5"),
        environment=environment,
        log_level=log_level,
    )


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.mark.parametrize(
    "environment, renderer",
    [
        ("production", structlog.processors.JSONRenderer),
        ("development", structlog.dev.ConsoleRenderer),
    ],
)
def test_renderer_follows_environment(environment, renderer):
    configure_logging(_settings(environment))

    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], renderer)


def test_root_logger_level_and_single_handler():
    configure_logging(_settings("test", "WARNING"))
    configure_logging(_settings("test", "WARNING"))

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
