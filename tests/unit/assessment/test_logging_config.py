"""Tests for structlog configuration driven by LoggingConfig."""

import logging
from collections.abc import Iterator

import pytest
import structlog

from assessment.config import LoggingConfig
from assessment.logging_config import build_processors, configure_logging


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    root_level = logging.getLogger().level
    yield
    configure_logging()
    logging.getLogger().setLevel(root_level)


def test_json_format_renders_json() -> None:
    processors = build_processors("json")
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
    assert structlog.processors.format_exc_info in processors


def test_console_format_renders_for_humans() -> None:
    processors = build_processors("console")
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


def test_configure_applies_format() -> None:
    configure_logging(LoggingConfig(format="console"))
    assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)

    configure_logging(LoggingConfig(format="json"))
    assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)


def test_configure_applies_level() -> None:
    configure_logging(LoggingConfig(level="ERROR"))
    assert logging.getLogger().level == logging.ERROR


def test_defaults_to_json() -> None:
    configure_logging()
    assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)
