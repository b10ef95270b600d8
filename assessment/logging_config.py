"""
Structured logging configuration.

JSON lines for deployed environments, human-readable console output for
development, chosen by ``LoggingConfig.format``.
"""

import logging

import structlog
from structlog.types import Processor

from assessment.config import LoggingConfig


def build_processors(log_format: str) -> list[Processor]:
    """Processor chain shared by every logger, ending in the chosen renderer."""
    shared: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "console":
        return shared + [structlog.dev.ConsoleRenderer()]
    return shared + [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def configure_logging(config: LoggingConfig | None = None) -> None:
    """
    Configure structlog and the stdlib root level.

    Call before the first log call: loggers are cached on first use.
    """
    config = config or LoggingConfig()

    structlog.configure(
        processors=build_processors(config.format),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.getLogger().setLevel(config.level)
