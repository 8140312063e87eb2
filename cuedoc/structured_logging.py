"""Structured logging configuration for the command line converter."""

import logging
import sys

import structlog

from .config import ConverterConfig


def configure_structured_logging(config: ConverterConfig) -> None:
    """Route stdlib and structlog records to stderr.

    Library modules log through ``logging.getLogger(__name__)``; the command
    line front end logs through structlog. Both end up on the same stderr
    handler so that stdout carries only conversion output.

    Args:
        config: Converter configuration holding ``log_level`` and ``log_format``
    """
    level = getattr(logging, config.log_level.upper(), logging.WARNING)

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)

    renderer = (
        structlog.processors.JSONRenderer()
        if config.log_format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
