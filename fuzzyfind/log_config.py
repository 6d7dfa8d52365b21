"""Structured logging setup."""

import logging
from typing import Optional

import structlog

from .config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure structlog on top of the standard library logging module.
    
    This is an application-level call; importing fuzzyfind never configures
    structlog. Records are handed to the ``fuzzyfind`` stdlib logger, so the
    application still decides where they go by installing stdlib handlers.
    
    Args:
        settings: Settings to read ``log_level``/``log_format`` from
    """
    settings = settings or get_settings()
    
    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()
    
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
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.getLogger("fuzzyfind").setLevel(settings.log_level.upper())


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a lazy structlog logger that follows whatever configuration is active."""
    return structlog.get_logger(name)
