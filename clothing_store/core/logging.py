"""Structured logging configuration."""

import logging
import sys
from typing import Optional

import structlog

from clothing_store.core.config import settings

# Drivers that log every statement at DEBUG
NOISY_LOGGERS = ("aiosqlite",)


def resolve_level(name: Optional[str] = None) -> int:
    """Map a level name such as "warning" to its logging constant."""
    level = getattr(logging, (name or settings.log_level).upper(), None)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level_name: Optional[str] = None) -> None:
    """Configure structlog and stdlib logging for the service.

    Events render as JSON lines (non-ASCII names kept readable) unless
    DEBUG is on, in which case the console renderer is used.
    """
    level = logging.DEBUG if settings.debug else resolve_level(level_name)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            (
                structlog.dev.ConsoleRenderer()
                if settings.debug
                else structlog.processors.JSONRenderer(ensure_ascii=False)
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
