"""Structured logging configuration."""

import logging
import sys
from typing import Any, Optional

import structlog

from corrgame.config import Settings, settings as default_settings


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    # Resolve sys.stderr per logger so redirected streams are honoured
    return structlog.PrintLogger(file=sys.stderr)


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog. Output goes to stderr so the game's stdout stays readable."""
    settings = settings or default_settings

    log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.log_format == "json":
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def ensure_logging() -> None:
    """Apply the package defaults unless the application configured structlog itself."""
    if not structlog.is_configured():
        setup_logging()


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """Get a configured logger instance."""
    ensure_logging()
    return structlog.get_logger(name)
