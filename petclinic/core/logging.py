"""Structured logging setup.

Call ``configure_logging`` once while building the application, then take
loggers with ``get_logger(__name__)`` and log snake_case events with
key/value context::

    logger = get_logger(__name__)
    logger.info("owner_saved", owner_id=7)
"""

from __future__ import annotations

import logging

import structlog

from petclinic.core.config import Settings


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level, logging.INFO)

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]
    if settings.use_json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None):
    logger = structlog.get_logger()
    if name is not None:
        logger = logger.bind(logger=name)
    return logger
