"""structlog configuration for the infrastructure layer.

Only infrastructure code logs.  Domain and application code raise and let
the caller decide what to report.
"""

from __future__ import annotations

import logging
import sys

import structlog

from aquaworld.infrastructure.config import Settings


def configure_logging(settings: Settings) -> None:
    """Route structlog output to stderr at the configured level."""
    renderer: structlog.types.Processor
    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
