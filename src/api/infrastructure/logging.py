"""Structlog setup for the API process and the permission client.

Probes are the only emitters; this module decides how their events are
rendered.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

from infrastructure.settings import LoggingSettings, get_logging_settings


def _wants_console(settings: LoggingSettings) -> bool:
    if settings.format != "auto":
        return settings.format == "console"
    # FORCE_COLOR=1 keeps the console renderer in non-TTY shells (Docker)
    force_color = os.environ.get("FORCE_COLOR", "").lower() in ("1", "true", "yes")
    return force_color or sys.stdout.isatty()


def build_processors(settings: LoggingSettings) -> list[structlog.types.Processor]:
    """Processor chain for the configured output format."""
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if _wants_console(settings):
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    return processors


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog once per process.

    Events below ``settings.level`` are dropped before any processor runs.
    """
    settings = settings or get_logging_settings()
    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
