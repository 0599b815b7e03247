"""Logging setup.

The host calls `configure_logging()` once at process startup, before the first
screen is created; the task modules only emit events through
`structlog.get_logger(__name__)`.
"""

from __future__ import annotations

import logging
import sys

import structlog

from apptask.core.settings import get_settings


def configure_logging(level: str | None = None, json: bool | None = None) -> None:
    """Configure stdlib logging + structlog logs to stdout.

    Unset arguments fall back to `LOG_LEVEL` / `LOG_JSON` from settings.
    """
    settings = get_settings()
    level = level or settings.LOG_LEVEL
    json = settings.LOG_JSON if json is None else json

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    structlog.configure_once(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
