"""structlog configuration shared by the CLI and library callers."""

from __future__ import annotations

import logging
import sys

import structlog

from vindinium.settings import settings

SECRET_FIELDS = frozenset({"key", "token", "api_key"})
REDACTED = "***"


def redact_secrets(logger, method_name: str, event_dict: dict) -> dict:
    """Mask API keys and game tokens before rendering."""
    for field in SECRET_FIELDS.intersection(event_dict):
        if event_dict[field]:
            event_dict[field] = REDACTED
    return event_dict


def configure_logging() -> None:
    """Route structlog through the stdlib root logger on stderr."""
    level = logging.getLevelName(settings.log_level())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)

    if settings.log_format() == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            redact_secrets,
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
