"""
Structured logging for the till.

Every event passes through the credential filter before it is rendered, so
user and login operations can bind whatever context they need without
leaking secrets. Development gets colored console lines, every other
environment gets one JSON object per event.
"""

import logging
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from bodega.config.settings import get_settings

# Event keys that must never reach a log sink
CREDENTIAL_KEYS = frozenset(
    {"password", "password_hash", "current_password", "new_password"}
)


def redact_credentials(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Drop credential fields from the event."""
    for key in event_dict.keys() & CREDENTIAL_KEYS:
        del event_dict[key]
    return event_dict


def add_app_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Tag events with the application, environment and till currency."""
    settings = get_settings()
    event_dict.setdefault("app", settings.app_name)
    event_dict.setdefault("version", settings.app_version)
    event_dict.setdefault("environment", settings.environment)
    event_dict.setdefault("currency", settings.currency.code)
    return event_dict


def _renderers(environment: str) -> list[Processor]:
    if environment == "development":
        return [structlog.dev.ConsoleRenderer(colors=True)]
    return [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def configure_logging(log_level: str | None = None) -> None:
    """Configure structlog over the standard library logger."""
    settings = get_settings()
    level = log_level or settings.log_level

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_credentials,
        add_app_context,
        *_renderers(settings.environment),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=getattr(logging, level))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, configuring logging on first use."""
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)
