"""Structured logging configuration using structlog."""

import logging
import sys

import structlog
from structlog.types import EventDict, Processor

_SECRET_KEYS = ("api_key", "x-api-key", "X-API-KEY")


def redact_api_key(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Mask API keys before they reach a renderer.

    Only the last four characters are kept so keys can still be told apart.
    """
    for key in _SECRET_KEYS:
        value = event_dict.get(key)
        if isinstance(value, str) and value:
            event_dict[key] = "***" + value[-4:]
    headers = event_dict.get("headers")
    if isinstance(headers, dict):
        event_dict["headers"] = {
            k: ("***" + v[-4:] if k in _SECRET_KEYS and isinstance(v, str) else v)
            for k, v in headers.items()
        }
    return event_dict


def configure_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structured logging for the adapter.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Whether to output logs in JSON format (default: False for human-readable)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redact_api_key,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)
