"""
Centralized logging configuration using structlog
"""

import base64
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog

# Context variable for request tracking
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)


class RequestContextFilter:
    """Add request context to log records."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        """Add request context to the event dict."""
        # Required by the structlog processor interface
        _ = logger, method_name

        request_id = request_id_ctx.get()
        if request_id:
            event_dict["request_id"] = request_id

        return event_dict


def configure_logging(debug: bool = False, log_level: str | None = None) -> None:
    """Configure structlog with appropriate processors and formatters.

    Args:
        debug: If True, use human-readable console output. If False, use JSON.
        log_level: Explicit level name; overrides the level implied by ``debug``.
    """
    if log_level:
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    else:
        level = logging.DEBUG if debug else logging.INFO

    # Configure stdlib logging
    logging.basicConfig(
        level=level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        RequestContextFilter(),
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        # Development: human-readable console output
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        # Production: JSON output
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Generate a compact request ID from a microsecond timestamp plus randomness.

    Format: 14-character urlsafe base64 string (e.g., 'AAYR7mF2xYzAbc')
    """
    timestamp_us = int(time.time() * 1_000_000)
    random_bytes = secrets.token_bytes(2)
    combined_bytes = timestamp_us.to_bytes(8, byteorder="big") + random_bytes
    return base64.urlsafe_b64encode(combined_bytes).decode("ascii").rstrip("=")


def set_request_context(request_id: str | None = None) -> str:
    """Set the request context variable.

    Args:
        request_id: Request ID to set (generates one if None)

    Returns:
        The request ID now bound to the context
    """
    if request_id is None:
        request_id = generate_request_id()

    request_id_ctx.set(request_id)
    return request_id


def clear_request_context() -> None:
    """Clear request context variables."""
    request_id_ctx.set(None)


def get_request_id() -> str | None:
    """Get the current request ID."""
    return request_id_ctx.get()
