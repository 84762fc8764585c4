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

# Set per HTTP request by the logging middleware
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
operation_ctx: ContextVar[str | None] = ContextVar("graphql_operation", default=None)


def add_request_context(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor attaching the current request id and GraphQL operation."""
    _ = logger, method_name

    request_id = request_id_ctx.get()
    if request_id:
        event_dict["request_id"] = request_id

    operation = operation_ctx.get()
    if operation:
        event_dict["graphql_operation"] = operation

    return event_dict


def resolve_log_level(debug: bool, log_level: str) -> int:
    """Map settings to a stdlib level. Debug mode always logs at DEBUG."""
    if debug:
        return logging.DEBUG
    level = logging.getLevelName(log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(debug: bool = False, log_level: str = "INFO") -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        debug: Log everything and render for the console instead of as JSON.
        log_level: Level name used when debug is off (e.g. "info", "WARNING").
    """
    logging.basicConfig(
        level=resolve_log_level(debug, log_level),
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_request_context,
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(colors=True) if debug else structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Generate a compact request ID from a microsecond timestamp and two random bytes.

    Format: 14-character urlsafe base64 string without padding.
    """
    timestamp_us = int(time.time() * 1_000_000)
    combined_bytes = timestamp_us.to_bytes(8, byteorder="big") + secrets.token_bytes(2)
    return base64.urlsafe_b64encode(combined_bytes).decode("ascii").rstrip("=")


def set_request_context(request_id: str | None = None, operation: str | None = None) -> None:
    """Bind the request id (generated when None) and GraphQL operation for this request."""
    request_id_ctx.set(request_id or generate_request_id())
    operation_ctx.set(operation)


def clear_request_context() -> None:
    request_id_ctx.set(None)
    operation_ctx.set(None)
