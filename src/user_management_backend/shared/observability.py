"""Structured logging setup shared by the API and the middleware pipeline.

Records carry an ISO 8601 UTC timestamp, the level, the logger name and an
event name followed by key/value fields. JSON output is meant for deployed
instances, the console renderer for local development.
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import Any

import structlog


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Ensure timestamp is always present (ISO 8601)."""
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


def _rename_logger_name(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Publish the module name bound by get_logger() under the "logger" key."""
    if "logger_name" in event_dict:
        event_dict["logger"] = event_dict.pop("logger_name")
    return event_dict


def configure_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure structlog processors, renderer and level filter."""
    level_value = getattr(logging, level.upper(), logging.INFO)
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        _add_timestamp,
        _rename_logger_name,
    ]
    if fmt == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        # Loggers are module globals; resolving them per call keeps
        # reconfiguration (and structlog.testing.capture_logs) effective.
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a structured logger bound to *name*.

    Log with an event name and keyword fields::

        logger = get_logger(__name__)
        logger.info("request_started", method="GET", path="/users")
    """
    # Bound as an initial value so the proxy stays lazy; "logger" itself
    # would collide with wrap_logger's first parameter.
    return structlog.get_logger(logger_name=name)


__all__ = ["configure_logging", "get_logger"]
