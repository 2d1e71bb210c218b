"""Structured JSON logging with trace_id support.

Uses structlog for structured logging with JSON output.
Every log entry includes a trace_id so that the lines written while
assembling one batch of events can be correlated.
"""

from __future__ import annotations

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import IO, Any

import structlog

_trace_id: ContextVar[str] = ContextVar("trace_id", default="")
_HANDLER_MARK = "_analytics_tracker_handler"


def get_trace_id() -> str:
    """Get current trace ID from context."""
    tid = _trace_id.get()
    if not tid:
        tid = str(uuid.uuid4())
        _trace_id.set(tid)
    return tid


def set_trace_id(trace_id: str) -> None:
    """Set trace ID in context."""
    _trace_id.set(trace_id)


def _add_trace_id(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor: add trace_id to every log entry."""
    event_dict["trace_id"] = get_trace_id()
    return event_dict


def _namespace_processor(namespace: str) -> Any:
    def _add_namespace(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("tracker_namespace", namespace)
        return event_dict

    return _add_namespace


def setup_logging(
    level: str = "INFO",
    format: str = "json",
    namespace: str = "",
    stream: IO[str] | None = None,
) -> None:
    """Configure structured logging for the library's host application.

    Both structlog loggers and the plain ``logging`` loggers used inside
    the library are rendered by the same processor chain, so every entry
    carries ``trace_id`` (and ``tracker_namespace`` when set).

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        format: "json" for production, "console" for development.
        namespace: Tracker namespace stamped on every entry (optional).
        stream: Destination of the root handler (defaults to stderr).
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    shared: list[Any] = [
        structlog.contextvars.merge_contextvars,
        _add_trace_id,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if namespace:
        shared.insert(2, _namespace_processor(namespace))

    renderer: Any
    if format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_MARK, True)

    root = logging.getLogger()
    # Replace the handler of a previous call, leave foreign handlers alone
    for existing in root.handlers[:]:
        if getattr(existing, _HANDLER_MARK, False):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(log_level)


def reset_logging() -> None:
    """Remove the handler installed by :func:`setup_logging`."""
    root = logging.getLogger()
    for existing in root.handlers[:]:
        if getattr(existing, _HANDLER_MARK, False):
            root.removeHandler(existing)
    structlog.reset_defaults()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a module."""
    return structlog.get_logger(name)
