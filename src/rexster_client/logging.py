"""
Debug Logging

The graph facade and transport report what they do through an injected
event logger. The default discards everything; ``StructlogEventLogger``
forwards events to structlog at debug level.
"""

import logging
import sys
from typing import Any, Protocol

import structlog


class EventLogger(Protocol):
    """Anything that can record a named event with key/value context."""

    def log_event(self, event: str, **fields: Any) -> None:
        ...


class NullEventLogger:
    """Event logger that drops every event."""

    def log_event(self, event: str, **fields: Any) -> None:
        pass


class StructlogEventLogger:
    """Event logger backed by structlog."""

    def __init__(self, name: str = "rexster_client", **context: Any):
        self._logger = structlog.get_logger(name).bind(**context)

    def log_event(self, event: str, **fields: Any) -> None:
        self._logger.debug(event, **fields)


def configure_logging(level: str = "INFO", json: bool = True) -> None:
    """
    Configure structlog for applications embedding the client.

    Args:
        level: Standard library log level name
        json: Render JSON lines instead of the console renderer
    """
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level.upper())
    logging.getLogger().setLevel(level.upper())

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
