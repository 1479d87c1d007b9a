"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

One JSON object per log line, so overlay activity can be queried in a log
aggregator.

Architecture:
- StructuredLogger builds the entry (component, event, context, metadata)
  and hands it to stdlib logging as a record attribute
- JSONFormatter renders that entry, adding the traceback of ERROR records
- bind() derives a logger that stamps extra context on every entry; the
  codec binds its wire format, the registry binds its name

Example:
    >>> logger = create_logger("harbour_map").bind(registry="harbour_map")
    >>> logger.info(
    ...     event=LogEvent.REGISTRY_POLYGON_ADDED,
    ...     message="Added polygon",
    ...     metadata={'polygon_id': 'harbour'}
    ... )

Output:
    {"timestamp": "2026-10-19T15:30:45.123456+00:00", "level": "INFO",
     "component": "harbour_map", "event": "registry.polygon.added",
     "message": "Added polygon", "context": {"registry": "harbour_map"},
     "metadata": {"polygon_id": "harbour"}}
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .events import LogEvent

RECORD_ATTRIBUTE = "structured"


class StructuredLogger:
    """
    Logger for one component, optionally carrying bound context.

    Loggers derived with bind() share the underlying stdlib logger, so
    handlers and level are configured once per component.

    Attributes:
        component: Component name (e.g., "codec", "harbour_map")
        context: Fields added to every entry
        logger: Underlying Python logger instance
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        context: Optional[Dict[str, Any]] = None
    ):
        self.component = component
        self.context = dict(context or {})
        self.logger = logging.getLogger(f"gmaps_overlay.{component}")
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def bind(self, **context: Any) -> "StructuredLogger":
        """Logger for the same component with context merged in."""
        return StructuredLogger(
            self.component,
            level=self.logger.level,
            context={**self.context, **context}
        )

    def _emit(
        self,
        level: int,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return

        entry: Dict[str, Any] = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': logging.getLevelName(level),
            'component': self.component,
            'event': event.value,
            'message': message,
        }
        if self.context:
            entry['context'] = self.context
        if metadata:
            entry['metadata'] = metadata
        if exc_info is not None:
            entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(
            level,
            "%s: %s",
            event.value,
            message,
            exc_info=exc_info if level >= logging.ERROR else None,
            extra={RECORD_ATTRIBUTE: entry}
        )

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        self._emit(logging.INFO, event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        self._emit(logging.WARNING, event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """
        Log an error event.

        When exc_info is given, its type and message go into the entry and
        its traceback is rendered by JSONFormatter.
        """
        self._emit(logging.ERROR, event, message, metadata, exc_info)


class JSONFormatter(logging.Formatter):
    """Render the structured entry of a record as one JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = getattr(record, RECORD_ATTRIBUTE, None)
        if entry is None:
            entry = {
                'level': record.levelname,
                'component': record.name,
                'message': record.getMessage(),
            }
        else:
            entry = dict(entry)

        if record.exc_info and record.exc_info[2] is not None:
            entry['traceback'] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Example:
        >>> logger = create_logger("codec", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
