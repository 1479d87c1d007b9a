"""
Structured Logging for gmaps_overlay
====================================

Bounded Context: Observability

JSON-structured logging for overlay serialization, registry changes and
configuration loading.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from gmaps_overlay.logging import create_logger, LogEvent
    >>> logger = create_logger("registry")
    >>> logger.info(
    ...     event=LogEvent.REGISTRY_POLYGON_ADDED,
    ...     message="Added polygon",
    ...     metadata={'polygon_id': 'harbour'}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, JSONFormatter, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'JSONFormatter',
    'create_logger',
]
