"""
Structured Logging for Statebound
=================================

Bounded Context: Observability

JSON-structured logging for the store and the CLI.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from statebound_store.logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="store")
    >>> logger.info(
    ...     event=LogEvent.REGION_DELETED,
    ...     message="Region deleted",
    ...     metadata={'name': 'Ohio'}
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
