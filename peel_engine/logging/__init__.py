"""
Structured Logging for the Peel Engine
======================================

Bounded Context: Observability

Design:
- JSON output (one object per line)
- Typed events (enums prevent typos)
- Contextual metadata (corner, position, region_id, etc.)

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from peel_engine.logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="peel")
    >>> logger.info(
    ...     event=LogEvent.PEEL_INITIALIZED,
    ...     message="Peel ready",
    ...     metadata={'width': 200, 'height': 100}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
