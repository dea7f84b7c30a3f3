"""Domain entities and value objects used by the logging sink."""

from __future__ import annotations

from .events import LogEvent
from .levels import LogLevel

__all__ = [
    "LogEvent",
    "LogLevel",
]
