"""Domain event describing a single record accepted by the sink.

Purpose
-------
Provide an immutable representation of log records travelling from the stdlib
bridge (or a :class:`~bootlog.runtime.LoggerProxy`) to the console adapter.

Contents
--------
* :class:`LogEvent` dataclass with helper methods.
* Utility function ``_ensure_aware`` for timestamp validation.

System Role
-----------
Sits in the domain layer so adapters and the processing use case manipulate
plain data objects; the ``sequence`` field makes emission order observable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .levels import LogLevel


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.astimezone(timezone.utc)


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable log event handed to the console adapter.

    Attributes
    ----------
    sequence:
        Position of the event in the runtime's emission order (starts at 1).
    timestamp:
        Time of the event in timezone-aware UTC.
    logger_name:
        Logical logger emitting the event.
    level:
        :class:`LogLevel` severity associated with the event.
    message:
        Rendered message passed by the caller; may be empty, as the stdlib allows.
    thread_name:
        Name of the emitting thread when known.
    extra:
        Shallow copy of caller-supplied key/value pairs.
    exc_info:
        Optional exception string captured when logging failures.
    """

    sequence: int
    timestamp: datetime
    logger_name: str
    level: LogLevel
    message: str
    thread_name: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)
    exc_info: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))
        if self.sequence < 1:
            raise ValueError("sequence must be positive")
        object.__setattr__(self, "extra", dict(self.extra))

    def to_dict(self) -> dict[str, Any]:
        """Serialize the event to a dictionary with ISO8601 timestamps."""

        data = {
            "sequence": self.sequence,
            "timestamp": self.timestamp.isoformat(),
            "logger_name": self.logger_name,
            "level": self.level.severity,
            "message": self.message,
            "thread_name": self.thread_name,
            "extra": dict(self.extra),
        }
        if self.exc_info is not None:
            data["exc_info"] = self.exc_info
        return data


__all__ = ["LogEvent"]
