"""Console port describing terminal emission contracts.

Purpose
-------
Define the abstraction for adapters that render log events to a standard
stream, letting the application layer depend on a narrow protocol.

Contents
--------
* :class:`ConsolePort` – runtime-checkable protocol with a single ``emit``
  method supporting optional colour control.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from bootlog.domain.events import LogEvent


@runtime_checkable
class ConsolePort(Protocol):
    """Render a log event to an output stream."""

    def emit(self, event: LogEvent, *, colorize: bool) -> None:
        """Render ``event`` with optional colour control."""


__all__ = ["ConsolePort"]
