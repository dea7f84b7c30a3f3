"""Use case orchestrating the processing pipeline for a single log record.

Purpose
-------
Tie together threshold resolution, sequencing, timestamping, and console
emission for every record that reaches the sink.

Contents
--------
* :func:`resolve_threshold` – longest-prefix lookup of per-module levels.
* :func:`create_process_log_event` factory returning the runtime callable.

System Role
-----------
Application-layer orchestrator invoked by :func:`bootlog.runtime.init` to turn
the configured dependencies into a callable logging pipeline. Both the stdlib
bridge and :class:`bootlog.runtime.LoggerProxy` feed records through it.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from contextlib import suppress
from threading import Lock
from typing import Any, Protocol

from bootlog.application.ports import ClockPort, ConsolePort
from bootlog.domain import LogEvent, LogLevel

DiagnosticHook = Callable[[str, dict[str, Any]], None] | None


class ProcessCallable(Protocol):
    """Callable returned by :func:`create_process_log_event`."""

    def __call__(
        self,
        *,
        logger_name: str,
        level: LogLevel,
        message: str,
        extra: Mapping[str, Any] | None = None,
        thread_name: str | None = None,
        exc_info: str | None = None,
    ) -> dict[str, Any]: ...

    def current_sequence(self) -> int: ...


def resolve_threshold(logger_name: str, module_levels: Mapping[str, LogLevel], default: LogLevel) -> LogLevel:
    """Return the threshold that applies to ``logger_name``.

    The most specific dotted prefix configured in ``module_levels`` wins; when
    nothing matches ``default`` applies.

    Examples
    --------
    >>> levels = {"pkg": LogLevel.WARNING, "pkg.noisy": LogLevel.ERROR}
    >>> resolve_threshold("pkg.noisy.child", levels, LogLevel.DEBUG) is LogLevel.ERROR
    True
    >>> resolve_threshold("pkg.quiet", levels, LogLevel.DEBUG) is LogLevel.WARNING
    True
    >>> resolve_threshold("pkgother", levels, LogLevel.DEBUG) is LogLevel.DEBUG
    True
    """
    best: str | None = None
    for prefix in module_levels:
        if logger_name == prefix or logger_name.startswith(prefix + "."):
            if best is None or len(prefix) > len(best):
                best = prefix
    if best is None:
        return default
    return module_levels[best]


def create_process_log_event(
    *,
    console: ConsolePort,
    console_level: LogLevel,
    clock: ClockPort,
    module_levels: Mapping[str, LogLevel] | None = None,
    colorize_console: bool = True,
    diagnostic: DiagnosticHook = None,
) -> ProcessCallable:
    """Build the orchestrator capturing the current dependency wiring.

    Parameters
    ----------
    console:
        Console adapter implementing :class:`ConsolePort`.
    console_level:
        Minimum level required for emission when no module override matches.
    clock:
        Provider of timezone-aware timestamps.
    module_levels:
        Per-logger thresholds keyed by dotted logger prefix.
    colorize_console:
        When ``False`` the console adapter renders without colour.
    diagnostic:
        Optional callback invoked with ``"emitted"`` / ``"filtered"`` milestones.
        Exceptions raised by the hook never reach the caller.

    Returns
    -------
    ProcessCallable
        Function accepting ``logger_name``, ``level``, ``message`` and optional
        metadata, returning a diagnostic dictionary.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> class DummyConsole:
    ...     def __init__(self):
    ...         self.events = []
    ...     def emit(self, event, *, colorize):
    ...         self.events.append((event.sequence, event.message))
    >>> class DummyClock:
    ...     def now(self):
    ...         return datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
    >>> console = DummyConsole()
    >>> process = create_process_log_event(console=console, console_level=LogLevel.INFO, clock=DummyClock())
    >>> process(logger_name="demo", level=LogLevel.INFO, message="A")
    {'ok': True, 'sequence': 1}
    >>> process(logger_name="demo", level=LogLevel.DEBUG, message="hidden")
    {'ok': False, 'reason': 'level_filtered'}
    >>> console.events
    [(1, 'A')]
    """

    levels = dict(module_levels or {})
    lock = Lock()
    sequence = 0

    def _diagnose(name: str, payload: dict[str, Any]) -> None:
        if diagnostic is None:
            return
        with suppress(Exception):
            diagnostic(name, payload)

    def process(
        *,
        logger_name: str,
        level: LogLevel,
        message: str,
        extra: Mapping[str, Any] | None = None,
        thread_name: str | None = None,
        exc_info: str | None = None,
    ) -> dict[str, Any]:
        nonlocal sequence
        threshold = resolve_threshold(logger_name, levels, console_level)
        if level.value < threshold.value:
            _diagnose("filtered", {"logger_name": logger_name, "level": level.severity, "threshold": threshold.severity})
            return {"ok": False, "reason": "level_filtered"}

        # Sequencing and emission share the lock so output order matches sequence order.
        with lock:
            sequence += 1
            event = LogEvent(
                sequence=sequence,
                timestamp=clock.now(),
                logger_name=logger_name,
                level=level,
                message=message,
                thread_name=thread_name,
                extra=dict(extra or {}),
                exc_info=exc_info,
            )
            console.emit(event, colorize=colorize_console)
        _diagnose("emitted", event.to_dict())
        return {"ok": True, "sequence": event.sequence}

    def current_sequence() -> int:
        with lock:
            return sequence

    process.current_sequence = current_sequence  # type: ignore[attr-defined]
    return process  # type: ignore[return-value]


__all__ = ["DiagnosticHook", "ProcessCallable", "create_process_log_event", "resolve_threshold"]
