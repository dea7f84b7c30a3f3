"""Runtime composition helpers wiring domain, application, and adapters.

Purpose
-------
Translate :class:`SinkSettings` into the live :class:`LoggingRuntime`
singleton. The helpers here keep wiring small, declarative, and testable.

Contents
--------
* :class:`SystemClock` – UTC clock port.
* :class:`LoggerProxy` – direct façade over the process callable.
* :func:`build_runtime` – stream check, adapter creation, root-logger bridge.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from bootlog.adapters import RichConsoleAdapter, SinkHandler, attach_to_root
from bootlog.application.ports import ClockPort
from bootlog.application.use_cases.process_event import ProcessCallable, create_process_log_event
from bootlog.domain import LogLevel

from ._settings import SinkSettings
from ._state import LoggingRuntime, SinkUnavailable


class SystemClock(ClockPort):
    """Concrete clock port returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class LoggerProxy:
    """Lightweight facade for logging calls that bypass the stdlib facade.

    Level helpers return the diagnostic dictionary produced by the process
    use case (``ok`` plus either ``sequence`` or ``reason``).
    """

    def __init__(self, name: str, process: ProcessCallable) -> None:
        self._name = name
        self._process = process

    @property
    def name(self) -> str:
        return self._name

    def debug(self, message: str, *, extra: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        return self._log(LogLevel.DEBUG, message, extra)

    def info(self, message: str, *, extra: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        return self._log(LogLevel.INFO, message, extra)

    def warning(self, message: str, *, extra: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        return self._log(LogLevel.WARNING, message, extra)

    def error(self, message: str, *, extra: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        return self._log(LogLevel.ERROR, message, extra)

    def critical(self, message: str, *, extra: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        return self._log(LogLevel.CRITICAL, message, extra)

    def _log(self, level: LogLevel, message: str, extra: Optional[Mapping[str, Any]]) -> dict[str, Any]:
        payload = extra if extra is not None else {}
        return self._process(logger_name=self._name, level=level, message=message, extra=payload)


def _ensure_stream_available(stream: str) -> None:
    """Raise :class:`SinkUnavailable` when the selected standard stream is missing."""
    target = sys.stderr if stream == "stderr" else sys.stdout
    if target is None or getattr(target, "closed", False):
        raise SinkUnavailable(stream)


def create_console(settings: SinkSettings) -> RichConsoleAdapter:
    return RichConsoleAdapter(
        stream=settings.stream,
        force_color=settings.force_color,
        no_color=settings.no_color,
        styles=settings.console_styles,
        format_template=settings.format_template,
        timestamps=settings.timestamps,
    )


def build_runtime(settings: SinkSettings) -> LoggingRuntime:
    """Assemble the sink from resolved settings and bridge the root logger into it."""

    _ensure_stream_available(settings.stream)
    console = create_console(settings)
    process = create_process_log_event(
        console=console,
        console_level=settings.console_level,
        module_levels=settings.module_levels,
        clock=SystemClock(),
        colorize_console=not settings.no_color,
        diagnostic=settings.diagnostic_hook,
    )
    handler = SinkHandler(process, show_threads=settings.show_threads)
    previous_level = attach_to_root(handler, settings.lowest_level)
    return LoggingRuntime(
        settings=settings,
        process=process,
        console=console,
        handler=handler,
        previous_root_level=previous_level,
    )


__all__ = ["LoggerProxy", "SystemClock", "build_runtime", "create_console"]
