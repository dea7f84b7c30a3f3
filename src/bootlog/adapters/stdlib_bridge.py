"""Bridge from the stdlib :mod:`logging` facade into the sink pipeline.

Modules that only know ``logging.getLogger(__name__)`` reach the sink through
:class:`SinkHandler`, attached to the root logger by the runtime. This is what
makes the installed sink process-wide: any record propagating to the root
logger is converted into a pipeline call.
"""

from __future__ import annotations

import logging
from typing import Any

from bootlog.application.use_cases.process_event import ProcessCallable
from bootlog.domain.levels import LogLevel

_RESERVED_RECORD_FIELDS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime", "taskName"}


class SinkHandler(logging.Handler):
    """Forward stdlib log records to the sink's process callable."""

    def __init__(self, process: ProcessCallable, *, level: int = logging.NOTSET, show_threads: bool = False) -> None:
        super().__init__(level=level)
        self._process = process
        self._show_threads = show_threads
        self._exc_formatter = logging.Formatter()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            exc_text = None
            if record.exc_info:
                exc_text = self._exc_formatter.formatException(record.exc_info)
            elif record.exc_text:
                exc_text = record.exc_text
            self._process(
                logger_name=record.name or "root",
                level=LogLevel.from_python_level(record.levelno),
                message=record.getMessage(),
                extra=_record_extra(record),
                thread_name=record.threadName if self._show_threads else None,
                exc_info=exc_text,
            )
        except Exception:
            self.handleError(record)


def _record_extra(record: logging.LogRecord) -> dict[str, Any]:
    """Return the ``extra=`` fields a caller attached to ``record``."""
    return {key: value for key, value in record.__dict__.items() if key not in _RESERVED_RECORD_FIELDS and not key.startswith("_")}


def attach_to_root(handler: SinkHandler, level: LogLevel) -> int:
    """Install ``handler`` on the root logger and return the previous root level."""
    root = logging.getLogger()
    previous = root.level
    root.addHandler(handler)
    root.setLevel(level.to_python_level())
    return previous


def detach_from_root(handler: SinkHandler, previous_level: int) -> None:
    """Remove ``handler`` from the root logger and restore its level."""
    root = logging.getLogger()
    root.removeHandler(handler)
    root.setLevel(previous_level)
    handler.close()


__all__ = ["SinkHandler", "attach_to_root", "detach_from_root"]
