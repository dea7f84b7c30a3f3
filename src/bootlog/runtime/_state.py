"""Write-once runtime state container and access helpers."""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock

from bootlog.adapters import RichConsoleAdapter, SinkHandler
from bootlog.application.use_cases.process_event import ProcessCallable

from ._settings import SinkSettings


class LoggerInitError(RuntimeError):
    """Raised when the process-wide sink cannot be installed."""


class LoggerAlreadyInitialized(LoggerInitError):
    """A sink was already installed in this process."""

    def __init__(self) -> None:
        super().__init__("a logging sink is already installed in this process; bootlog.runtime.init() succeeds only once")


class SinkUnavailable(LoggerInitError):
    """The selected output stream does not exist (e.g. ``sys.stdout is None``)."""

    def __init__(self, stream: str) -> None:
        super().__init__(f"no {stream} stream is available to write log records to")
        self.stream = stream


@dataclass(slots=True)
class LoggingRuntime:
    """Aggregate of live collaborators assembled by the composition root."""

    settings: SinkSettings
    process: ProcessCallable
    console: RichConsoleAdapter
    handler: SinkHandler
    previous_root_level: int


_STATE: LoggingRuntime | None = None
_STATE_LOCK = RLock()


def install_runtime(runtime: LoggingRuntime) -> None:
    """Install ``runtime`` as the active singleton; only the first call succeeds."""

    with _STATE_LOCK:
        global _STATE
        if _STATE is not None:
            raise LoggerAlreadyInitialized()
        _STATE = runtime


def clear_runtime() -> LoggingRuntime | None:
    """Remove and return the active runtime if present."""

    with _STATE_LOCK:
        global _STATE
        runtime, _STATE = _STATE, None
        return runtime


def current_runtime() -> LoggingRuntime:
    """Return the active runtime or raise when uninitialised."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("bootlog.runtime.init() must be called before using the logging API")
        return _STATE


def is_initialised() -> bool:
    """Return ``True`` when :func:`bootlog.runtime.init` has succeeded."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "LoggerAlreadyInitialized",
    "LoggerInitError",
    "LoggingRuntime",
    "SinkUnavailable",
    "clear_runtime",
    "current_runtime",
    "install_runtime",
    "is_initialised",
]
