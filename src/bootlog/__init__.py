"""Public package surface: the write-once logging sink and the bootstrap.

``import bootlog`` gives access to :func:`init` for hosts that want the sink
without the bundled reporters, and to :func:`run` for the full bootstrap that
``python -m bootlog`` executes.
"""

from __future__ import annotations

from .bootstrap import FAILED_INIT_MESSAGE, run, summary_info
from .domain import LogLevel
from .runtime import (
    LoggerAlreadyInitialized,
    LoggerInitError,
    LoggerProxy,
    RuntimeSnapshot,
    SinkUnavailable,
    get,
    init,
    inspect_runtime,
    is_initialised,
)

__all__ = [
    "FAILED_INIT_MESSAGE",
    "LogLevel",
    "LoggerAlreadyInitialized",
    "LoggerInitError",
    "LoggerProxy",
    "RuntimeSnapshot",
    "SinkUnavailable",
    "get",
    "init",
    "inspect_runtime",
    "is_initialised",
    "run",
    "summary_info",
]
