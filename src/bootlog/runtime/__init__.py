"""Runtime façade installing the process-wide logging sink.

Purpose
-------
Expose a stable entry point (``init``, ``get``, ``inspect_runtime``) that host
applications use instead of importing the inner layers directly. The module
translates keyword arguments and ``LOG_*`` environment overrides into a
composed sink built from domain entities, the processing use case, and
adapters.

Contents
--------
* ``init`` – composition root; succeeds once per process.
* ``get`` – logger proxy wired straight into the sink pipeline.
* ``inspect_runtime`` / ``is_initialised`` – read-only introspection.
* ``LoggerInitError`` and its subclasses – initialisation failures.

System Role
-----------
Forms the outer shell of the sink. The sink is write-once: there is no public
teardown, it lives until the process exits.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from bootlog.adapters import detach_from_root
from bootlog.domain import LogLevel
from bootlog.domain.palettes import CONSOLE_STYLE_THEMES

from . import _state as _state_module
from ._composition import LoggerProxy, build_runtime
from ._settings import DiagnosticHook, build_sink_settings, coerce_level
from ._state import (
    LoggerAlreadyInitialized,
    LoggerInitError,
    SinkUnavailable,
    current_runtime,
    install_runtime,
    is_initialised,
)


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active sink."""

    console_level: LogLevel
    module_levels: Mapping[str, LogLevel]
    stream: str
    timestamps: str
    show_threads: bool
    format_template: str
    console_theme: str
    force_color: bool
    no_color: bool
    events_emitted: int


__all__ = [
    "CONSOLE_STYLE_THEMES",
    "LoggerAlreadyInitialized",
    "LoggerInitError",
    "LoggerProxy",
    "RuntimeSnapshot",
    "SinkUnavailable",
    "coerce_level",
    "get",
    "init",
    "inspect_runtime",
    "is_initialised",
]


def init(
    *,
    console_level: str | LogLevel = LogLevel.DEBUG,
    module_levels: Mapping[str, str | LogLevel] | None = None,
    stream: str = "stdout",
    timestamps: str = "utc",
    show_threads: bool = False,
    format_preset: str | None = None,
    format_template: str | None = None,
    console_theme: str | None = None,
    console_styles: Mapping[str, str] | None = None,
    force_color: bool = False,
    no_color: bool = False,
    diagnostic_hook: DiagnosticHook = None,
) -> None:
    """Install the process-wide logging sink.

    Why
    ---
    Logging is foundational: hosts call ``init`` once at process start, before
    any other work, so every later record from any module reaches one sink.

    What
    ----
    Resolves configuration (arguments + ``LOG_*`` environment overrides),
    builds the Rich console adapter and processing pipeline, attaches the
    stdlib bridge to the root logger, and stores the runtime singleton.

    Inputs
    ------
    console_level:
        Minimum severity printed (default ``DEBUG``, i.e. everything).
    module_levels:
        Per-logger thresholds keyed by dotted prefix (``{"urllib3": "warning"}``).
    stream:
        ``"stdout"`` (default) or ``"stderr"``.
    timestamps:
        ``"utc"`` (default), ``"local"`` or ``"off"``.
    show_threads:
        Prefix records with the emitting thread name.
    format_preset / format_template:
        Named console template (``simple``, ``full``, ``short``) or an explicit
        ``str.format`` template overriding it.
    console_theme / console_styles / force_color / no_color:
        Colour controls for the Rich console.
    diagnostic_hook:
        Callback receiving ``("emitted"|"filtered", payload)`` milestones.

    Raises
    ------
    LoggerAlreadyInitialized
        A sink was installed earlier in this process.
    SinkUnavailable
        The selected output stream does not exist.
    ValueError
        A configuration value is malformed.

    Examples
    --------
    >>> import logging
    >>> from bootlog import runtime  # doctest: +SKIP
    >>> runtime.init(timestamps="off")  # doctest: +SKIP
    >>> logging.getLogger("docs").info("ready")  # doctest: +SKIP
    INFO     [docs] ready
    """

    with _state_module._STATE_LOCK:
        if is_initialised():
            raise LoggerAlreadyInitialized()
        settings = build_sink_settings(
            console_level=console_level,
            module_levels=module_levels,
            stream=stream,
            timestamps=timestamps,
            show_threads=show_threads,
            format_preset=format_preset,
            format_template=format_template,
            console_theme=console_theme,
            console_styles=console_styles,
            force_color=force_color,
            no_color=no_color,
            diagnostic_hook=diagnostic_hook,
        )
        install_runtime(build_runtime(settings))


def get(name: str) -> LoggerProxy:
    """Return a logger proxy bound to the installed sink.

    Side Effects
    ------------
    Raises :class:`RuntimeError` when ``init`` has not been called.
    """

    runtime = current_runtime()
    return LoggerProxy(name, runtime.process)


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the installed sink."""

    runtime = current_runtime()
    settings = runtime.settings
    return RuntimeSnapshot(
        console_level=settings.console_level,
        module_levels=MappingProxyType(dict(settings.module_levels)),
        stream=settings.stream,
        timestamps=settings.timestamps,
        show_threads=settings.show_threads,
        format_template=runtime.console.template,
        console_theme=settings.console_theme,
        force_color=settings.force_color,
        no_color=settings.no_color,
        events_emitted=runtime.process.current_sequence(),
    )


def _reset() -> None:
    """Drop the installed sink and restore the root logger.

    Not part of the public API; the sink has no teardown. Tests use this to
    start every case from a fresh-process equivalent.
    """

    runtime = _state_module.clear_runtime()
    if runtime is not None:
        detach_from_root(runtime.handler, runtime.previous_root_level)
