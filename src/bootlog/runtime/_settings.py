"""Resolution of ``init`` keyword arguments and ``LOG_*`` environment overrides.

Environment variables take precedence over call arguments so operators can
reconfigure the sink without touching code. Everything is validated here, so
:func:`bootlog.runtime.init` either installs a fully consistent sink or fails
before touching global state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

from bootlog.adapters._formatting import TIMESTAMP_MODES, resolve_template, validate_template
from bootlog.application.use_cases.process_event import DiagnosticHook
from bootlog.domain import LogLevel
from bootlog.domain.palettes import CONSOLE_STYLE_THEMES

STREAMS: tuple[str, ...] = ("stdout", "stderr")


@dataclass(frozen=True, slots=True)
class SinkSettings:
    """Validated configuration consumed by the composition root."""

    console_level: LogLevel = LogLevel.DEBUG
    module_levels: Mapping[str, LogLevel] = field(default_factory=dict)
    stream: str = "stdout"
    timestamps: str = "utc"
    show_threads: bool = False
    format_template: str = ""
    console_theme: str = "classic"
    console_styles: Mapping[str, str] = field(default_factory=dict)
    force_color: bool = False
    no_color: bool = False
    diagnostic_hook: DiagnosticHook = None

    @property
    def lowest_level(self) -> LogLevel:
        """Return the most verbose threshold any logger can reach."""
        candidates = [self.console_level, *self.module_levels.values()]
        return min(candidates, key=lambda level: level.value)


def build_sink_settings(
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
) -> SinkSettings:
    """Merge call arguments with environment overrides and validate the result."""

    level = coerce_level(os.getenv("LOG_CONSOLE_LEVEL") or console_level)

    resolved_modules = {name: coerce_level(value) for name, value in (module_levels or {}).items()}
    resolved_modules.update({name: coerce_level(value) for name, value in _parse_pairs(os.getenv("LOG_MODULE_LEVELS")).items()})

    stream = (os.getenv("LOG_STREAM") or stream).strip().lower()
    if stream not in STREAMS:
        raise ValueError(f"Unknown output stream: {stream!r} (expected one of {', '.join(STREAMS)})")

    timestamps = (os.getenv("LOG_TIMESTAMPS") or timestamps).strip().lower()
    if timestamps not in TIMESTAMP_MODES:
        raise ValueError(f"Unknown timestamp mode: {timestamps!r} (expected one of {', '.join(TIMESTAMP_MODES)})")

    template = validate_template(
        resolve_template(
            os.getenv("LOG_CONSOLE_FORMAT_PRESET") or format_preset,
            os.getenv("LOG_CONSOLE_FORMAT") or format_template,
        )
    )

    theme = (os.getenv("LOG_CONSOLE_THEME") or console_theme or "classic").strip().lower()
    try:
        palette = CONSOLE_STYLE_THEMES[theme]
    except KeyError as exc:
        raise ValueError(f"Unknown console theme: {theme!r}") from exc
    styles = merge_console_styles(palette, console_styles)
    styles = merge_console_styles(styles, _parse_pairs(os.getenv("LOG_CONSOLE_STYLES")))
    for key in styles:
        LogLevel.from_name(key)

    return SinkSettings(
        console_level=level,
        module_levels=resolved_modules,
        stream=stream,
        timestamps=timestamps,
        show_threads=env_bool("LOG_SHOW_THREADS", show_threads),
        format_template=template,
        console_theme=theme,
        console_styles=styles,
        force_color=env_bool("LOG_FORCE_COLOR", force_color),
        no_color=env_bool("LOG_NO_COLOR", no_color),
        diagnostic_hook=diagnostic_hook,
    )


def coerce_level(level: str | LogLevel) -> LogLevel:
    """Normalise level inputs (string or enum) into :class:`LogLevel`.

    Examples
    --------
    >>> coerce_level("warning") is LogLevel.WARNING
    True
    >>> coerce_level(LogLevel.ERROR) is LogLevel.ERROR
    True
    """
    if isinstance(level, LogLevel):
        return level
    return LogLevel.from_name(level)


def env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    >>> env_bool('LOG_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_EXAMPLE_BOOL'] = '0'
    >>> env_bool('LOG_EXAMPLE_BOOL', default=True)
    False
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_pairs(raw: str | None) -> dict[str, str]:
    """Convert ``key=value`` comma-separated strings into a dictionary.

    Shared by ``LOG_MODULE_LEVELS`` and ``LOG_CONSOLE_STYLES``; malformed
    chunks are skipped.

    Examples
    --------
    >>> _parse_pairs('INFO=green, ERROR = bold red, ,invalid')
    {'INFO': 'green', 'ERROR': 'bold red'}
    >>> _parse_pairs(None)
    {}
    """
    if not raw:
        return {}
    result: dict[str, str] = {}
    for chunk in raw.split(","):
        if "=" not in chunk:
            continue
        key, value = chunk.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key or not value:
            continue
        result[key] = value
    return result


def merge_console_styles(
    base: Mapping[str, str] | None,
    overrides: Mapping[str | LogLevel, str] | None,
) -> dict[str, str]:
    """Combine console styles, letting ``overrides`` win per level.

    Examples
    --------
    >>> merge_console_styles({'INFO': 'cyan'}, {'info': 'green', 'ERROR': 'red'})
    {'INFO': 'green', 'ERROR': 'red'}
    """
    merged: dict[str, str] = {}

    def _normalise_key(key: str | LogLevel) -> str:
        if isinstance(key, LogLevel):
            return key.name
        return key.strip().upper()

    for source in (base, overrides):
        for key, value in (source or {}).items():
            norm = _normalise_key(key)
            if norm:
                merged[norm] = value
    return merged


__all__ = ["DiagnosticHook", "STREAMS", "SinkSettings", "build_sink_settings", "coerce_level", "env_bool", "merge_console_styles"]
