"""Utilities that normalise log events into template-friendly dictionaries.

Why
---
Console output accepts ``str.format`` placeholders. Producing the payload in
one place keeps the presets, custom templates, and timestamp modes in sync.

Contents
--------
* :data:`FORMAT_PRESETS` – named console templates.
* :data:`TIMESTAMP_MODES` – accepted timestamp rendering modes.
* :func:`build_format_payload` – generate placeholder values for a log event.
* :func:`resolve_template` – pick the template for a preset/override pair.
* :func:`validate_template` – reject templates that cannot render an event.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from bootlog.domain.events import LogEvent
from bootlog.domain.levels import LogLevel

FORMAT_PRESETS: dict[str, str] = {
    "simple": "{timestamp_prefix}{LEVEL:<8} {thread_prefix}[{logger_name}] {message}{extra_fields}",
    "full": "{timestamp} {level_icon} {LEVEL:>8} {logger_name} - {message}{extra_fields}",
    "short": "{hh}:{mm}:{ss}|{level_code}|{logger_name}: {message}",
}

TIMESTAMP_MODES: tuple[str, ...] = ("utc", "local", "off")


def resolve_template(preset: str | None, template: str | None) -> str:
    """Return the console template, preferring an explicit ``template``.

    Examples
    --------
    >>> resolve_template(None, "{message}")
    '{message}'
    >>> resolve_template("short", None) == FORMAT_PRESETS["short"]
    True
    """
    if template:
        return template
    key = (preset or "simple").strip().lower()
    try:
        return FORMAT_PRESETS[key]
    except KeyError as exc:
        raise ValueError(f"Unknown console format preset: {preset!r}") from exc


def _render_timestamp(event: LogEvent, mode: str) -> str:
    if mode == "off":
        return ""
    if mode == "local":
        return event.timestamp.astimezone().isoformat(timespec="milliseconds")
    return event.timestamp.strftime("%Y-%m-%dT%H:%M:%S.") + f"{event.timestamp.microsecond // 1000:03d}Z"


def build_format_payload(event: LogEvent, *, timestamps: str = "utc") -> dict[str, Any]:
    """Return the mapping of placeholders exposed to format templates."""

    if timestamps not in TIMESTAMP_MODES:
        raise ValueError(f"Unknown timestamp mode: {timestamps!r}")

    stamp = _render_timestamp(event, timestamps)
    local = event.timestamp.astimezone() if timestamps == "local" else event.timestamp
    extra_dict = dict(event.extra)
    extra_fields = ""
    if extra_dict:
        extra_fields = " " + " ".join(f"{key}={value}" for key, value in sorted(extra_dict.items()))

    level_text = event.level.name

    return {
        "timestamp": stamp,
        "timestamp_prefix": f"{stamp} " if stamp else "",
        "YYYY": f"{local.year:04d}",
        "MM": f"{local.month:02d}",
        "DD": f"{local.day:02d}",
        "hh": f"{local.hour:02d}",
        "mm": f"{local.minute:02d}",
        "ss": f"{local.second:02d}",
        "level": level_text,
        "LEVEL": level_text,
        "level_code": event.level.code,
        "level_icon": event.level.icon,
        "logger_name": event.logger_name,
        "message": event.message,
        "sequence": event.sequence,
        "thread_name": event.thread_name or "",
        "thread_prefix": f"<{event.thread_name}> " if event.thread_name else "",
        "extra": extra_dict,
        "extra_fields": extra_fields,
    }


def validate_template(template: str) -> str:
    """Return ``template`` after rendering it once against a sample event.

    Examples
    --------
    >>> validate_template("{LEVEL} {message}")
    '{LEVEL} {message}'
    >>> validate_template("{bogus}")
    Traceback (most recent call last):
    ...
    ValueError: Invalid console format template: '{bogus}' (unknown placeholder 'bogus')
    """

    sample = LogEvent(
        1,
        datetime(2000, 1, 1, tzinfo=timezone.utc),
        "bootlog",
        LogLevel.INFO,
        "sample",
        thread_name="MainThread",
        extra={"key": "value"},
    )
    try:
        template.format(**build_format_payload(sample))
    except KeyError as exc:
        raise ValueError(f"Invalid console format template: {template!r} (unknown placeholder {exc.args[0]!r})") from exc
    except (IndexError, ValueError, AttributeError) as exc:
        raise ValueError(f"Invalid console format template: {template!r} ({exc})") from exc
    return template


__all__ = ["FORMAT_PRESETS", "TIMESTAMP_MODES", "build_format_payload", "resolve_template", "validate_template"]
