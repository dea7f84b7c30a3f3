"""Rich-powered console adapter implementing :class:`ConsolePort`.

Purpose
-------
Bridge the application layer with Rich so every accepted record becomes one
formatted, levelled line on the selected standard stream.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleAdapter` - adapter constructed by :func:`bootlog.runtime.init`.

System Role
-----------
The sink's only output; honours runtime overrides and environment variables
for colour control, timestamp mode, and line template.
"""

from __future__ import annotations

from typing import Mapping

from rich.console import Console
from rich.text import Text

from bootlog.adapters._formatting import FORMAT_PRESETS, build_format_payload
from bootlog.application.ports.console import ConsolePort
from bootlog.domain.events import LogEvent
from bootlog.domain.levels import LogLevel
from bootlog.domain.palettes import CONSOLE_STYLE_THEMES


#: Default Rich styles keyed by :class:`LogLevel` severity.
_STYLE_MAP: Mapping[LogLevel, str] = {LogLevel.from_name(key): value for key, value in CONSOLE_STYLE_THEMES["classic"].items()}


class RichConsoleAdapter(ConsolePort):
    """Render log events using Rich formatting with theme overrides."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        stream: str = "stdout",
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[LogLevel | str, str] | None = None,
        format_template: str | None = None,
        timestamps: str = "utc",
    ) -> None:
        """Configure the console adapter with stream, colour and style overrides."""
        if console is not None:
            self._console = console
        else:
            # ``file`` stays unset so Rich resolves sys.stdout/sys.stderr at write time.
            self._console = Console(
                stderr=stream == "stderr",
                force_terminal=True if force_color else None,
                no_color=no_color,
            )
        self._no_color = no_color
        self._template = format_template or FORMAT_PRESETS["simple"]
        self._timestamps = timestamps
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level = LogLevel.from_name(key) if isinstance(key, str) else key
            merged[level] = value
        self._style_map = merged

    @property
    def template(self) -> str:
        return self._template

    def emit(self, event: LogEvent, *, colorize: bool) -> None:
        """Print ``event`` using Rich with optional colour.

        Examples
        --------
        >>> from datetime import datetime, timezone
        >>> from io import StringIO
        >>> event = LogEvent(1, datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc), 'svc', LogLevel.INFO, 'msg')
        >>> console = Console(file=StringIO(), record=True)
        >>> adapter = RichConsoleAdapter(console=console)
        >>> adapter.emit(event, colorize=False)
        >>> console.export_text()
        '2025-09-30T12:00:00.000Z INFO     [svc] msg\\n'
        """
        style = self._style_map.get(event.level, "") if colorize and not self._no_color else ""
        line = Text(self.format_line(event), style=style)
        if event.exc_info:
            line.append("\n" + event.exc_info.rstrip("\n"))
        self._console.print(line, highlight=False, soft_wrap=True)

    def format_line(self, event: LogEvent) -> str:
        """Return the console line for ``event`` rendered through the active template."""
        payload = build_format_payload(event, timestamps=self._timestamps)
        return self._template.format(**payload)


__all__ = ["RichConsoleAdapter"]
