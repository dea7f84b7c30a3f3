"""Log level abstraction providing richer metadata than the stdlib constants.

Purpose
-------
Offer a domain-specific representation of log severities that augments the
stdlib levels with icons, four-letter codes, and helper conversions.

Contents
--------
* :class:`LogLevel` enum with conversion helpers and presentation metadata.
* ``_ICON_TABLE`` / ``_CODE_TABLE`` constants mapping levels to console glyphs
  and fixed-width codes.

System Role
-----------
Used by the processing pipeline to decide whether a record passes the sink's
thresholds and by the console adapter to render human-friendly level labels.
"""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(Enum):
    """Enumerated logging levels used throughout the system."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @property
    def severity(self) -> str:
        """Return the lowercase severity name for structured payloads."""

        return self.name.lower()

    @property
    def icon(self) -> str:
        """Return the unicode icon visualising the level on coloured consoles."""

        return _ICON_TABLE[self]

    @property
    def code(self) -> str:
        """Return the four-letter code used by compact console presets."""

        return _CODE_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        return getattr(logging, self.name)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` whose value is exactly ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate any stdlib logging level integer into :class:`LogLevel`.

        Custom stdlib levels (``logging.addLevelName(25, "NOTICE")``) fall back
        to the nearest standard level at or below them; values outside the
        standard range clamp to ``DEBUG`` / ``CRITICAL``.

        Examples
        --------
        >>> LogLevel.from_python_level(logging.WARNING) is LogLevel.WARNING
        True
        >>> LogLevel.from_python_level(25) is LogLevel.INFO
        True
        >>> LogLevel.from_python_level(5) is LogLevel.DEBUG
        True
        """
        resolved = cls.DEBUG
        for member in cls:
            if member.value <= level:
                resolved = member
        return resolved


# Console glyphs displayed by the Rich adapter per log level.
_ICON_TABLE = {
    LogLevel.DEBUG: "🐞",
    LogLevel.INFO: "ℹ",
    LogLevel.WARNING: "⚠",
    LogLevel.ERROR: "✖",
    LogLevel.CRITICAL: "☠",
}

_CODE_TABLE = {
    LogLevel.DEBUG: "DEBG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERRO",
    LogLevel.CRITICAL: "CRIT",
}


__all__ = ["LogLevel"]
