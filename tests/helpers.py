"""Shared helpers for reading captured sink output."""

from __future__ import annotations


def record_lines(output: str) -> list[str]:
    """Return the non-empty lines of captured sink output."""

    return [line for line in output.splitlines() if line.strip()]


def index_of_record(lines: list[str], logger_name: str, message: str) -> int:
    """Return the position of the line rendered for ``logger_name``/``message``."""

    suffix = f"[{logger_name}] {message}"
    for position, line in enumerate(lines):
        if line.endswith(suffix):
            return position
    raise AssertionError(f"no record {suffix!r} in {lines!r}")
