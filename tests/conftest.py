from __future__ import annotations

from io import StringIO
from typing import Iterator

import pytest
from rich.console import Console

from bootlog import runtime

_ENVIRONMENT_KNOBS = (
    "LOG_CONSOLE_LEVEL",
    "LOG_MODULE_LEVELS",
    "LOG_STREAM",
    "LOG_TIMESTAMPS",
    "LOG_SHOW_THREADS",
    "LOG_CONSOLE_FORMAT_PRESET",
    "LOG_CONSOLE_FORMAT",
    "LOG_CONSOLE_THEME",
    "LOG_CONSOLE_STYLES",
    "LOG_FORCE_COLOR",
    "LOG_NO_COLOR",
    "LOG_USE_DOTENV",
    # Rich honours these when deciding whether to emit ANSI sequences.
    "FORCE_COLOR",
    "TTY_COMPATIBLE",
)


@pytest.fixture(autouse=True)
def fresh_sink(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start and finish every test without an installed sink or LOG_* overrides."""

    for name in _ENVIRONMENT_KNOBS:
        monkeypatch.delenv(name, raising=False)
    runtime._reset()
    try:
        yield
    finally:
        runtime._reset()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None)
