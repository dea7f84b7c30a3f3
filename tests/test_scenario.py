"""Fresh-process scenarios: the real interpreter, the real standard streams."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from tests.helpers import index_of_record, record_lines

SRC = Path(__file__).resolve().parents[1] / "src"


def _run(*args: str, extra_env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    env = {key: value for key, value in os.environ.items() if not key.startswith("LOG_") and key not in {"FORCE_COLOR", "TTY_COMPATIBLE"}}
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC), env.get("PYTHONPATH")]))
    env.update(extra_env or {})
    return subprocess.run(
        [sys.executable, *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        env=env,
        timeout=60,
        check=False,
    )


def test_fresh_process_logs_a_before_b_and_exits_zero() -> None:
    completed = _run("-m", "bootlog")

    assert completed.returncode == 0, completed.stderr
    lines = record_lines(completed.stdout)
    assert index_of_record(lines, "reporter_a", "A") < index_of_record(lines, "reporter_b", "B")
    assert completed.stderr == ""


def test_fresh_process_aborts_when_the_sink_cannot_be_installed() -> None:
    completed = _run("-m", "bootlog", extra_env={"LOG_STREAM": "printer"})

    assert completed.returncode != 0
    assert "Failed to initialize logger" in completed.stderr
    assert "[reporter_a]" not in completed.stdout
    assert "[reporter_b]" not in completed.stdout


def test_fresh_process_second_initialisation_is_fatal() -> None:
    script = "from bootlog import bootstrap, runtime\nruntime.init()\nbootstrap.run()\n"

    completed = _run("-c", script)

    assert completed.returncode == 1
    assert "Failed to initialize logger" in completed.stderr
    assert completed.stdout == ""
