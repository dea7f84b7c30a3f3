from __future__ import annotations

import logging

import pytest

from bootlog import runtime
from bootlog.adapters.stdlib_bridge import SinkHandler, attach_to_root, detach_from_root
from bootlog.domain import LogLevel


class _RecordingProcess:
    def __init__(self) -> None:
        self.calls: list[dict] = []

    def __call__(self, **kwargs):
        self.calls.append(kwargs)
        return {"ok": True, "sequence": len(self.calls)}

    def current_sequence(self) -> int:
        return len(self.calls)


def _record(level: int = logging.INFO, msg: str = "hello %s", args=("world",), **attrs) -> logging.LogRecord:
    record = logging.LogRecord("pkg.module", level, __file__, 10, msg, args, None)
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


def test_handler_translates_record_fields() -> None:
    process = _RecordingProcess()
    handler = SinkHandler(process)

    handler.handle(_record(level=logging.WARNING))

    call = process.calls[0]
    assert call["logger_name"] == "pkg.module"
    assert call["level"] is LogLevel.WARNING
    assert call["message"] == "hello world"
    assert call["thread_name"] is None
    assert call["exc_info"] is None
    assert call["extra"] == {}


def test_handler_forwards_caller_extras() -> None:
    process = _RecordingProcess()
    handler = SinkHandler(process)

    handler.handle(_record(request_id="req-1"))

    assert process.calls[0]["extra"] == {"request_id": "req-1"}


def test_handler_reports_thread_names_when_enabled() -> None:
    process = _RecordingProcess()
    handler = SinkHandler(process, show_threads=True)

    handler.handle(_record())

    assert process.calls[0]["thread_name"] == _record().threadName


def test_handler_renders_exception_information() -> None:
    process = _RecordingProcess()
    handler = SinkHandler(process)
    try:
        raise ValueError("bad input")
    except ValueError:
        import sys

        record = logging.LogRecord("pkg", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

    handler.handle(record)

    exc_text = process.calls[0]["exc_info"]
    assert exc_text.startswith("Traceback")
    assert "ValueError: bad input" in exc_text


def test_handler_routes_failures_to_handle_error(monkeypatch) -> None:
    errors: list[logging.LogRecord] = []

    def broken(**kwargs):
        raise RuntimeError("pipeline down")

    handler = SinkHandler(broken)  # type: ignore[arg-type]
    monkeypatch.setattr(handler, "handleError", errors.append)

    handler.handle(_record())

    assert len(errors) == 1


def test_attach_and_detach_manage_root_logger() -> None:
    root = logging.getLogger()
    original_level = root.level
    handler = SinkHandler(_RecordingProcess())

    previous = attach_to_root(handler, LogLevel.DEBUG)
    try:
        assert previous == original_level
        assert handler in root.handlers
        assert root.level == logging.DEBUG
    finally:
        detach_from_root(handler, previous)

    assert handler not in root.handlers
    assert root.level == original_level


def test_records_from_any_logger_reach_the_attached_handler() -> None:
    process = _RecordingProcess()
    handler = SinkHandler(process)
    previous = attach_to_root(handler, LogLevel.DEBUG)
    try:
        logging.getLogger("some.third.party").debug("deep %d", 3)
    finally:
        detach_from_root(handler, previous)

    assert process.calls[-1]["logger_name"] == "some.third.party"
    assert process.calls[-1]["message"] == "deep 3"
    assert process.calls[-1]["level"] is LogLevel.DEBUG


def test_empty_stdlib_message_is_rendered_without_logging_error(capsys: pytest.CaptureFixture[str]) -> None:
    runtime.init(timestamps="off")

    logging.getLogger("lib").info("")
    logging.getLogger("lib").warning("after")

    captured = capsys.readouterr()
    assert captured.err == ""
    assert [line.rstrip() for line in captured.out.splitlines()] == ["INFO     [lib]", "WARNING  [lib] after"]
    assert runtime.inspect_runtime().events_emitted == 2
