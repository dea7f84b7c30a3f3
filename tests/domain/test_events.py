from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from bootlog.domain import LogEvent, LogLevel


def _event(**overrides) -> LogEvent:
    payload = {
        "sequence": 1,
        "timestamp": datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc),
        "logger_name": "tests",
        "level": LogLevel.INFO,
        "message": "hello",
    }
    payload.update(overrides)
    return LogEvent(**payload)


def test_timestamp_is_normalised_to_utc() -> None:
    offset = timezone(timedelta(hours=2))
    event = _event(timestamp=datetime(2025, 9, 23, 14, 0, tzinfo=offset))

    assert event.timestamp == datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc)
    assert event.timestamp.tzinfo is timezone.utc


def test_naive_timestamp_is_rejected() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        _event(timestamp=datetime(2025, 9, 23, 12, 0))


def test_empty_message_is_kept() -> None:
    assert _event(message="").message == ""
    assert _event(message="   ").to_dict()["message"] == "   "


def test_sequence_must_be_positive() -> None:
    with pytest.raises(ValueError, match="sequence must be positive"):
        _event(sequence=0)


def test_extra_is_copied() -> None:
    source = {"key": "value"}
    event = _event(extra=source)
    source["key"] = "changed"

    assert event.extra == {"key": "value"}


def test_to_dict_includes_exception_only_when_present() -> None:
    plain = _event().to_dict()
    failing = _event(exc_info="Traceback ...").to_dict()

    assert plain["level"] == "info"
    assert plain["timestamp"] == "2025-09-23T12:00:00+00:00"
    assert "exc_info" not in plain
    assert failing["exc_info"] == "Traceback ..."

