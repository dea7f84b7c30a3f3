"""CLI behaviour coverage for the click entry point."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from bootlog import __init__conf__, bootstrap, runtime
from bootlog import __main__ as cli_module
from bootlog import config as log_config
from tests.helpers import index_of_record, record_lines


def test_cli_runs_the_bootstrap_by_default() -> None:
    result = CliRunner().invoke(cli_module.cli, [])

    assert result.exit_code == 0, result.output
    lines = record_lines(result.output)
    assert index_of_record(lines, "reporter_a", "A") < index_of_record(lines, "reporter_b", "B")


def test_cli_version_does_not_install_the_sink() -> None:
    result = CliRunner().invoke(cli_module.cli, ["--version"])

    assert result.exit_code == 0
    assert result.output == f"{__init__conf__.version}\n"
    assert runtime.is_initialised() is False


def test_cli_info_prints_summary() -> None:
    result = CliRunner().invoke(cli_module.cli, ["--info"])

    assert result.exit_code == 0
    assert result.output == bootstrap.summary_info()


def test_cli_reports_initialisation_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []
    monkeypatch.setattr(bootstrap, "log_a", lambda: calls.append("a"))
    monkeypatch.setattr(bootstrap, "log_b", lambda: calls.append("b"))
    runtime.init()

    result = CliRunner().invoke(cli_module.cli, [])

    assert result.exit_code == 1
    assert "Failed to initialize logger" in result.output
    assert calls == []


def test_main_returns_zero_for_version(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_module.main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == __init__conf__.version


def test_main_returns_click_exit_code_for_usage_errors(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_module.main(["--no-such-option"]) == 2
    assert "No such option" in capsys.readouterr().err


def test_main_propagates_fatal_initialisation(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_TIMESTAMPS", "never")

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([])

    assert "Failed to initialize logger" in str(excinfo.value.code)


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over the environment toggle when deciding whether to load .env."""

    calls: list[object] = []
    monkeypatch.setattr(log_config, "enable_dotenv", lambda *args, **kwargs: calls.append(args))
    monkeypatch.setattr(cli_module, "run", lambda: None)
    runner = CliRunner()

    result = runner.invoke(cli_module.cli, ["--use-dotenv"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, [], env={log_config.DOTENV_ENV_VAR: "1"})
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv"], env={log_config.DOTENV_ENV_VAR: "1"})
    assert result.exit_code == 0
    assert calls == []

    result = runner.invoke(cli_module.cli, [])
    assert calls == []


def test_cli_dotenv_values_configure_the_sink(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    log_config._reset_dotenv_state_for_testing()
    (tmp_path / ".env").write_text("LOG_TIMESTAMPS=off\nLOG_MODULE_LEVELS=reporter_b=error\n")
    monkeypatch.chdir(tmp_path)

    try:
        result = CliRunner().invoke(cli_module.cli, ["--use-dotenv"])
    finally:
        log_config._reset_dotenv_state_for_testing()
        os.environ.pop("LOG_TIMESTAMPS", None)
        os.environ.pop("LOG_MODULE_LEVELS", None)

    assert result.exit_code == 0, result.output
    lines = record_lines(result.output)
    assert "INFO     [reporter_a] A" in lines
    assert not any(line.endswith("[reporter_b] B") for line in lines)
