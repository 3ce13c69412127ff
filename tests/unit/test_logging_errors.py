from __future__ import annotations

import json

import pytest

from lintcheck.constants import ExitCode
from lintcheck.errors import ConfigError, PublishError, ReportNotFoundError, ReportParseError
from lintcheck.logging import LintLogger, escape_workflow_command


def test_logger_emits_json(capsys) -> None:
    logger = LintLogger("run-1")
    logger.info("hello", detail="world")
    captured = capsys.readouterr()

    payload = json.loads(captured.err.strip().splitlines()[0])
    assert payload["run_id"] == "run-1"
    assert payload["message"] == "hello"
    assert payload["detail"] == "world"


def test_logger_emits_error_annotation(capsys) -> None:
    logger = LintLogger("run-2")
    logger.error("fail")
    captured = capsys.readouterr()
    assert "::error::fail" in captured.err


def test_logger_redacts_sensitive_keys(capsys) -> None:
    logger = LintLogger("run-3")
    logger.info("secret", repo_token="ghs_test")
    captured = capsys.readouterr()
    payload = json.loads(captured.err.strip().splitlines()[0])
    assert payload["repo_token"] == "***"


def test_debug_is_silent_unless_enabled(capsys, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RUNNER_DEBUG", raising=False)
    monkeypatch.delenv("ACTIONS_STEP_DEBUG", raising=False)
    LintLogger("run-4").debug("hidden")
    assert capsys.readouterr().err == ""

    monkeypatch.setenv("RUNNER_DEBUG", "1")
    LintLogger("run-4").debug("shown")
    assert "::debug::shown" in capsys.readouterr().err


def test_escape_workflow_command() -> None:
    assert escape_workflow_command("a%b\nc") == "a%25b%0Ac"
    assert escape_workflow_command(None) == ""


def test_error_exit_codes() -> None:
    assert ConfigError().exit_code == ExitCode.ERROR
    assert PublishError().exit_code == ExitCode.ERROR
    assert issubclass(ReportNotFoundError, ReportParseError)
