from __future__ import annotations

from pathlib import Path

import pytest

from lintcheck.context import GitHubContext
from lintcheck.errors import ContextError


def test_context_uses_pr_head_sha(
    monkeypatch: pytest.MonkeyPatch,
    event_pr_path: Path,
) -> None:
    monkeypatch.setenv("GITHUB_REPOSITORY", "octo/repo")
    monkeypatch.setenv("GITHUB_EVENT_NAME", "pull_request")
    monkeypatch.setenv("GITHUB_EVENT_PATH", str(event_pr_path))
    monkeypatch.setenv("GITHUB_SHA", "mergesha")
    monkeypatch.setenv("GITHUB_WORKSPACE", "/github/workspace")
    monkeypatch.setenv("GITHUB_ACTOR", "octo")

    ctx = GitHubContext.from_environment()

    assert ctx.repo_full_name == "octo/repo"
    assert ctx.event_name == "pull_request"
    assert ctx.actor == "octo"
    assert ctx.pr_number == 42
    assert ctx.head_sha == "headsha123"
    assert ctx.workspace == "/github/workspace"


def test_context_falls_back_to_current_commit(
    monkeypatch: pytest.MonkeyPatch,
    event_push_path: Path,
) -> None:
    monkeypatch.setenv("GITHUB_REPOSITORY", "octo/repo")
    monkeypatch.setenv("GITHUB_EVENT_NAME", "push")
    monkeypatch.setenv("GITHUB_EVENT_PATH", str(event_push_path))
    monkeypatch.setenv("GITHUB_SHA", "currentsha")

    ctx = GitHubContext.from_environment()

    assert ctx.pr_number is None
    assert ctx.head_sha == "currentsha"


def test_context_requires_repository(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GITHUB_REPOSITORY", raising=False)
    monkeypatch.delenv("GITHUB_EVENT_PATH", raising=False)
    monkeypatch.setenv("GITHUB_SHA", "currentsha")

    with pytest.raises(ContextError):
        GitHubContext.from_environment()


def test_context_requires_sha(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_REPOSITORY", "octo/repo")
    monkeypatch.delenv("GITHUB_EVENT_PATH", raising=False)
    monkeypatch.delenv("GITHUB_SHA", raising=False)

    with pytest.raises(ContextError):
        GitHubContext.from_environment()
