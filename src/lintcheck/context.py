from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import ContextError


def _load_event() -> Dict[str, Any]:
    event_path = os.environ.get("GITHUB_EVENT_PATH")
    if not event_path:
        return {}
    try:
        return json.loads(Path(event_path).read_text(encoding="utf-8"))
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _coerce_int(value: Any) -> Optional[int]:
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class GitHubContext:
    """Immutable GitHub Actions context."""

    # Repository
    repo_full_name: str  # "owner/name"

    # Event
    event_name: str

    # PR-specific (None if not a PR)
    pr_number: Optional[int]

    # Commit the check run is attached to
    head_sha: str

    # Checkout root stripped from reported paths
    workspace: str

    actor: str = ""

    @classmethod
    def from_environment(cls) -> "GitHubContext":
        """Load context from GitHub Actions environment."""
        event = _load_event()

        repo_full_name = (
            os.environ.get("GITHUB_REPOSITORY")
            or event.get("repository", {}).get("full_name")
            or ""
        )
        if not repo_full_name or "/" not in repo_full_name:
            raise ContextError("Missing or invalid GITHUB_REPOSITORY")

        pr = event.get("pull_request") or {}
        if pr:
            pr_number = _coerce_int(event.get("number") or pr.get("number"))
            head_sha = (pr.get("head") or {}).get("sha") or os.environ.get("GITHUB_SHA", "")
        else:
            pr_number = None
            head_sha = os.environ.get("GITHUB_SHA", "")

        if not head_sha:
            raise ContextError("Missing head SHA in GitHub context")

        return cls(
            repo_full_name=repo_full_name,
            event_name=os.environ.get("GITHUB_EVENT_NAME", ""),
            pr_number=pr_number,
            head_sha=head_sha,
            workspace=os.environ.get("GITHUB_WORKSPACE", ""),
            actor=os.environ.get("GITHUB_ACTOR", ""),
        )
