from __future__ import annotations

import os
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import requests

from .errors import PublishError

GITHUB_API = os.environ.get("GITHUB_API_URL", "https://api.github.com")
DEFAULT_HTTP_TIMEOUT_SECONDS = float(os.environ.get("LINT_CHECK_HTTP_TIMEOUT_SECONDS", "15"))


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _error_message(exc: requests.RequestException) -> str:
    response = exc.response
    if response is not None:
        try:
            message = (response.json() or {}).get("message")
        except ValueError:
            message = None
        if message:
            return f"GitHub API error {response.status_code}: {message}"
        return f"GitHub API error {response.status_code}"
    return str(exc) or exc.__class__.__name__


class GitHubClient:
    """Minimal check-runs client; one request per call, no retries."""

    def __init__(self, token: str, repo: str):
        self.token = token
        self.repo = repo
        self.session = requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "gradle-lint-check-action",
        })

    def _request(self, method: str, url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            r = self.session.request(method, url, json=payload, timeout=DEFAULT_HTTP_TIMEOUT_SECONDS)
            r.raise_for_status()
        except requests.RequestException as exc:
            raise PublishError(_error_message(exc)) from exc
        try:
            return r.json() or {}
        except ValueError:
            return {}

    def create_check_run(
        self,
        name: str,
        head_sha: str,
        started_at: Optional[str] = None,
    ) -> int:
        """Create an in-progress check run and return its id."""
        url = f"{GITHUB_API}/repos/{self.repo}/check-runs"
        payload: Dict[str, Any] = {
            "name": name,
            "head_sha": head_sha,
            "status": "in_progress",
            "started_at": started_at or utc_now_iso(),
        }
        data = self._request("POST", url, payload)
        check_run_id = data.get("id")
        if check_run_id is None:
            raise PublishError("GitHub API did not return a check run id")
        return int(check_run_id)

    def update_check_run(
        self,
        check_run_id: int,
        conclusion: str,
        output: Dict[str, Any],
        completed_at: Optional[str] = None,
    ) -> Optional[str]:
        """Complete a check run; returns its html_url when available."""
        url = f"{GITHUB_API}/repos/{self.repo}/check-runs/{check_run_id}"
        payload: Dict[str, Any] = {
            "status": "completed",
            "completed_at": completed_at or utc_now_iso(),
            "conclusion": conclusion,
            "output": output,
        }
        data = self._request("PATCH", url, payload)
        return data.get("html_url")
