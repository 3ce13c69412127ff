from __future__ import annotations

import json
import os
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Optional


def _debug_enabled() -> bool:
    if os.environ.get("RUNNER_DEBUG", "") == "1":
        return True
    return os.environ.get("ACTIONS_STEP_DEBUG", "").strip().lower() == "true"


def escape_workflow_command(value: Optional[str]) -> str:
    """
    Escape a string for GitHub workflow commands.

    See: https://docs.github.com/actions/using-workflows/workflow-commands-for-github-actions
    """
    if value is None:
        return ""
    return str(value).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class LintLogger:
    """Structured JSON logger with GitHub Actions integration."""

    def __init__(self, run_id: str, debug: Optional[bool] = None):
        self.run_id = run_id
        self.debug_enabled = _debug_enabled() if debug is None else debug

    def debug(self, message: str, **kwargs: Any) -> None:
        if self.debug_enabled:
            self._emit("debug", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._emit("info", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._emit("warning", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._emit("error", message, **kwargs)

    @contextmanager
    def stage(self, name: str) -> Iterator[None]:
        """Context manager that tracks stage timing."""
        start = datetime.now(timezone.utc)
        self.info("stage_start", stage=name)
        status = "ok"
        try:
            yield
        except Exception as exc:  # pragma: no cover - pass-through
            status = "error"
            self.error("stage_error", stage=name, error=str(exc))
            raise
        finally:
            end = datetime.now(timezone.utc)
            duration_ms = int((end - start).total_seconds() * 1000)
            self.info("stage_end", stage=name, duration_ms=duration_ms, status=status)

    def _emit(self, level: str, message: str, **kwargs: Any) -> None:
        """Emit structured JSON log + GitHub workflow command for debug/warning/error."""
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "run_id": self.run_id,
            "message": message,
        }
        payload.update(self._sanitize(kwargs))

        sys.stderr.write(json.dumps(payload, ensure_ascii=False, default=str) + "\n")

        if level in {"debug", "warning", "error"}:
            sys.stderr.write(f"::{level}::{escape_workflow_command(message)}\n")
        sys.stderr.flush()

    @staticmethod
    def _sanitize(fields: Dict[str, Any]) -> Dict[str, Any]:
        redacted: Dict[str, Any] = {}
        for key, value in fields.items():
            if LintLogger._is_sensitive_key(key):
                redacted[key] = "***"
            else:
                redacted[key] = value
        return redacted

    @staticmethod
    def _is_sensitive_key(key: str) -> bool:
        lowered = key.lower()
        return any(token in lowered for token in ("token", "secret", "password", "api_key", "apikey"))
