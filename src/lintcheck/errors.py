from __future__ import annotations

from .constants import ExitCode


class LintCheckError(Exception):
    """Base exception for all lint check errors."""

    exit_code: ExitCode = ExitCode.ERROR


class ConfigError(LintCheckError):
    """Configuration validation failed."""


class ContextError(LintCheckError):
    """GitHub Actions environment is missing required values."""


class ReportParseError(LintCheckError):
    """Lint report is not a well-formed issues document."""


class ReportNotFoundError(ReportParseError):
    """Lint report file is missing or unreadable."""


class PublishError(LintCheckError):
    """Check run could not be created or updated."""
