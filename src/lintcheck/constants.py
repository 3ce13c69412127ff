from __future__ import annotations

from enum import Enum

CHECK_NAME = "Gradle Lint"
DEFAULT_REPORT_TITLE = "Lint Report"
FALLBACK_ERROR_MESSAGE = "Error linting files."


class ExitCode(int, Enum):
    """Process exit codes."""

    SUCCESS = 0
    FAILED = 1
    ERROR = 2


class Limits:
    """Shared hard limits."""

    MAX_ANNOTATIONS = 50  # GitHub accepts at most 50 annotations per request
    DEFAULT_WRAP_WIDTH = 80
    MAX_SUMMARY_ANNOTATIONS = 5
