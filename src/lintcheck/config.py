from __future__ import annotations

from typing import FrozenSet

from pydantic import Field, SecretStr, ValidationError, conint, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import CHECK_NAME, DEFAULT_REPORT_TITLE, Limits
from .errors import ConfigError
from .transform import TransformOptions


def _split_ids(value: str) -> FrozenSet[str]:
    return frozenset(part.strip() for part in (value or "").split(",") if part.strip())


class LintCheckConfig(BaseSettings):
    """Configuration loaded from GitHub Actions inputs."""

    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    # Required
    filename: str = Field(description="Path to the lint XML report")

    # Issue filtering (comma-separated issue ids)
    exclude: str = Field(default="", description="Issue ids that are never reported")
    only: str = Field(default="", description="When set, only these issue ids are reported")

    # Presentation
    report_name: str = Field(default=DEFAULT_REPORT_TITLE, description="Check run output title")
    check_name: str = Field(default=CHECK_NAME, description="Check run name")
    wrap_width: conint(ge=0) = Field(
        default=Limits.DEFAULT_WRAP_WIDTH,
        description="Wrap annotation messages at this width; 0 disables wrapping",
    )
    max_annotations: conint(ge=1, le=Limits.MAX_ANNOTATIONS) = Field(
        default=Limits.MAX_ANNOTATIONS,
        description="Maximum number of annotations published",
    )

    # GitHub integration
    repo_token: SecretStr = Field(default="", description="GitHub token used for API calls")

    @field_validator("filename")
    @classmethod
    def _require_filename(cls, value: str) -> str:
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("filename is required")
        return trimmed

    @property
    def exclude_ids(self) -> FrozenSet[str]:
        return _split_ids(self.exclude)

    @property
    def only_ids(self) -> FrozenSet[str]:
        return _split_ids(self.only)

    def to_transform_options(self, workspace_root: str = "") -> TransformOptions:
        return TransformOptions(
            wrap_width=self.wrap_width or None,
            workspace_root=workspace_root,
            exclude=self.exclude_ids,
            only=self.only_ids,
            max_annotations=self.max_annotations,
            report_title=self.report_name,
        )


def load_config() -> LintCheckConfig:
    """Read action inputs from the environment.

    Raises:
        ConfigError: when a required input is missing or a value is invalid.
    """
    try:
        return LintCheckConfig()
    except ValidationError as exc:
        raise ConfigError(f"Configuration error: {exc}") from exc
