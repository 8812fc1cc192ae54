"""Configuration for the workflow visualizer.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

A GitHub token is optional: public repositories can be read anonymously.
To avoid collisions with other tools that may also use `GITHUB_TOKEN`, this
project uses a dedicated token variable: `WORKFLOW_VISUALIZER_GITHUB_TOKEN`.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_WORKFLOWS_PATH = ".github/workflows"


class VisualizerSettings(BaseSettings):
    """Settings for the visualizer CLI and services.

    Environment variables:
    - WORKFLOW_VISUALIZER_GITHUB_TOKEN         (optional)
    - GITHUB_BASE_URL                          (optional)
    - LOG_LEVEL                                (optional)
    - WORKFLOW_VISUALIZER_WORKFLOWS_PATH       (optional)
    - WORKFLOW_VISUALIZER_EXPORT_DIR           (optional)
    - WORKFLOW_VISUALIZER_REQUEST_TIMEOUT      (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `VisualizerSettings(_env_file=path_to_env)`.
    """

    github_token: str = Field(
        default="",
        validation_alias="WORKFLOW_VISUALIZER_GITHUB_TOKEN",
        description="GitHub token used for API authentication (optional)",
    )
    github_base_url: str = Field(
        default="https://api.github.com",
        validation_alias="GITHUB_BASE_URL",
        description="GitHub API base URL (useful for GitHub Enterprise)",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    workflows_path: str = Field(
        default=DEFAULT_WORKFLOWS_PATH,
        validation_alias="WORKFLOW_VISUALIZER_WORKFLOWS_PATH",
        description="Repository directory that holds workflow definition files",
    )

    export_dir: Path = Field(
        default=Path("exports"),
        validation_alias="WORKFLOW_VISUALIZER_EXPORT_DIR",
        description="Directory where exported SVG diagrams are written",
    )

    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        validation_alias="WORKFLOW_VISUALIZER_REQUEST_TIMEOUT",
        description="Timeout (seconds) for GitHub API requests",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("workflows_path")
    @classmethod
    def _strip_workflows_path(cls, value: str) -> str:
        stripped = value.strip().strip("/")
        if not stripped:
            raise ValueError("WORKFLOW_VISUALIZER_WORKFLOWS_PATH must not be empty")
        return stripped

    @property
    def token_or_none(self) -> str | None:
        """The configured token, or None for anonymous access."""

        token = self.github_token.strip()
        return token or None
