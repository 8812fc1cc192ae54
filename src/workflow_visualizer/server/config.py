"""Configuration for the REST server.

The server starts and serves the visualize endpoint without any GitHub
credentials. Endpoints that read from GitHub use a per-request token when one
is supplied, the configured token otherwise, and anonymous access as a last
resort.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from workflow_visualizer.visualizer.config import VisualizerSettings


class ServerSettings(VisualizerSettings):
    """Settings for the REST API + UI hosting."""

    # Where a built front-end lives when serving the UI from the backend.
    ui_dist_path: Path = Field(
        default=Path("ui/dist"), validation_alias="WORKFLOW_VISUALIZER_UI_DIST"
    )

    cors_origins: str = Field(
        default="http://localhost:3000,http://127.0.0.1:3000",
        validation_alias="WORKFLOW_VISUALIZER_CORS_ORIGINS",
        description="Comma-separated list of allowed CORS origins.",
    )

    max_upload_bytes: int = Field(
        default=1_000_000,
        gt=0,
        validation_alias="WORKFLOW_VISUALIZER_MAX_UPLOAD_BYTES",
        description="Largest workflow YAML or SVG body accepted by the API.",
    )

    model_config = SettingsConfigDict(env_prefix="", env_file=".env", extra="ignore")

    def parsed_cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
