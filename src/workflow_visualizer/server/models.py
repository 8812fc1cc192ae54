"""Pydantic models for the REST server."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class VisualizeRequest(BaseModel):
    yaml: str


class ApiStep(BaseModel):
    name: Any = None
    uses: Any = None
    run: Any = None


class ApiJobSteps(BaseModel):
    jobName: str
    steps: list[ApiStep] = Field(default_factory=list)


class ApiTriggerDetail(BaseModel):
    kind: Literal["list", "table", "raw"]
    items: list[dict[str, str]] | None = None
    columns: list[str] | None = None
    rows: list[list[str]] | None = None
    text: str | None = None


class ApiTrigger(BaseModel):
    event: str
    detail: Any = None
    text: str | None = None
    formatted: ApiTriggerDetail | None = None


class VisualizeResponse(BaseModel):
    graph: str
    renderable: bool
    jobSteps: list[ApiJobSteps] = Field(default_factory=list)
    triggers: list[ApiTrigger] = Field(default_factory=list)
    error: str | None = None


class WorkflowFileList(BaseModel):
    repository: str
    path: str
    files: list[str]


class WorkflowFile(BaseModel):
    repository: str
    name: str
    content: str
    visualization: VisualizeResponse | None = None


class ExportSvgRequest(BaseModel):
    svg: str
    filename: str | None = None
