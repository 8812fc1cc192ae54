"""FastAPI app factory.

Endpoints are intentionally thin wrappers over the visualizer services.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

from fastapi import FastAPI, Header, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from workflow_visualizer import __version__
from workflow_visualizer.server.config import ServerSettings
from workflow_visualizer.server.models import (
    ExportSvgRequest,
    VisualizeRequest,
    VisualizeResponse,
    WorkflowFile,
    WorkflowFileList,
)
from workflow_visualizer.visualizer.export import export_filename
from workflow_visualizer.visualizer.github.client import (
    WorkflowAuthError,
    WorkflowFetchError,
    WorkflowNotFoundError,
    WorkflowRepositoryClient,
)
from workflow_visualizer.visualizer.workflow.session import visualize

logger = logging.getLogger(__name__)


def _make_client(settings: ServerSettings, token: str | None) -> WorkflowRepositoryClient:
    return WorkflowRepositoryClient(
        token=(token or "").strip() or settings.token_or_none,
        base_url=settings.github_base_url,
        workflows_path=settings.workflows_path,
        timeout=settings.request_timeout_seconds,
    )


def _fetch_error_status(e: WorkflowFetchError) -> int:
    if isinstance(e, WorkflowNotFoundError):
        return 404
    if isinstance(e, WorkflowAuthError):
        return 401
    return 502


def _raise_for_fetch_error(e: WorkflowFetchError) -> NoReturn:
    status = _fetch_error_status(e)
    logger.warning(
        "Workflow fetch failed",
        extra={"repo": e.repository, "category": type(e).__name__, "status_code": status},
    )
    raise HTTPException(status_code=status, detail=str(e)) from e


def _check_size(settings: ServerSettings, text: str, *, what: str) -> None:
    if len(text.encode("utf-8")) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"{what} exceeds {settings.max_upload_bytes} bytes",
        )


def _visualize_response(text: str) -> VisualizeResponse:
    return VisualizeResponse.model_validate(visualize(text).to_dict())


def create_app() -> FastAPI:
    settings = ServerSettings()

    app = FastAPI(
        title="GitHub Workflow Visualizer",
        version=__version__,
        description="REST API for turning GitHub Actions workflows into graphs and tables.",
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.parsed_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    @app.post("/api/visualize", response_model=VisualizeResponse)
    def visualize_workflow(req: VisualizeRequest) -> VisualizeResponse:
        _check_size(settings, req.yaml, what="Workflow YAML")
        # Parse failures are a normal result (error field), not an HTTP error.
        return _visualize_response(req.yaml)

    @app.get("/api/repos/{owner}/{repo}/workflows", response_model=WorkflowFileList)
    def list_workflows(
        owner: str,
        repo: str,
        x_github_token: str | None = Header(default=None),
    ) -> WorkflowFileList:
        repository = f"{owner}/{repo}"
        client = _make_client(settings, x_github_token)
        try:
            files = client.list_workflow_files(repository)
        except WorkflowFetchError as e:
            _raise_for_fetch_error(e)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e
        finally:
            client.close()
        return WorkflowFileList(repository=repository, path=settings.workflows_path, files=files)

    @app.get("/api/repos/{owner}/{repo}/workflows/{name}", response_model=WorkflowFile)
    def get_workflow(
        owner: str,
        repo: str,
        name: str,
        render: bool = Query(default=False, alias="visualize"),
        x_github_token: str | None = Header(default=None),
    ) -> WorkflowFile:
        repository = f"{owner}/{repo}"
        client = _make_client(settings, x_github_token)
        try:
            content = client.get_workflow_text(repository, name)
        except WorkflowFetchError as e:
            _raise_for_fetch_error(e)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e
        finally:
            client.close()
        return WorkflowFile(
            repository=repository,
            name=name,
            content=content,
            visualization=_visualize_response(content) if render else None,
        )

    @app.post("/api/export/svg", response_class=Response)
    def export_svg_download(req: ExportSvgRequest) -> Response:
        if not req.svg.strip():
            raise HTTPException(status_code=400, detail="Nothing to export: SVG content is empty")
        _check_size(settings, req.svg, what="SVG")
        filename = export_filename(req.filename)
        logger.info("Exporting diagram", extra={"filename": filename, "bytes": len(req.svg)})
        return Response(
            content=req.svg,
            media_type="image/svg+xml",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    _maybe_mount_ui(app, settings)
    return app


def _maybe_mount_ui(app: FastAPI, settings: ServerSettings) -> None:
    """Serve a built front-end from the same process.

    - API is under `/api/*`
    - UI is served at `/` (SPA fallback)

    Without a build (no `index.html`) a short instruction page is served at `/`.
    """

    dist = Path(settings.ui_dist_path)
    index = dist / "index.html"

    if dist.exists() and (dist / "assets").exists():
        app.mount("/assets", StaticFiles(directory=dist / "assets"), name="ui-assets")

    @app.get("/", include_in_schema=False, response_model=None)
    def ui_index() -> FileResponse | PlainTextResponse:
        if index.exists():
            return FileResponse(index)
        return PlainTextResponse(
            "UI not built. POST workflow YAML to /api/visualize, or see /api/docs.\n",
            status_code=200,
        )

    @app.get("/{full_path:path}", include_in_schema=False, response_model=None)
    def ui_spa_fallback(full_path: str) -> FileResponse:
        if full_path.startswith("api/") or full_path == "api":
            raise HTTPException(status_code=404, detail="Not Found")

        candidate = (dist / full_path).resolve()
        if candidate.is_file() and dist.resolve() in candidate.parents:
            return FileResponse(candidate)

        if index.exists():
            return FileResponse(index)
        raise HTTPException(status_code=404, detail="UI not built")
