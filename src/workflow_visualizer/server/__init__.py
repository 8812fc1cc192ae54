"""FastAPI server adapter for github-workflow-visualizer.

Design intent:
- Keep workflow logic in `workflow_visualizer.visualizer.*`
- Keep server-specific concerns (routing, CORS, error mapping) here
"""

from __future__ import annotations

__all__ = ["create_app"]

from workflow_visualizer.server.app import create_app
