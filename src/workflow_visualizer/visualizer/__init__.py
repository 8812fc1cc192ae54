"""Local-first workflow visualizer components.

Provides:
- Settings loaded from .env
- Structured logging
- A small CLI surface
- Workflow fetching from GitHub and SVG export
"""
