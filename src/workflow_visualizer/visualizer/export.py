"""SVG export for rendered diagrams."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

logger = logging.getLogger(__name__)

SVG_SUFFIX = ".svg"


def default_export_filename(now: datetime | None = None) -> str:
    ts = (now or datetime.now(tz=UTC)).strftime("%Y%m%d-%H%M%S")
    return f"workflow-diagram-{ts}{SVG_SUFFIX}"


def export_filename(filename: str | None, *, now: datetime | None = None) -> str:
    """Return a safe file name ending in `.svg`.

    Blank names are replaced by a generated one. Directory components are
    dropped.
    """

    name = Path((filename or "").strip()).name
    if not name:
        return default_export_filename(now)
    if not name.lower().endswith(SVG_SUFFIX):
        name = f"{name}{SVG_SUFFIX}"
    return name


def export_svg(
    svg: str,
    directory: Path,
    filename: str | None = None,
    *,
    now: datetime | None = None,
) -> Path:
    """Write rendered SVG text to `directory`.

    Raises:
        ValueError: If `svg` is empty.
    """

    if not svg.strip():
        raise ValueError("Nothing to export: SVG content is empty")

    target = directory / export_filename(filename, now=now)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(svg, encoding="utf-8")
    logger.info("Exported diagram", extra={"path": str(target), "bytes": len(svg)})
    return target
