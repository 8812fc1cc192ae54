"""Visualize action: parse once, derive graph, step table and trigger list."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from workflow_visualizer.visualizer.workflow.document import (
    WorkflowParseError,
    parse_workflow_text,
)
from workflow_visualizer.visualizer.workflow.graph import (
    PARSE_ERROR_GRAPH,
    build_dependency_graph,
    is_renderable_graph,
)
from workflow_visualizer.visualizer.workflow.steps import JobSteps, extract_job_steps
from workflow_visualizer.visualizer.workflow.trigger_format import (
    format_trigger_detail,
    to_jsonable,
)
from workflow_visualizer.visualizer.workflow.triggers import TriggerEntry, extract_triggers

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class VisualizationResult:
    graph: str = ""
    job_steps: list[JobSteps] = field(default_factory=list)
    triggers: list[TriggerEntry] = field(default_factory=list)
    error: str | None = None

    @property
    def renderable(self) -> bool:
        return is_renderable_graph(self.graph)

    def to_dict(self) -> dict[str, Any]:
        triggers: list[dict[str, Any]] = []
        for t in self.triggers:
            shape = format_trigger_detail(t.event, t.detail)
            triggers.append(
                {
                    "event": t.event,
                    "detail": to_jsonable(t.detail),
                    "text": t.text,
                    "formatted": shape.to_dict() if shape is not None else None,
                }
            )
        return {
            "graph": self.graph,
            "renderable": self.renderable,
            "jobSteps": [j.to_dict() for j in self.job_steps],
            "triggers": triggers,
            "error": self.error,
        }


def visualize(text: str) -> VisualizationResult:
    """Run all three derivations over one workflow text.

    A parse failure yields the parse-error marker with empty tables, never a
    partial result.
    """

    try:
        doc = parse_workflow_text(text)
    except WorkflowParseError as e:
        logger.info("Workflow parse failed", extra={"error": str(e)})
        return VisualizationResult(graph=PARSE_ERROR_GRAPH, error=str(e))

    result = VisualizationResult(
        graph=build_dependency_graph(doc),
        job_steps=extract_job_steps(doc),
        triggers=extract_triggers(doc),
    )
    logger.debug(
        "Workflow visualized",
        extra={
            "jobs": len(result.job_steps),
            "triggers": len(result.triggers),
            "renderable": result.renderable,
        },
    )
    return result


class VisualizationSession:
    """Holds the most recent visualization; each run replaces it wholesale."""

    def __init__(self) -> None:
        self._current = VisualizationResult()

    @property
    def current(self) -> VisualizationResult:
        return self._current

    def visualize(self, text: str) -> VisualizationResult:
        self._current = visualize(text)
        return self._current

    def clear(self) -> None:
        self._current = VisualizationResult()
