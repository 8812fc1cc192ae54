"""Workflow domain: parsing plus the three derived views.

- dependency graph (Mermaid text)
- per-job step table
- normalized trigger list, with display shapes for trigger details

Each derivation is a pure function of a parsed :class:`WorkflowDocument`.
"""

from workflow_visualizer.visualizer.workflow.document import (
    JobDefinition,
    StepDefinition,
    WorkflowDocument,
    WorkflowParseError,
    parse_workflow_text,
)
from workflow_visualizer.visualizer.workflow.graph import (
    INVALID_WORKFLOW_GRAPH,
    PARSE_ERROR_GRAPH,
    build_dependency_graph,
    is_renderable_graph,
)
from workflow_visualizer.visualizer.workflow.session import (
    VisualizationResult,
    VisualizationSession,
    visualize,
)
from workflow_visualizer.visualizer.workflow.steps import JobSteps, StepDetail, extract_job_steps
from workflow_visualizer.visualizer.workflow.trigger_format import (
    DetailDump,
    DetailItem,
    DetailList,
    DetailTable,
    format_trigger_detail,
    render_trigger_detail_text,
)
from workflow_visualizer.visualizer.workflow.triggers import TriggerEntry, extract_triggers

__all__ = [
    "INVALID_WORKFLOW_GRAPH",
    "PARSE_ERROR_GRAPH",
    "DetailDump",
    "DetailItem",
    "DetailList",
    "DetailTable",
    "JobDefinition",
    "JobSteps",
    "StepDefinition",
    "StepDetail",
    "TriggerEntry",
    "VisualizationResult",
    "VisualizationSession",
    "WorkflowDocument",
    "WorkflowParseError",
    "build_dependency_graph",
    "extract_job_steps",
    "extract_triggers",
    "format_trigger_detail",
    "is_renderable_graph",
    "parse_workflow_text",
    "render_trigger_detail_text",
    "visualize",
]
