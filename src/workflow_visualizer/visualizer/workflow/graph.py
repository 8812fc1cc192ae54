"""Mermaid dependency graph for workflow jobs."""

from __future__ import annotations

from workflow_visualizer.visualizer.workflow.document import WorkflowDocument

GRAPH_HEADER = "graph TD"

# Mermaid comments; a renderer shows an empty diagram for either.
INVALID_WORKFLOW_GRAPH = "%% Invalid workflow"
PARSE_ERROR_GRAPH = "%% Error parsing YAML"


def build_dependency_graph(doc: WorkflowDocument | None) -> str:
    """Produce a top-down Mermaid graph of job dependencies.

    Each job with `needs` contributes one `dep --> job` line per dependency,
    in declaration order. A job without `needs` contributes a single node
    line. Referenced names are not checked against the defined jobs.

    Returns:
        The graph text, or `INVALID_WORKFLOW_GRAPH` when there are no jobs.
    """

    if doc is None or not doc.jobs:
        return INVALID_WORKFLOW_GRAPH

    lines = [GRAPH_HEADER]
    for job_name, job in doc.jobs.items():
        needs = job.needs_list()
        if needs:
            lines.extend(f"  {need} --> {job_name}" for need in needs)
        else:
            lines.append(f"  {job_name}")
    return "\n".join(lines) + "\n"


def is_renderable_graph(graph: str) -> bool:
    """Return True if `graph` is a real graph rather than an empty marker."""

    return graph.startswith(GRAPH_HEADER)
