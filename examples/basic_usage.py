#!/usr/bin/env python3
"""Programmatic visualization example.

This demonstrates using the visualizer components directly:

* load settings from `.env`
* fetch a workflow file from a GitHub repository
* print its Mermaid dependency graph, steps and triggers

Repository selection is passed as an argument (not read from `.env`).
"""

from __future__ import annotations

import argparse
from typing import Sequence

from workflow_visualizer.visualizer.config import VisualizerSettings
from workflow_visualizer.visualizer.github.client import (
    WorkflowFetchError,
    WorkflowRepositoryClient,
)
from workflow_visualizer.visualizer.logging import configure_logging
from workflow_visualizer.visualizer.workflow import (
    format_trigger_detail,
    render_trigger_detail_text,
    visualize,
)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Visualize a workflow (programmatic example).")
    parser.add_argument("--repo", required=True, help='Repository in the form "owner/repo"')
    parser.add_argument(
        "--name",
        default="",
        help="Workflow file name (defaults to the first file found)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = VisualizerSettings()
    configure_logging(settings.log_level)

    client = WorkflowRepositoryClient(
        token=settings.token_or_none,
        base_url=settings.github_base_url,
        workflows_path=settings.workflows_path,
    )
    try:
        name = args.name or next(iter(client.list_workflow_files(args.repo)), "")
        if not name:
            print(f"No workflow files in {args.repo}/{settings.workflows_path}")
            return 0
        text = client.get_workflow_text(args.repo, name)
    except WorkflowFetchError as exc:
        print(str(exc))
        return 1
    finally:
        client.close()

    result = visualize(text)
    print(result.graph)
    for job in result.job_steps:
        print(f"{job.job_name}: {len(job.steps)} step(s)")
    for trigger in result.triggers:
        print(f"on {trigger.event}")
        rendered = render_trigger_detail_text(format_trigger_detail(trigger.event, trigger.detail))
        for line in rendered.splitlines():
            print(f"  {line}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
