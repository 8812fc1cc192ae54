"""CLI entrypoint for the workflow visualizer."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from workflow_visualizer import __version__
from workflow_visualizer.visualizer.config import VisualizerSettings
from workflow_visualizer.visualizer.export import export_svg
from workflow_visualizer.visualizer.github.client import (
    WorkflowFetchError,
    WorkflowRepositoryClient,
)
from workflow_visualizer.visualizer.logging import configure_logging
from workflow_visualizer.visualizer.workflow.document import (
    WorkflowParseError,
    parse_workflow_text,
)
from workflow_visualizer.visualizer.workflow.graph import (
    build_dependency_graph,
    is_renderable_graph,
)
from workflow_visualizer.visualizer.workflow.session import visualize
from workflow_visualizer.visualizer.workflow.steps import JobSteps, extract_job_steps
from workflow_visualizer.visualizer.workflow.trigger_format import (
    format_trigger_detail,
    render_trigger_detail_text,
)
from workflow_visualizer.visualizer.workflow.triggers import TriggerEntry, extract_triggers

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2
EXIT_PARSE_ERROR = 3
EXIT_FETCH_ERROR = 4


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _add_file_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", help="Workflow YAML file ('-' reads stdin)")


def _add_repo_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--repo",
        "--repository",
        dest="repository",
        required=True,
        help="Repository in the form 'owner/repo' (GitHub URLs are accepted)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workflow-visualizer",
        description="Visualize GitHub Actions workflows as Mermaid graphs and tables",
    )
    parser.add_argument(
        "--version", action="version", version=f"github-workflow-visualizer {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    graph = subparsers.add_parser("graph", help="Print the job dependency graph (Mermaid)")
    _add_file_argument(graph)

    steps = subparsers.add_parser("steps", help="Print the steps of each job")
    _add_file_argument(steps)

    triggers = subparsers.add_parser("triggers", help="Print the workflow trigger events")
    _add_file_argument(triggers)

    visualize_cmd = subparsers.add_parser(
        "visualize", help="Print graph, steps and triggers together"
    )
    _add_file_argument(visualize_cmd)
    visualize_cmd.add_argument("--json", action="store_true", help="Emit a JSON document")

    list_workflows = subparsers.add_parser(
        "list-workflows", help="List workflow files in a GitHub repository"
    )
    _add_repo_argument(list_workflows)

    fetch = subparsers.add_parser("fetch", help="Download one workflow file from GitHub")
    _add_repo_argument(fetch)
    fetch.add_argument("--name", required=True, help="Workflow file name, e.g. 'ci.yml'")
    fetch.add_argument(
        "--output",
        default=None,
        help="Write the workflow text to this path instead of stdout",
    )

    export = subparsers.add_parser("export-svg", help="Save a rendered SVG diagram")
    export.add_argument("svg_file", help="Rendered SVG file ('-' reads stdin)")
    export.add_argument("--name", default=None, help="Output file name (default: generated)")
    export.add_argument(
        "--dir",
        dest="directory",
        default=None,
        help="Output directory (default: WORKFLOW_VISUALIZER_EXPORT_DIR)",
    )

    return parser


def _print_steps(job_steps: list[JobSteps]) -> None:
    for job in job_steps:
        print(f"{job.job_name}:")
        if not job.steps:
            print("  (no steps)")
            continue
        for i, step in enumerate(job.steps, start=1):
            print(f"  {i}. {step.display_name()}")
            if step.display_uses():
                print(f"     uses: {step.display_uses()}")
            if step.display_run():
                run_lines = step.display_run().rstrip("\n").splitlines()
                print(f"     run: {run_lines[0] if run_lines else ''}")
                for line in run_lines[1:]:
                    print(f"          {line}")


def _print_triggers(entries: list[TriggerEntry]) -> None:
    if not entries:
        print("(no triggers)")
        return
    for entry in entries:
        print(entry.event if entry.text is None else f"{entry.event}: {entry.text}")
        rendered = render_trigger_detail_text(format_trigger_detail(entry.event, entry.detail))
        for line in rendered.splitlines():
            print(f"  {line}")


def _make_client(settings: VisualizerSettings) -> WorkflowRepositoryClient:
    return WorkflowRepositoryClient(
        token=settings.token_or_none,
        base_url=settings.github_base_url,
        workflows_path=settings.workflows_path,
        timeout=settings.request_timeout_seconds,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = VisualizerSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(settings.log_level)

    try:
        if args.command == "graph":
            graph = build_dependency_graph(parse_workflow_text(_read_text(args.file)))
            print(graph, end="" if graph.endswith("\n") else "\n")
            if not is_renderable_graph(graph):
                logger.warning("Nothing to visualize: workflow has no jobs")
            return 0

        if args.command == "steps":
            _print_steps(extract_job_steps(parse_workflow_text(_read_text(args.file))))
            return 0

        if args.command == "triggers":
            _print_triggers(extract_triggers(parse_workflow_text(_read_text(args.file))))
            return 0

        if args.command == "visualize":
            result = visualize(_read_text(args.file))
            if args.json:
                print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False, default=str))
            else:
                print(result.graph, end="" if result.graph.endswith("\n") else "\n")
                if result.error is None:
                    print()
                    _print_steps(result.job_steps)
                    print()
                    _print_triggers(result.triggers)
            if result.error is not None:
                print(result.error, file=sys.stderr)
                return EXIT_PARSE_ERROR
            return 0

        if args.command == "list-workflows":
            client = _make_client(settings)
            try:
                names = client.list_workflow_files(args.repository)
            finally:
                client.close()
            if not names:
                print(f"No workflow files found in {settings.workflows_path}")
            for name in names:
                print(name)
            return 0

        if args.command == "fetch":
            client = _make_client(settings)
            try:
                text = client.get_workflow_text(args.repository, args.name)
            finally:
                client.close()
            if args.output:
                out = Path(args.output)
                out.parent.mkdir(parents=True, exist_ok=True)
                out.write_text(text, encoding="utf-8")
                print(f"Wrote {out}")
            else:
                print(text, end="" if text.endswith("\n") else "\n")
            return 0

        if args.command == "export-svg":
            directory = Path(args.directory) if args.directory else settings.export_dir
            path = export_svg(_read_text(args.svg_file), directory, args.name)
            print(f"Exported {path}")
            return 0

        logger.error("Unknown command", extra={"command": args.command})
        return EXIT_CONFIG_ERROR

    except WorkflowParseError as e:
        logger.warning("Workflow could not be parsed", extra={"error": str(e)})
        print(str(e), file=sys.stderr)
        return EXIT_PARSE_ERROR

    except WorkflowFetchError as e:
        logger.warning(
            "Workflow fetch failed",
            extra={"repo": e.repository, "category": type(e).__name__},
        )
        print(str(e), file=sys.stderr)
        return EXIT_FETCH_ERROR

    except ValueError as e:
        logger.warning("Invalid input", extra={"error": str(e)})
        print(str(e), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    except Exception:
        logger.exception("Command failed")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
