"""Unit tests for the per-job step table."""

from __future__ import annotations

from workflow_visualizer.visualizer.workflow.document import WorkflowDocument
from workflow_visualizer.visualizer.workflow.steps import (
    JobSteps,
    StepDetail,
    extract_job_steps,
)


def test_no_jobs_gives_empty_table() -> None:
    assert extract_job_steps(WorkflowDocument()) == []
    assert extract_job_steps(None) == []


def test_job_without_steps_key_still_listed() -> None:
    doc = WorkflowDocument.from_mapping({"jobs": {"deploy": {"needs": "build"}}})
    assert extract_job_steps(doc) == [JobSteps(job_name="deploy", steps=[])]


def test_non_list_steps_gives_empty_step_list() -> None:
    doc = WorkflowDocument.from_mapping({"jobs": {"a": {"steps": "echo hi"}}})
    assert extract_job_steps(doc) == [JobSteps(job_name="a", steps=[])]


def test_steps_are_copied_verbatim(ci_workflow: WorkflowDocument) -> None:
    table = extract_job_steps(ci_workflow)

    assert [j.job_name for j in table] == ["lint", "build", "test", "deploy"]
    assert table[0].steps == [
        StepDetail(name=None, uses="actions/checkout@v4", run=None),
        StepDetail(name="Ruff", uses=None, run="ruff check ."),
    ]
    # Block scalars keep their trailing newline; nothing is trimmed.
    assert table[1].steps[0].run == "make build\nmake package\n"
    assert table[3].steps == []


def test_display_defaults_are_presentation_only() -> None:
    step = StepDetail()
    assert step.name is None
    assert step.display_name() == "(unnamed)"
    assert step.display_uses() == ""
    assert step.display_run() == ""


def test_to_dict_keeps_missing_fields_as_none() -> None:
    job = JobSteps(job_name="a", steps=[StepDetail(uses="x")])
    assert job.to_dict() == {
        "jobName": "a",
        "steps": [{"name": None, "uses": "x", "run": None}],
    }
