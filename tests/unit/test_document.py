"""Unit tests for workflow document parsing."""

from __future__ import annotations

import pytest

from workflow_visualizer.visualizer.workflow.document import (
    JobDefinition,
    StepDefinition,
    WorkflowDocument,
    WorkflowParseError,
    parse_workflow_text,
)
from workflow_visualizer.visualizer.workflow.triggers import extract_triggers


def test_bare_on_key_is_read_as_trigger_spec(ci_workflow: WorkflowDocument) -> None:
    # PyYAML loads `on:` as the boolean True key.
    assert isinstance(ci_workflow.trigger_spec, dict)
    assert list(ci_workflow.trigger_spec) == ["push", "pull_request", "schedule", "workflow_dispatch"]


def test_quoted_on_key_is_read_as_trigger_spec() -> None:
    doc = parse_workflow_text('"on": push\njobs: {}\n')
    assert doc.trigger_spec == "push"


def test_integer_one_key_is_not_a_trigger_spec() -> None:
    doc = parse_workflow_text("1: nightly\njobs:\n  a: {}\n")
    assert doc.trigger_spec is None
    assert extract_triggers(doc) == []


def test_jobs_keep_document_order(ci_workflow: WorkflowDocument) -> None:
    assert ci_workflow.jobs is not None
    assert list(ci_workflow.jobs) == ["lint", "build", "test", "deploy"]
    assert ci_workflow.name == "CI"


@pytest.mark.parametrize("text", ["", "just a string", "- a\n- b\n", "42"])
def test_non_mapping_documents_are_empty(text: str) -> None:
    doc = parse_workflow_text(text)
    assert doc == WorkflowDocument()
    assert doc.has_jobs is False


def test_non_mapping_jobs_counts_as_absent() -> None:
    doc = parse_workflow_text("jobs: [a, b]\n")
    assert doc.jobs is None


def test_invalid_yaml_raises_parse_error() -> None:
    with pytest.raises(WorkflowParseError):
        parse_workflow_text("jobs: [unclosed\n")


def test_needs_list_normalization() -> None:
    assert JobDefinition(name="a").needs_list() == []
    assert JobDefinition(name="a", needs="b").needs_list() == ["b"]
    assert JobDefinition(name="a", needs=["b", "a", "b"]).needs_list() == ["b", "a", "b"]


def test_malformed_job_and_step_entries_are_tolerated() -> None:
    doc = parse_workflow_text("jobs:\n  a: null\n  b:\n    steps: [plain, {name: x}]\n")
    assert doc.jobs is not None
    assert doc.jobs["a"] == JobDefinition(name="a")
    assert doc.jobs["b"].step_definitions() == [StepDefinition(), StepDefinition(name="x")]
