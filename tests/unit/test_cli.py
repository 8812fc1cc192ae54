"""Unit tests for the command-line interface."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import Mock

import pytest

import workflow_visualizer.visualizer.main as main_module
from workflow_visualizer.visualizer.github.client import (
    WorkflowAuthError,
    WorkflowContentError,
    WorkflowRepositoryClient,
)
from workflow_visualizer.cli import main


@pytest.fixture
def workflow_file(tmp_path: Path, ci_workflow_text: str) -> Path:
    path = tmp_path / "ci.yml"
    path.write_text(ci_workflow_text, encoding="utf-8")
    return path


@pytest.fixture
def fake_repo_client(monkeypatch: pytest.MonkeyPatch) -> Mock:
    fake = Mock(spec=WorkflowRepositoryClient)
    monkeypatch.setattr(main_module, "_make_client", lambda _settings: fake)
    return fake


def test_graph_command(workflow_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["graph", str(workflow_file)]) == 0

    out = capsys.readouterr().out
    assert out.splitlines() == [
        "graph TD",
        "  lint",
        "  build",
        "  build --> test",
        "  build --> deploy",
        "  test --> deploy",
    ]


def test_graph_command_without_jobs(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("on: push\n", encoding="utf-8")

    assert main(["graph", str(path)]) == 0
    assert capsys.readouterr().out == "%% Invalid workflow\n"


def test_steps_command(workflow_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["steps", str(workflow_file)]) == 0

    out = capsys.readouterr().out
    assert "lint:\n  1. (unnamed)\n     uses: actions/checkout@v4\n" in out
    assert "     run: make build\n          make package\n" in out
    assert "deploy:\n  (no steps)\n" in out


def test_triggers_command(workflow_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["triggers", str(workflow_file)]) == 0

    out = capsys.readouterr().out
    assert "push\n  - Branches: main, dev\n  - Paths: src/**\n" in out
    assert "schedule\n  - Cron: 0 3 * * 1\n" in out
    assert out.endswith("workflow_dispatch\n")


def test_visualize_json(workflow_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["visualize", "--json", str(workflow_file)]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["renderable"] is True
    assert len(data["jobSteps"]) == 4


def test_visualize_parse_error_exit_code(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "bad.yml"
    path.write_text("jobs: [oops\n", encoding="utf-8")

    assert main(["visualize", str(path)]) == 3
    captured = capsys.readouterr()
    assert captured.out == "%% Error parsing YAML\n"
    assert "Error parsing YAML" in captured.err


def test_graph_parse_error_exit_code(tmp_path: Path) -> None:
    path = tmp_path / "bad.yml"
    path.write_text("jobs: [oops\n", encoding="utf-8")

    assert main(["graph", str(path)]) == 3


def test_list_workflows(fake_repo_client: Mock, capsys: pytest.CaptureFixture[str]) -> None:
    fake_repo_client.list_workflow_files.return_value = ["ci.yml", "release.yml"]

    assert main(["list-workflows", "--repo", "octo-org/octo-repo"]) == 0

    assert capsys.readouterr().out == "ci.yml\nrelease.yml\n"
    fake_repo_client.close.assert_called_once()


def test_fetch_writes_output(fake_repo_client: Mock, tmp_path: Path) -> None:
    fake_repo_client.get_workflow_text.return_value = "on: push\n"
    out = tmp_path / "fetched" / "ci.yml"

    assert main(["fetch", "--repo", "o/r", "--name", "ci.yml", "--output", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == "on: push\n"


def test_fetch_error_exit_code(
    fake_repo_client: Mock, capsys: pytest.CaptureFixture[str]
) -> None:
    fake_repo_client.get_workflow_text.side_effect = WorkflowAuthError(repository="o/r")

    assert main(["fetch", "--repo", "o/r", "--name", "ci.yml"]) == 4
    assert str(WorkflowAuthError()) in capsys.readouterr().err
    fake_repo_client.close.assert_called_once()


def test_fetch_undecodable_file_exit_code(
    fake_repo_client: Mock, capsys: pytest.CaptureFixture[str]
) -> None:
    fake_repo_client.get_workflow_text.side_effect = WorkflowContentError(repository="o/r")

    assert main(["fetch", "--repo", "o/r", "--name", "ci.yml"]) == 4
    assert "not UTF-8" in capsys.readouterr().err


def test_export_svg(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    svg = tmp_path / "diagram.svg"
    svg.write_text("<svg/>", encoding="utf-8")

    assert main(["export-svg", str(svg), "--name", "ci", "--dir", str(tmp_path / "out")]) == 0

    assert (tmp_path / "out" / "ci.svg").read_text(encoding="utf-8") == "<svg/>"
    assert "Exported" in capsys.readouterr().out


def test_export_empty_svg_is_rejected(tmp_path: Path) -> None:
    svg = tmp_path / "empty.svg"
    svg.write_text("", encoding="utf-8")

    assert main(["export-svg", str(svg)]) == 2
