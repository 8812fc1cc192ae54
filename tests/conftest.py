"""Test configuration and fixtures."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from workflow_visualizer.visualizer.workflow.document import (
    WorkflowDocument,
    parse_workflow_text,
)

_SETTINGS_ENV_VARS = (
    "WORKFLOW_VISUALIZER_GITHUB_TOKEN",
    "GITHUB_BASE_URL",
    "LOG_LEVEL",
    "WORKFLOW_VISUALIZER_WORKFLOWS_PATH",
    "WORKFLOW_VISUALIZER_EXPORT_DIR",
    "WORKFLOW_VISUALIZER_REQUEST_TIMEOUT",
    "WORKFLOW_VISUALIZER_UI_DIST",
    "WORKFLOW_VISUALIZER_CORS_ORIGINS",
    "WORKFLOW_VISUALIZER_MAX_UPLOAD_BYTES",
)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test in an empty directory with no settings in the environment."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Undo `configure_logging` so handlers never outlive a captured stream."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


CI_WORKFLOW = """\
name: CI
on:
  push:
    branches: [main, dev]
    paths:
      - "src/**"
  pull_request:
    types: [opened, synchronize]
  schedule:
    - cron: "0 3 * * 1"
  workflow_dispatch:
jobs:
  lint:
    runs-on: ubuntu-latest
    steps:
      - uses: actions/checkout@v4
      - name: Ruff
        run: ruff check .
  build:
    runs-on: ubuntu-latest
    steps:
      - name: Build
        run: |
          make build
          make package
  test:
    needs: build
    steps:
      - name: Unit tests
        run: pytest
  deploy:
    needs: [build, test]
"""


@pytest.fixture
def ci_workflow_text() -> str:
    """A representative workflow using every trigger and needs shape."""
    return CI_WORKFLOW


@pytest.fixture
def ci_workflow(ci_workflow_text: str) -> WorkflowDocument:
    return parse_workflow_text(ci_workflow_text)
