"""Parsed GitHub Actions workflow document.

Workflow YAML is user-supplied and loosely typed. These records keep the raw
values as found (no coercion) and only normalize where a consumer needs a
single shape, e.g. `needs` as a list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class WorkflowParseError(ValueError):
    """Raised when workflow text cannot be parsed into any structure."""


@dataclass(frozen=True, slots=True)
class StepDefinition:
    """One step of a job. All fields are optional and kept verbatim."""

    name: Any = None
    uses: Any = None
    run: Any = None

    @classmethod
    def from_raw(cls, raw: object) -> StepDefinition:
        if not isinstance(raw, dict):
            return cls()
        return cls(name=raw.get("name"), uses=raw.get("uses"), run=raw.get("run"))


@dataclass(frozen=True, slots=True)
class JobDefinition:
    """One entry of the workflow's `jobs` mapping."""

    name: str
    needs: Any = None
    steps: Any = None

    @classmethod
    def from_raw(cls, name: str, raw: object) -> JobDefinition:
        if not isinstance(raw, dict):
            return cls(name=name)
        return cls(name=name, needs=raw.get("needs"), steps=raw.get("steps"))

    def needs_list(self) -> list[str]:
        """Return `needs` as an ordered list.

        A scalar becomes a one-element list. Duplicates and self-references
        are kept as declared.
        """

        if not self.needs:
            return []
        if isinstance(self.needs, (list, tuple)):
            return [str(n) for n in self.needs]
        return [str(self.needs)]

    def step_definitions(self) -> list[StepDefinition]:
        if not isinstance(self.steps, list):
            return []
        return [StepDefinition.from_raw(s) for s in self.steps]


@dataclass(frozen=True, slots=True)
class WorkflowDocument:
    """Root of a parsed workflow file."""

    name: str | None = None
    jobs: dict[str, JobDefinition] | None = None
    trigger_spec: Any = None

    @property
    def has_jobs(self) -> bool:
        return bool(self.jobs)

    @classmethod
    def from_mapping(cls, data: object) -> WorkflowDocument:
        """Build a document from a parsed YAML value.

        Anything that is not a mapping gives an empty document. A `jobs` value
        that is not a mapping is treated as absent.
        """

        if not isinstance(data, dict):
            return cls()

        raw_jobs = data.get("jobs")
        jobs: dict[str, JobDefinition] | None = None
        if isinstance(raw_jobs, dict):
            jobs = {str(k): JobDefinition.from_raw(str(k), v) for k, v in raw_jobs.items()}

        # PyYAML follows YAML 1.1, where a bare `on:` key loads as boolean True.
        # An integer key 1 hashes and compares equal to True, so match by identity.
        if "on" in data:
            trigger_spec = data.get("on")
        else:
            trigger_spec = next((v for k, v in data.items() if k is True), None)

        name = data.get("name")
        return cls(
            name=str(name) if name is not None else None,
            jobs=jobs,
            trigger_spec=trigger_spec,
        )


def parse_workflow_text(text: str) -> WorkflowDocument:
    """Parse workflow YAML text.

    Raises:
        WorkflowParseError: If the text is not valid YAML.
    """

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.debug("Workflow YAML failed to parse", extra={"error": str(e)})
        raise WorkflowParseError(f"Error parsing YAML: {e}") from e

    return WorkflowDocument.from_mapping(data)
