"""Per-job step table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from workflow_visualizer.visualizer.workflow.document import WorkflowDocument

UNNAMED_STEP_LABEL = "(unnamed)"


@dataclass(frozen=True, slots=True)
class StepDetail:
    name: Any = None
    uses: Any = None
    run: Any = None

    # Display helpers; extraction itself never substitutes defaults.
    def display_name(self) -> str:
        return str(self.name) if self.name else UNNAMED_STEP_LABEL

    def display_uses(self) -> str:
        return str(self.uses) if self.uses else ""

    def display_run(self) -> str:
        return str(self.run) if self.run else ""

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "uses": self.uses, "run": self.run}


@dataclass(frozen=True, slots=True)
class JobSteps:
    job_name: str
    steps: list[StepDetail] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"jobName": self.job_name, "steps": [s.to_dict() for s in self.steps]}


def extract_job_steps(doc: WorkflowDocument | None) -> list[JobSteps]:
    """Flatten each job's steps, in document order.

    Jobs without a steps list are still returned, with no steps.
    """

    if doc is None or doc.jobs is None:
        return []

    result: list[JobSteps] = []
    for job_name, job in doc.jobs.items():
        steps = [
            StepDetail(name=step.name, uses=step.uses, run=step.run)
            for step in job.step_definitions()
        ]
        result.append(JobSteps(job_name=job_name, steps=steps))
    return result
