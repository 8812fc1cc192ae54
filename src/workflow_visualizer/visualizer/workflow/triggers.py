"""Normalized view of a workflow's `on:` trigger specification.

GitHub accepts three shapes for `on:`:

- a single event name: `on: push`
- a list of event names: `on: [push, pull_request]`
- a mapping of event name to filter configuration

All three are flattened into an ordered list of :class:`TriggerEntry`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from workflow_visualizer.visualizer.workflow.document import WorkflowDocument


@dataclass(frozen=True, slots=True)
class TriggerEntry:
    """One trigger event.

    `detail` holds a structured payload (mapping or list) exactly as found.
    `text` holds the string form of a non-empty scalar value instead, so
    consumers can tell filter configuration apart from descriptive text.
    """

    event: str
    detail: dict[str, Any] | list[Any] | None = None
    text: str | None = None


def _entry_for(event: object, value: object) -> TriggerEntry:
    name = str(event)
    if value is None or value == "":
        return TriggerEntry(event=name)
    if isinstance(value, (dict, list)):
        return TriggerEntry(event=name, detail=value)
    return TriggerEntry(event=name, text=str(value))


def extract_triggers(doc: WorkflowDocument | None) -> list[TriggerEntry]:
    """Return one entry per trigger event, preserving source order."""

    if doc is None:
        return []

    spec = doc.trigger_spec
    if spec is None or spec == "":
        return []
    if isinstance(spec, dict):
        return [_entry_for(event, value) for event, value in spec.items()]
    if isinstance(spec, list):
        return [TriggerEntry(event=str(event)) for event in spec]
    return [TriggerEntry(event=str(spec))]
