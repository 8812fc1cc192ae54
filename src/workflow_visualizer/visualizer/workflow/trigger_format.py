"""Display shapes for trigger detail payloads.

Known events get a compact rendering of the filters people usually care about
(branches, paths, activity types, cron schedules, dispatch inputs). Everything
else falls back to a JSON dump of the whole payload so nothing is hidden.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeAlias, cast


@dataclass(frozen=True, slots=True)
class DetailItem:
    label: str
    value: str


@dataclass(frozen=True, slots=True)
class DetailList:
    items: list[DetailItem] = field(default_factory=list)

    kind = "list"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "items": [{"label": i.label, "value": i.value} for i in self.items],
        }


@dataclass(frozen=True, slots=True)
class DetailTable:
    columns: list[str]
    rows: list[list[str]] = field(default_factory=list)

    kind = "table"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "columns": list(self.columns), "rows": self.rows}


@dataclass(frozen=True, slots=True)
class DetailDump:
    text: str

    kind = "raw"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "text": self.text}


DetailShape: TypeAlias = DetailList | DetailTable | DetailDump

# Returned by an event formatter when its rendering does not fit the payload;
# the generic dump is used instead.
_NOT_APPLICABLE = object()

FILTER_FIELDS: tuple[tuple[str, str], ...] = (
    ("branches", "Branches"),
    ("paths", "Paths"),
    ("types", "Types"),
)

DISPATCH_INPUT_COLUMNS = ["Input", "Type", "Required", "Default", "Description"]


def _join(value: object) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(_scalar_text(v) for v in value)
    return _scalar_text(value)


def _scalar_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(to_jsonable(value), ensure_ascii=False)
    return str(value)


def to_jsonable(value: object, _seen: frozenset[int] = frozenset()) -> Any:
    """Copy `value` into plain JSON types, keeping key order.

    Non-string keys and unknown scalars (dates, timestamps) become strings.
    Self-referencing structures (YAML anchors) are cut at the repeat.
    """

    if isinstance(value, (dict, list)):
        if id(value) in _seen:
            return "<recursive>"
        seen = _seen | {id(value)}
        if isinstance(value, dict):
            return {
                k if isinstance(k, str) else _scalar_text(k): to_jsonable(v, seen)
                for k, v in value.items()
            }
        return [to_jsonable(v, seen) for v in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def dump_detail(detail: object) -> DetailDump:
    """Generic fallback: the whole payload as indented JSON."""

    return DetailDump(text=json.dumps(to_jsonable(detail), indent=2, ensure_ascii=False))


def _format_code_push(detail: Any) -> object:
    if not isinstance(detail, dict):
        return _NOT_APPLICABLE
    items = [
        DetailItem(label=label, value=_join(detail[key]))
        for key, label in FILTER_FIELDS
        if key in detail
    ]
    if not items:
        return _NOT_APPLICABLE
    return DetailList(items=items)


def _format_activity_types(detail: Any) -> object:
    if not isinstance(detail, dict):
        return _NOT_APPLICABLE
    if "types" not in detail:
        return None
    return DetailList(items=[DetailItem(label="Types", value=_join(detail["types"]))])


def _format_schedule(detail: Any) -> object:
    if not isinstance(detail, list):
        return _NOT_APPLICABLE
    items: list[DetailItem] = []
    for entry in detail:
        cron = entry.get("cron") if isinstance(entry, dict) else None
        # Entries without a cron expression still get a (blank) row.
        items.append(DetailItem(label="Cron", value=_scalar_text(cron)))
    return DetailList(items=items)


def _format_dispatch_inputs(detail: Any) -> object:
    if not isinstance(detail, dict):
        return _NOT_APPLICABLE
    inputs = detail.get("inputs")
    if not isinstance(inputs, dict) or not inputs:
        return _NOT_APPLICABLE

    rows: list[list[str]] = []
    for input_name, spec in inputs.items():
        spec = spec if isinstance(spec, dict) else {}
        rows.append(
            [
                _scalar_text(input_name),
                _scalar_text(spec.get("type")),
                _scalar_text(spec.get("required")),
                _scalar_text(spec.get("default")),
                _scalar_text(spec.get("description")),
            ]
        )
    return DetailTable(columns=list(DISPATCH_INPUT_COLUMNS), rows=rows)


TRIGGER_DETAIL_FORMATTERS: dict[str, Callable[[Any], object]] = {
    "push": _format_code_push,
    "pull_request": _format_code_push,
    "pull_request_target": _format_code_push,
    "issue_comment": _format_activity_types,
    "release": _format_activity_types,
    "schedule": _format_schedule,
    "workflow_dispatch": _format_dispatch_inputs,
    "workflow_call": _format_dispatch_inputs,
}


def format_trigger_detail(event: str, detail: object) -> DetailShape | None:
    """Render a trigger's structured detail payload.

    Returns:
        A list, table or raw dump shape; None when there is nothing to show.
    """

    if not isinstance(detail, (dict, list)):
        return None

    formatter = TRIGGER_DETAIL_FORMATTERS.get(event)
    if formatter is not None:
        shape = formatter(detail)
        if shape is not _NOT_APPLICABLE:
            return cast(DetailShape | None, shape)
    return dump_detail(detail)


def render_trigger_detail_text(shape: DetailShape | None) -> str:
    """Plain-text rendering of a detail shape, for terminals."""

    if shape is None:
        return ""
    if isinstance(shape, DetailList):
        return "\n".join(f"- {item.label}: {item.value}".rstrip() for item in shape.items)
    if isinstance(shape, DetailTable):
        lines = [" | ".join(shape.columns)]
        lines.extend(" | ".join(row) for row in shape.rows)
        return "\n".join(lines)
    return shape.text
