"""JSON encoding of the stored task list.

Current entries carry ``id``, ``name``, ``note``, ``type`` and ``isDone``.
Legacy entries carry only ``name``, ``note`` and ``type``. Extra keys are
ignored, and one malformed entry rejects the whole list.
"""
from __future__ import annotations

import json
import re
import uuid
from typing import Any

from goalx.domain.entities import LegacyTaskRecord, TaskRecord
from goalx.domain.enums import Category

CANONICAL_UUID = re.compile(r"[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}")


def encode_tasks(tasks: list[TaskRecord]) -> str:
    return json.dumps(
        [
            {
                "id": str(task.id).upper(),
                "name": task.name,
                "note": task.note,
                "type": task.category.value,
                "isDone": task.is_done,
            }
            for task in tasks
        ],
        ensure_ascii=False,
    )


def decode_tasks(raw: str) -> list[TaskRecord]:
    return [
        TaskRecord(
            id=_uuid_field(entry, "id"),
            name=_str_field(entry, "name"),
            note=_str_field(entry, "note"),
            category=_category_field(entry),
            is_done=_bool_field(entry, "isDone"),
        )
        for entry in _entries(raw)
    ]


def decode_legacy_tasks(raw: str) -> list[LegacyTaskRecord]:
    return [
        LegacyTaskRecord(
            name=_str_field(entry, "name"),
            note=_str_field(entry, "note"),
            category=_category_field(entry),
        )
        for entry in _entries(raw)
    ]


def _entries(raw: str) -> list[dict[str, Any]]:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"not JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise ValueError("expected a JSON array")
    for entry in payload:
        if not isinstance(entry, dict):
            raise ValueError("expected an array of objects")
    return payload


def _str_field(entry: dict[str, Any], name: str) -> str:
    value = entry.get(name)
    if not isinstance(value, str):
        raise ValueError(f"field {name!r} must be a string")
    return value


def _bool_field(entry: dict[str, Any], name: str) -> bool:
    value = entry.get(name)
    if not isinstance(value, bool):
        raise ValueError(f"field {name!r} must be a boolean")
    return value


def _uuid_field(entry: dict[str, Any], name: str) -> uuid.UUID:
    value = _str_field(entry, name)
    if not CANONICAL_UUID.fullmatch(value):
        raise ValueError(f"field {name!r} is not a UUID")
    try:
        return uuid.UUID(value)
    except ValueError as exc:
        raise ValueError(f"field {name!r} is not a UUID") from exc


def _category_field(entry: dict[str, Any]) -> Category:
    value = _str_field(entry, "type")
    try:
        return Category(value)
    except ValueError as exc:
        raise ValueError(f"unknown category {value!r}") from exc
