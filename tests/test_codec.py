from __future__ import annotations

import json
import uuid

import pytest

from goalx.domain.entities import TaskRecord
from goalx.domain.enums import Category
from goalx.infra.codec import decode_legacy_tasks, decode_tasks, encode_tasks


def test_encoded_entries_use_stored_field_names() -> None:
    task = TaskRecord(name="Ship it", note="v1", category=Category.GOALS, is_done=True)

    (entry,) = json.loads(encode_tasks([task]))

    assert entry == {
        "id": str(task.id).upper(),
        "name": "Ship it",
        "note": "v1",
        "type": "Goals",
        "isDone": True,
    }


def test_decode_ignores_unknown_keys() -> None:
    task_id = uuid.uuid4()
    raw = json.dumps([
        {"id": str(task_id), "name": "a", "note": "", "type": "Urgent", "isDone": False, "extra": 1},
    ])

    assert decode_tasks(raw) == [
        TaskRecord(id=task_id, name="a", note="", category=Category.URGENT, is_done=False)
    ]


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "{}",
        "[1]",
        json.dumps([{"id": "nope", "name": "a", "note": "", "type": "Urgent", "isDone": False}]),
        json.dumps([{"id": str(uuid.uuid4()), "name": "a", "note": "", "type": "Urgent", "isDone": 0}]),
        json.dumps([{"id": str(uuid.uuid4()), "name": None, "note": "", "type": "Urgent", "isDone": False}]),
    ],
)
def test_decode_rejects_malformed_lists(raw: str) -> None:
    with pytest.raises(ValueError):
        decode_tasks(raw)


def test_legacy_decode_reads_name_note_and_type() -> None:
    (legacy,) = decode_legacy_tasks(json.dumps([{"name": "a", "note": "b", "type": "Someday"}]))

    upgraded = legacy.upgrade()

    assert (upgraded.name, upgraded.note, upgraded.category, upgraded.is_done) == (
        "a",
        "b",
        Category.SOMEDAY,
        False,
    )


def test_legacy_decode_rejects_missing_note() -> None:
    with pytest.raises(ValueError):
        decode_legacy_tasks(json.dumps([{"name": "a", "type": "Someday"}]))


@pytest.mark.parametrize(
    "task_id",
    [
        "{12345678-1234-5678-1234-567812345678}",
        "urn:uuid:12345678-1234-5678-1234-567812345678",
        "12345678123456781234567812345678",
        "12345678-1234-5678-1234-567812345678\n",
    ],
    ids=["braced", "urn", "unhyphenated", "trailing-newline"],
)
def test_decode_rejects_non_canonical_ids(task_id: str) -> None:
    raw = json.dumps([{"id": task_id, "name": "a", "note": "", "type": "Urgent", "isDone": False}])

    with pytest.raises(ValueError):
        decode_tasks(raw)


def test_decode_accepts_lowercase_and_uppercase_ids() -> None:
    task_id = uuid.uuid4()
    raw = json.dumps([
        {"id": str(task_id), "name": "a", "note": "", "type": "Urgent", "isDone": False},
        {"id": str(task_id).upper(), "name": "b", "note": "", "type": "Urgent", "isDone": True},
    ])

    assert [task.id for task in decode_tasks(raw)] == [task_id, task_id]
