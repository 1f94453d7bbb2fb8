from __future__ import annotations

import json
import uuid
from dataclasses import replace

from goalx.domain.entities import TaskRecord
from goalx.domain.enums import Category
from goalx.services.task_store import TASKS_KEY, UNREADABLE_KEY, TaskStore

LEGACY_BLOB = json.dumps([
    {"name": "Read a book", "note": "chapter 3", "type": "Someday"},
    {"name": "Pay rent", "note": "", "type": "Urgent"},
])


def _tasks() -> list[TaskRecord]:
    return [
        TaskRecord(name="Write report", note="due friday", category=Category.IMPORTANT),
        TaskRecord(name="Call mom", note="", category=Category.URGENT, is_done=True),
        TaskRecord(name="Learn piano", note="scales", category=Category.GOALS),
    ]


def test_empty_store_loads_empty_list(store: TaskStore) -> None:
    assert store.load() == []


def test_save_then_load_round_trips_in_order(store: TaskStore) -> None:
    tasks = _tasks()
    for task in tasks:
        store.save(task)

    assert store.load() == tasks


def test_reloading_and_saving_keeps_ids_and_order(store: TaskStore) -> None:
    for task in _tasks():
        store.save(task)
    first = store.load()

    store.replace_all(first)

    assert store.load() == first


def test_legacy_blob_is_migrated_once(prefs) -> None:
    prefs.set(TASKS_KEY, LEGACY_BLOB)
    store = TaskStore(prefs)

    migrated = store.load()

    assert [task.name for task in migrated] == ["Read a book", "Pay rent"]
    assert [task.category for task in migrated] == [Category.SOMEDAY, Category.URGENT]
    assert all(not task.is_done for task in migrated)
    assert len({task.id for task in migrated}) == 2

    stored = json.loads(prefs.get(TASKS_KEY))
    assert all("id" in entry and entry["isDone"] is False for entry in stored)

    assert store.load() == migrated


def test_current_entry_missing_done_flag_is_treated_as_legacy(prefs) -> None:
    prefs.set(TASKS_KEY, json.dumps([
        {"id": str(uuid.uuid4()), "name": "Old", "note": "", "type": "Goals"},
    ]))

    loaded = TaskStore(prefs).load()

    assert len(loaded) == 1
    assert loaded[0].name == "Old"
    assert loaded[0].is_done is False


def test_braced_ids_take_the_legacy_path(prefs) -> None:
    braced = "{" + str(uuid.uuid4()) + "}"
    prefs.set(TASKS_KEY, json.dumps([
        {"id": braced, "name": "Old", "note": "", "type": "Goals", "isDone": True},
    ]))

    (loaded,) = TaskStore(prefs).load()

    assert loaded.name == "Old"
    assert loaded.is_done is False
    assert str(loaded.id).upper() in prefs.get(TASKS_KEY)


def test_delete_removes_only_that_id(store: TaskStore) -> None:
    tasks = _tasks()
    store.replace_all(tasks)

    store.delete(tasks[1])

    loaded = store.load()
    assert tasks[1].id not in {task.id for task in loaded}
    assert loaded == [tasks[0], tasks[2]]


def test_delete_missing_id_is_noop(store: TaskStore) -> None:
    tasks = _tasks()
    store.replace_all(tasks)

    store.delete(TaskRecord(name="ghost", note="", category=Category.GOALS))

    assert store.load() == tasks


def test_replace_all_returns_exact_sequence(store: TaskStore) -> None:
    tasks = _tasks()
    store.replace_all(tasks)
    reordered = [tasks[2], replace(tasks[0], is_done=True), tasks[1]]

    store.replace_all(reordered)

    assert store.load() == reordered


def test_update_replaces_in_place(store: TaskStore) -> None:
    tasks = _tasks()
    store.replace_all(tasks)
    edited = replace(tasks[1], name="Call dad", category=Category.IMPORTANT)

    store.update(edited)

    assert store.load() == [tasks[0], edited, tasks[2]]


def test_update_of_missing_task_inserts(store: TaskStore) -> None:
    tasks = _tasks()
    store.replace_all(tasks[:1])

    store.update(tasks[2])

    assert store.load() == [tasks[0], tasks[2]]


def test_unreadable_blob_starts_empty_and_is_kept_aside(prefs) -> None:
    prefs.set(TASKS_KEY, "{not json")
    store = TaskStore(prefs)

    assert store.load() == []
    assert prefs.get(UNREADABLE_KEY) == "{not json"

    store.save(TaskRecord(name="Fresh", note="", category=Category.URGENT))

    assert [task.name for task in store.load()] == ["Fresh"]
    assert prefs.get(UNREADABLE_KEY) == "{not json"


def test_unknown_category_makes_blob_unreadable(prefs) -> None:
    prefs.set(TASKS_KEY, json.dumps([{"name": "x", "note": "", "type": "Later"}]))

    assert TaskStore(prefs).load() == []
    assert prefs.get(UNREADABLE_KEY) is not None


def test_first_unreadable_copy_is_not_overwritten(prefs) -> None:
    store = TaskStore(prefs)
    prefs.set(TASKS_KEY, "first")
    store.load()
    prefs.set(TASKS_KEY, "second")
    store.load()

    assert prefs.get(UNREADABLE_KEY) == "first"
