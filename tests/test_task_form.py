from __future__ import annotations

from dataclasses import replace

from goalx.domain.entities import TaskRecord
from goalx.domain.enums import Category, RouteKind
from goalx.services.router import AppRouter
from goalx.services.task_form import TaskFormModel
from goalx.services.task_store import TaskStore

from fakes import FakePreferences


def _setup() -> tuple[TaskStore, AppRouter]:
    prefs = FakePreferences()
    router = AppRouter(prefs)
    router.open_add_task()
    return TaskStore(prefs), router


def test_save_requires_name_and_category() -> None:
    store, router = _setup()
    form = TaskFormModel(store, router)

    form.name = "   "
    form.category = Category.URGENT
    assert not form.is_save_enabled
    assert form.save() is None

    form.name = "Buy milk"
    form.category = None
    assert not form.is_save_enabled

    assert store.load() == []
    assert router.route.kind == RouteKind.ADD


def test_add_trims_and_returns_to_list() -> None:
    store, router = _setup()
    form = TaskFormModel(store, router)
    form.name = "  Buy milk "
    form.note = "\n2 liters  "
    form.category = Category.URGENT

    saved = form.save()

    assert saved is not None
    assert store.load() == [saved]
    assert (saved.name, saved.note, saved.is_done) == ("Buy milk", "2 liters", False)
    assert router.route.kind == RouteKind.LIST
    assert form.title == "Add new task"


def test_edit_keeps_id_done_flag_and_position() -> None:
    store, router = _setup()
    first = TaskRecord(name="One", note="", category=Category.GOALS, is_done=True)
    second = TaskRecord(name="Two", note="", category=Category.SOMEDAY)
    store.replace_all([first, second])

    form = TaskFormModel(store, router, original=first)
    assert (form.name, form.category, form.title) == ("One", Category.GOALS, "Edit task")
    form.name = "One, renamed"
    form.category = Category.IMPORTANT
    form.save()

    assert store.load() == [
        replace(first, name="One, renamed", category=Category.IMPORTANT),
        second,
    ]


def test_edit_of_deleted_task_inserts_it_again() -> None:
    store, router = _setup()
    gone = TaskRecord(name="Gone", note="", category=Category.GOALS)
    form = TaskFormModel(store, router, original=gone)
    form.note = "back"

    form.save()

    assert [(task.id, task.note) for task in store.load()] == [(gone.id, "back")]


def test_clear_resets_fields() -> None:
    store, router = _setup()
    form = TaskFormModel(store, router)
    form.name, form.note, form.category = "x", "y", Category.GOALS

    form.clear()

    assert (form.name, form.note, form.category) == ("", "", None)
