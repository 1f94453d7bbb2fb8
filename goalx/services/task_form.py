from __future__ import annotations

from dataclasses import replace
from typing import Optional

from goalx.domain.entities import TaskRecord
from goalx.domain.enums import Category

from .router import AppRouter
from .task_store import TaskStore


class TaskFormModel:
    """Add/edit form state. Editing keeps the original id and done flag."""

    def __init__(
        self,
        store: TaskStore,
        router: AppRouter,
        original: Optional[TaskRecord] = None,
    ) -> None:
        self._store = store
        self._router = router
        self.original = original
        self.name = original.name if original else ""
        self.note = original.note if original else ""
        self.category: Category | None = original.category if original else None

    @property
    def title(self) -> str:
        return "Edit task" if self.original else "Add new task"

    @property
    def is_save_enabled(self) -> bool:
        return bool(self.name.strip()) and self.category is not None

    def clear(self) -> None:
        self.name = ""
        self.note = ""
        self.category = None

    def save(self) -> TaskRecord | None:
        if not self.is_save_enabled or self.category is None:
            return None

        name = self.name.strip()
        note = self.note.strip()
        if self.original is not None:
            task = replace(self.original, name=name, note=note, category=self.category)
            self._store.update(task)
        else:
            task = TaskRecord(name=name, note=note, category=self.category)
            self._store.save(task)

        self._router.open_menu()
        return task
