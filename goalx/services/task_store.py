from __future__ import annotations

import logging

from goalx.domain.entities import TaskRecord
from goalx.infra.codec import decode_legacy_tasks, decode_tasks, encode_tasks
from goalx.infra.preferences import Preferences

logger = logging.getLogger(__name__)

TASKS_KEY = "savedTasks"
UNREADABLE_KEY = "savedTasks.unreadable"


class TaskStore:
    """Task list persisted as one blob; every mutation rewrites the whole list."""

    def __init__(self, prefs: Preferences, key: str = TASKS_KEY) -> None:
        self._prefs = prefs
        self._key = key

    def load(self) -> list[TaskRecord]:
        raw = self._prefs.get(self._key)
        if raw is None:
            return []

        try:
            return decode_tasks(raw)
        except ValueError as exc:
            current_error = exc

        try:
            legacy = decode_legacy_tasks(raw)
        except ValueError as exc:
            self._keep_unreadable(raw, current_error, exc)
            return []

        migrated = [entry.upgrade() for entry in legacy]
        self._persist(migrated)
        logger.info("Migrated %s legacy tasks to the current format", len(migrated))
        return migrated

    def save(self, task: TaskRecord) -> None:
        tasks = self.load()
        tasks.append(task)
        self._persist(tasks)

    def delete(self, task: TaskRecord) -> None:
        tasks = self.load()
        self._persist([item for item in tasks if item.id != task.id])

    def update(self, task: TaskRecord) -> None:
        tasks = self.load()
        for index, item in enumerate(tasks):
            if item.id == task.id:
                tasks[index] = task
                self._persist(tasks)
                return
        logger.debug("Task %s not stored, inserting instead", task.id)
        tasks.append(task)
        self._persist(tasks)

    def replace_all(self, tasks: list[TaskRecord]) -> None:
        self._persist(list(tasks))

    def _persist(self, tasks: list[TaskRecord]) -> None:
        self._prefs.set(self._key, encode_tasks(tasks))

    def _keep_unreadable(self, raw: str, current_error: ValueError, legacy_error: ValueError) -> None:
        logger.warning(
            "Stored tasks are unreadable, starting empty (current: %s; legacy: %s)",
            current_error,
            legacy_error,
        )
        if self._prefs.get(UNREADABLE_KEY) is None:
            self._prefs.set(UNREADABLE_KEY, raw)
