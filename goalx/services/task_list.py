from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from goalx.domain.entities import TaskRecord
from goalx.domain.filters import SortChoice, SortMode

from .task_store import TaskStore


def move_rows(items: list, rows: Iterable[int], to_row: int) -> list:
    """Move the items at ``rows`` so they land before ``to_row``, keeping their relative order."""
    picked = sorted(set(rows))
    moving = [items[row] for row in picked]
    remaining = [item for row, item in enumerate(items) if row not in picked]
    insert_at = to_row - sum(1 for row in picked if row < to_row)
    insert_at = max(0, min(insert_at, len(remaining)))
    return remaining[:insert_at] + moving + remaining[insert_at:]


class TaskListModel:
    """State behind the task list screen: active and done sections plus sorting."""

    def __init__(self, store: TaskStore) -> None:
        self._store = store
        self.tasks: list[TaskRecord] = []
        self.sort_choice = SortChoice()

    def reload(self) -> None:
        self.tasks = self._store.load()

    @property
    def is_empty(self) -> bool:
        return not self.tasks

    @property
    def displayed_active(self) -> list[TaskRecord]:
        return self._present([task for task in self.tasks if not task.is_done])

    @property
    def displayed_done(self) -> list[TaskRecord]:
        return self._present([task for task in self.tasks if task.is_done])

    @property
    def show_active_section(self) -> bool:
        return self.sort_choice.shows_active and bool(self.displayed_active)

    @property
    def show_done_section(self) -> bool:
        return self.sort_choice.shows_done and bool(self.displayed_done)

    def toggle(self, task: TaskRecord) -> None:
        for index, item in enumerate(self.tasks):
            if item.id == task.id:
                self.tasks[index] = replace(item, is_done=not item.is_done)
                self._store.replace_all(self.tasks)
                return

    def delete(self, task: TaskRecord) -> None:
        self._store.delete(task)
        self.reload()

    def move(self, in_done: bool, rows: Iterable[int], to_row: int) -> None:
        section = self.displayed_done if in_done else self.displayed_active
        moved = move_rows(section, rows, to_row)
        if self.sort_choice.reverses:
            moved.reverse()

        active = [task for task in self.tasks if not task.is_done]
        done = [task for task in self.tasks if task.is_done]
        target = done if in_done else active

        # Hidden rows keep their slots; visible rows take the new order.
        visible_ids = {task.id for task in moved}
        reordered = iter(moved)
        merged = [next(reordered) if task.id in visible_ids else task for task in target]

        self.tasks = active + merged if in_done else merged + done
        self._store.replace_all(self.tasks)

    def _present(self, items: list[TaskRecord]) -> list[TaskRecord]:
        choice = self.sort_choice
        if choice.mode == SortMode.CATEGORY and choice.category is not None:
            items = [task for task in items if task.category == choice.category]
        if choice.reverses:
            items = list(reversed(items))
        return items
