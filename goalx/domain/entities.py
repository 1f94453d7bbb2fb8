from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from .enums import Category


def new_task_id() -> uuid.UUID:
    return uuid.uuid4()


@dataclass(frozen=True)
class TaskRecord:
    name: str
    note: str
    category: Category
    is_done: bool = False
    id: uuid.UUID = field(default_factory=new_task_id)


@dataclass(frozen=True)
class LegacyTaskRecord:
    name: str
    note: str
    category: Category

    def upgrade(self) -> TaskRecord:
        return TaskRecord(name=self.name, note=self.note, category=self.category)
