from __future__ import annotations

from dataclasses import dataclass

from .entities import TaskRecord
from .enums import RouteKind


@dataclass(frozen=True)
class Route:
    """Active screen. ``task`` is set only for the edit and details routes."""

    kind: RouteKind
    task: TaskRecord | None = None

    @property
    def key(self) -> str:
        if self.task is not None:
            return f"{self.kind.value}-{self.task.id}"
        return self.kind.value

    @classmethod
    def loading(cls) -> Route:
        return cls(RouteKind.LOADING)

    @classmethod
    def onboarding(cls) -> Route:
        return cls(RouteKind.ONBOARDING)

    @classmethod
    def task_list(cls) -> Route:
        return cls(RouteKind.LIST)

    @classmethod
    def settings(cls) -> Route:
        return cls(RouteKind.SETTINGS)

    @classmethod
    def add(cls) -> Route:
        return cls(RouteKind.ADD)

    @classmethod
    def edit(cls, task: TaskRecord) -> Route:
        return cls(RouteKind.EDIT, task)

    @classmethod
    def details(cls, task: TaskRecord) -> Route:
        return cls(RouteKind.DETAILS, task)
