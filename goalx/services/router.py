from __future__ import annotations

import logging
from typing import Callable

from goalx.domain.entities import TaskRecord
from goalx.domain.routes import Route
from goalx.infra.preferences import Preferences, get_bool, set_bool

logger = logging.getLogger(__name__)

ONBOARDING_SEEN_KEY = "didSeeOnboarding"

RouteListener = Callable[[Route], None]


class AppRouter:
    """Holds the single active route. There is no history: back always means the list."""

    def __init__(self, prefs: Preferences) -> None:
        self._prefs = prefs
        self._route = Route.loading()
        self._listeners: list[RouteListener] = []

    @property
    def route(self) -> Route:
        return self._route

    def subscribe(self, listener: RouteListener) -> None:
        self._listeners.append(listener)

    def start(self) -> None:
        if get_bool(self._prefs, ONBOARDING_SEEN_KEY):
            self.open_menu()
        else:
            self._set(Route.onboarding())

    def complete_onboarding(self) -> None:
        set_bool(self._prefs, ONBOARDING_SEEN_KEY, True)
        self.open_menu()

    def open_menu(self) -> None:
        self._set(Route.task_list())

    def open_settings(self) -> None:
        self._set(Route.settings())

    def open_add_task(self) -> None:
        self._set(Route.add())

    def open_edit_task(self, task: TaskRecord) -> None:
        self._set(Route.edit(task))

    def open_task_details(self, task: TaskRecord) -> None:
        self._set(Route.details(task))

    def _set(self, route: Route) -> None:
        logger.debug("Route %s -> %s", self._route.key, route.key)
        self._route = route
        for listener in list(self._listeners):
            listener(route)
