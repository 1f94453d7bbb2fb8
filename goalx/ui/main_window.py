from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QStackedWidget, QVBoxLayout, QWidget

from goalx.config import SETTINGS
from goalx.domain.enums import RouteKind
from goalx.domain.routes import Route
from goalx.infra.preferences import Preferences, SqlPreferences
from goalx.infra.remote_config import RemoteConfig
from goalx.links import REMOTE_URL_KEY
from goalx.services.redirect_gate import RedirectGate
from goalx.services.router import AppRouter
from goalx.services.task_store import TaskStore
from goalx.services.tracking import TrackingConsent

from .dialogs import ask_tracking_consent
from .screens import (
    LoadingScreen,
    OnboardingScreen,
    SettingsScreen,
    TaskDetailsScreen,
    TaskFormScreen,
    TaskListScreen,
)

logger = logging.getLogger(__name__)


def _schedule(delay_ms: int, callback) -> None:
    QTimer.singleShot(delay_ms, callback)


def _web_cover() -> QWidget:
    # QtWebEngine is loaded only once a redirect is actually shown.
    from .web_view import WebCover

    return WebCover()


class MainWindow(QWidget):
    """Root view: router-driven screens under a blackout, optionally covered by a web view."""

    def __init__(
        self,
        prefs: Preferences | None = None,
        remote: RemoteConfig | None = None,
        cover_factory: Callable[[], QWidget] | None = None,
    ):
        super().__init__()
        self.setWindowTitle("Goalx")
        self.resize(420, 820)

        self.prefs = prefs if prefs is not None else SqlPreferences()
        self.store = TaskStore(self.prefs)
        self.router = AppRouter(self.prefs)
        self.remote = remote if remote is not None else RemoteConfig(parent=self)
        self._cover_factory = cover_factory or _web_cover
        self.tracking = TrackingConsent(self.prefs, lambda: ask_tracking_consent(self))
        self.gate = RedirectGate(
            on_reveal=self.reveal,
            on_open_url=self.open_web_cover,
            on_tracking_prompt=self.tracking.request_if_needed,
            schedule=_schedule,
            tracking_delay_ms=SETTINGS.tracking_prompt_delay_ms,
        )

        self.blackout = QWidget()
        self.blackout.setObjectName("Blackout")
        self.blackout.setAttribute(Qt.WA_StyledBackground, True)

        self.screens = QStackedWidget()
        self.screens.setObjectName("Screens")
        self.web_cover: QWidget | None = None
        self._screen_key: str | None = None

        self.layers = QStackedWidget()
        self.layers.addWidget(self.blackout)
        self.layers.addWidget(self.screens)
        self.layers.setCurrentWidget(self.blackout)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.layers)

        self.router.subscribe(self.show_route)
        self.show_route(self.router.route)

        self.remote.updated.connect(self.check_remote)
        app = QGuiApplication.instance()
        if app is not None:
            app.applicationStateChanged.connect(self._on_app_state_changed)

        QTimer.singleShot(0, self.check_remote)
        self.remote.fetch()

    def check_remote(self) -> None:
        self.gate.evaluate(self.remote.value(REMOTE_URL_KEY))

    def reveal(self) -> None:
        if self.web_cover is None:
            self.layers.setCurrentWidget(self.screens)

    def open_web_cover(self, url: str) -> None:
        if self.web_cover is None:
            self.web_cover = self._cover_factory()
            self.layers.addWidget(self.web_cover)
        self.web_cover.open(url)
        self.layers.setCurrentWidget(self.web_cover)

    def show_route(self, route: Route) -> None:
        if route.key == self._screen_key:
            return
        self._screen_key = route.key

        screen = self._build_screen(route)
        previous = self.screens.currentWidget()
        self.screens.addWidget(screen)
        self.screens.setCurrentWidget(screen)
        if previous is not None:
            self.screens.removeWidget(previous)
            previous.deleteLater()

    def _build_screen(self, route: Route) -> QWidget:
        if route.kind == RouteKind.LOADING:
            return LoadingScreen(self.router.start)
        if route.kind == RouteKind.ONBOARDING:
            return OnboardingScreen(self.router.complete_onboarding)
        if route.kind == RouteKind.SETTINGS:
            return SettingsScreen(self.router)
        if route.kind == RouteKind.ADD:
            return TaskFormScreen(self.store, self.router)
        if route.kind == RouteKind.EDIT and route.task is not None:
            return TaskFormScreen(self.store, self.router, original=route.task)
        if route.kind == RouteKind.DETAILS and route.task is not None:
            return TaskDetailsScreen(self.store, self.router, route.task)
        return TaskListScreen(self.store, self.router)

    def _on_app_state_changed(self, state: Qt.ApplicationState) -> None:
        if state == Qt.ApplicationActive:
            self.check_remote()
