from __future__ import annotations

from PySide6.QtCore import QUrl
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QVBoxLayout, QWidget


class WebCover(QWidget):
    """Full-window web view. It has no close control; only a new URL replaces it."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("WebCover")
        self.view = QWebEngineView(self)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.view)
        self.url: str | None = None

    def open(self, url: str) -> None:
        self.url = url
        self.view.setUrl(QUrl(url))
