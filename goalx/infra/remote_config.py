from __future__ import annotations

import json
import logging

from PySide6.QtCore import QObject, QUrl, Signal
from PySide6.QtNetwork import QNetworkAccessManager, QNetworkReply, QNetworkRequest

from goalx.config import SETTINGS
from goalx.links import REMOTE_URL_KEY

logger = logging.getLogger(__name__)


class RemoteConfig(QObject):
    """Named remote string values. ``updated`` fires after each successful fetch."""

    updated = Signal()

    def __init__(
        self,
        url: str | None = SETTINGS.remote_config_url,
        defaults: dict[str, str] | None = None,
        timeout_ms: int = SETTINGS.remote_fetch_timeout_ms,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._url = url
        self._timeout_ms = timeout_ms
        self._values: dict[str, str] = {REMOTE_URL_KEY: SETTINGS.remote_redirect_url}
        if defaults:
            self._values.update(defaults)
        self._network = QNetworkAccessManager(self)

    def value(self, key: str) -> str:
        return self._values.get(key, "")

    def apply(self, values: dict[str, object]) -> None:
        for key, value in values.items():
            if isinstance(value, str):
                self._values[key] = value
            else:
                logger.debug("Skipping non-string remote value %s", key)
        self.updated.emit()

    def fetch(self) -> None:
        if not self._url:
            return
        request = QNetworkRequest(QUrl(self._url))
        request.setTransferTimeout(self._timeout_ms)
        reply = self._network.get(request)
        reply.finished.connect(lambda: self._on_finished(reply))

    def _on_finished(self, reply: QNetworkReply) -> None:
        try:
            if reply.error() != QNetworkReply.NetworkError.NoError:
                logger.warning("Remote config fetch failed: %s", reply.errorString())
                return
            body = bytes(reply.readAll().data())
            try:
                payload = json.loads(body.decode("utf-8"))
            except (UnicodeDecodeError, json.JSONDecodeError) as exc:
                logger.warning("Remote config is not valid JSON: %s", exc)
                return
            if not isinstance(payload, dict):
                logger.warning("Remote config must be a JSON object")
                return
            logger.info("Remote config fetched (%s keys)", len(payload))
            self.apply(payload)
        finally:
            reply.deleteLater()
