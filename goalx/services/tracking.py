from __future__ import annotations

import logging
from typing import Callable

from goalx.domain.enums import TrackingStatus
from goalx.infra.preferences import Preferences

logger = logging.getLogger(__name__)

TRACKING_STATUS_KEY = "trackingAuthorization"


class TrackingConsent:
    def __init__(self, prefs: Preferences, ask: Callable[[], bool]) -> None:
        self._prefs = prefs
        self._ask = ask

    @property
    def status(self) -> TrackingStatus:
        raw = self._prefs.get(TRACKING_STATUS_KEY)
        try:
            return TrackingStatus(raw) if raw else TrackingStatus.NOT_DETERMINED
        except ValueError:
            return TrackingStatus.NOT_DETERMINED

    def request_if_needed(self) -> TrackingStatus:
        current = self.status
        if current != TrackingStatus.NOT_DETERMINED:
            return current
        status = TrackingStatus.AUTHORIZED if self._ask() else TrackingStatus.DENIED
        self._prefs.set(TRACKING_STATUS_KEY, status.value)
        logger.info("Tracking consent %s", status.value)
        return status
