from __future__ import annotations

import logging
from typing import Callable
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

Scheduler = Callable[[int, Callable[[], None]], None]


def parse_redirect_url(value: str) -> str | None:
    """Return the URL to open, or None when ``value`` is not an absolute web URL."""
    if any(ch.isspace() for ch in value):
        return None
    try:
        parts = urlsplit(value)
    except ValueError:
        return None
    if parts.scheme.lower() not in ("http", "https") or not parts.netloc:
        return None
    return parts.geturl()


class RedirectGate:
    """Decides between revealing the app and covering it with a web view.

    ``evaluate`` is called with the current remote value on launch, on every
    foreground transition and on each remote configuration update. An empty
    value reveals the app once per launch; a web URL opens the web view
    unless that same URL is already open.
    """

    def __init__(
        self,
        on_reveal: Callable[[], None],
        on_open_url: Callable[[str], None],
        on_tracking_prompt: Callable[[], None],
        schedule: Scheduler,
        tracking_delay_ms: int = 500,
    ) -> None:
        self._on_reveal = on_reveal
        self._on_open_url = on_open_url
        self._on_tracking_prompt = on_tracking_prompt
        self._schedule = schedule
        self._tracking_delay_ms = tracking_delay_ms

        self.did_handle_empty = False
        self.did_request_tracking = False
        self.opened_url: str | None = None

    def evaluate(self, value: str | None) -> None:
        value = (value or "").strip()

        if not value:
            if self.did_handle_empty:
                return
            self.did_handle_empty = True
            logger.info("No redirect configured, revealing app")
            self._on_reveal()
            if not self.did_request_tracking:
                self.did_request_tracking = True
                self._schedule(self._tracking_delay_ms, self._on_tracking_prompt)
            return

        url = parse_redirect_url(value)
        if url is None:
            logger.debug("Ignoring unparsable redirect value %r", value)
            return

        if self.opened_url == url:
            return

        self.opened_url = url
        logger.info("Redirecting to %s", url)
        self._schedule(0, lambda: self._on_open_url(url))
