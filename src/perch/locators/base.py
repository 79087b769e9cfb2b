"""Locator base: event registration and redirect bookkeeping."""

import logging
from collections.abc import Callable
from typing import Any

from perch.host import Host
from perch.location import RedirectEvent
from perch.url import resolve_url

logger = logging.getLogger("perch.locators")

REDIRECT = "redirect"

LocatorHandler = Callable[[RedirectEvent], Any]


class Locator:
    """Tracks the current location in a host and reports changes.

    Subclasses say where in the host the location lives (``read`` /
    ``write``) and which host event signals an external change
    (``host_event``).

    ``redirect`` fires a ``redirect`` event when the URL changes, or
    always when ``force=True``, unless ``silent=True``. ``reload``
    re-fires the current location with its original referrer.
    """

    host_event: str = ""

    def __init__(self, host: Host) -> None:
        self.host = host
        self.current = self.read()
        self.referrer: str | None = None
        self.started = False
        self._handlers: dict[str, list[LocatorHandler]] = {}

    # -- Host binding --

    def read(self) -> str:
        raise NotImplementedError

    def write(self, url: str) -> None:
        raise NotImplementedError

    def _on_host_change(self) -> None:
        # The host already shows the new location; record it without writing back
        url = self.read()
        if url == self.current:
            return
        self.referrer = self.current
        self.current = url
        logger.debug("Host moved to %r (referrer %r)", url, self.referrer)
        self.fire(REDIRECT, RedirectEvent(url=url, referrer=self.referrer))

    def start(self) -> None:
        if self.started:
            return
        self.started = True
        # The host may have moved while we were stopped
        self.current = self.read()
        self.host.add_listener(self.host_event, self._on_host_change)

    def stop(self) -> None:
        self.host.remove_listener(self.host_event, self._on_host_change)
        self.started = False

    # -- Events --

    def on(self, event: str, handler: LocatorHandler) -> None:
        self._handlers.setdefault(event, []).append(handler)

    def un(self, event: str, handler: LocatorHandler) -> None:
        """Remove every registration of *handler* for *event*."""
        handlers = self._handlers.get(event)
        if handlers:
            handlers[:] = [h for h in handlers if h != handler]

    def fire(self, event: str, payload: RedirectEvent) -> None:
        for handler in list(self._handlers.get(event, ())):
            handler(payload)

    # -- Navigation --

    def redirect(self, url: str, *, force: bool = False, silent: bool = False) -> None:
        url = resolve_url(url, self.current)
        referrer: str | None = self.current
        changed = url != referrer

        if changed:
            self.referrer = referrer
            self.current = url
            self.write(url)
        else:
            referrer = self.referrer

        if (changed or force) and not silent:
            logger.debug("Redirect %r (referrer %r)", url, referrer)
            self.fire(REDIRECT, RedirectEvent(url=url, referrer=referrer))

    def reload(self) -> None:
        """Re-fire the current location unchanged."""
        logger.debug("Reload %r (referrer %r)", self.current, self.referrer)
        self.fire(REDIRECT, RedirectEvent(url=self.current, referrer=self.referrer))
