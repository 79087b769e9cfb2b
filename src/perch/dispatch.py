"""Dispatch pipeline: redirect event -> location -> listeners -> views.

Runs synchronously to completion for each event. Listener and view
hook exceptions propagate out of ``handle_location_change()`` unless
listener isolation is switched on.
"""

import logging
from collections.abc import Callable
from typing import Any

from perch.location import Location, RedirectEvent
from perch.routing.route import RouteConfig, RouteEntry
from perch.routing.table import RouteTable
from perch.views.reconciler import ViewReconciler

logger = logging.getLogger("perch.dispatch")

Listener = Callable[[Location, RouteConfig], Any]
URLParser = Callable[[str], Location]


def merge_params(
    location: Location,
    param_names: tuple[str, ...],
    captures: tuple[str | None, ...],
) -> None:
    """Merge captured path parameters into ``location.query``.

    Capture ``i`` (1-based) is stored under ``param_names[i]``, or under
    ``str(i)`` when the capture is unnamed. Path parameters overwrite
    query parameters of the same name. Captures of optional groups that
    did not participate are skipped.
    """
    for i, value in enumerate(captures, start=1):
        if value is None:
            continue
        name = param_names[i] if i < len(param_names) else ""
        location.query[name or str(i)] = value


class Dispatcher:
    """Turns locator redirect events into listener calls and view updates."""

    __slots__ = ("_isolate", "_listeners", "_parse", "_reconciler", "_table")

    def __init__(
        self,
        table: RouteTable,
        reconciler: ViewReconciler,
        listeners: list[Listener],
        parse: URLParser,
        *,
        isolate_listener_errors: bool = False,
    ) -> None:
        self._table = table
        self._reconciler = reconciler
        # Shared with the router, which owns registration
        self._listeners = listeners
        self._parse = parse
        self._isolate = isolate_listener_errors

    def handle_location_change(self, event: RedirectEvent) -> RouteEntry | None:
        """Dispatch one location change. Returns the matched entry, if any."""
        location = self._parse(event.url)
        result = self._table.resolve(location.path)

        if result is None:
            logger.debug("No route matches %r", location.path)
            self._reconciler.dispose_all()
            return None

        entry, captures = result
        merge_params(location, entry.param_names, captures)
        location.referrer = event.referrer
        logger.debug("Route %d matches %r", entry.id, location.path)

        self._notify(location, entry.config)
        self._reconciler.reconcile(entry, location)
        return entry

    # Locators call handlers with the event as the only argument
    __call__ = handle_location_change

    def _notify(self, location: Location, config: RouteConfig) -> None:
        # Iterate a copy: a listener may unlisten itself
        for listener in list(self._listeners):
            if not self._isolate:
                listener(location, config)
                continue
            try:
                listener(location, config)
            except Exception:
                logger.exception("Route listener %r failed", listener)
