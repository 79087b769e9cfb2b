"""View reconciliation.

Decides, for each dispatched location, which mounted view is updated,
which are disposed, and whether a new one is created. Only the view of
the matched route survives a ``reconcile()``.
"""

import logging
from dataclasses import dataclass

from perch.location import Location
from perch.routing.route import RouteEntry
from perch.views.mount import MountResolver
from perch.views.view import Mountable

logger = logging.getLogger("perch.views")

ROUTE_DATA_KEY = "route"
ROUTE_HOOK = "route"


@dataclass(frozen=True, slots=True)
class MountedView:
    """A live view tracked for a route id."""

    route_id: int
    view: Mountable


class ViewReconciler:
    """Tracks mounted views by route id.

    Usage::

        reconciler = ViewReconciler(Document("#main"))
        reconciler.reconcile(entry, location)   # create or update
        reconciler.dispose_all()                # nothing matched
    """

    __slots__ = ("_mounted", "_resolver")

    def __init__(self, resolver: MountResolver | None = None) -> None:
        self._resolver = resolver
        self._mounted: dict[int, MountedView] = {}

    @property
    def mounted(self) -> tuple[MountedView, ...]:
        """Snapshot of the currently mounted views."""
        return tuple(self._mounted.values())

    def get(self, route_id: int) -> Mountable | None:
        mounted = self._mounted.get(route_id)
        return mounted.view if mounted is not None else None

    def reconcile(self, entry: RouteEntry, location: Location) -> None:
        """Update the view for *entry*, dispose every other, create if missing.

        When the route has no view factory, its handler is called with
        the location instead and nothing is tracked.
        """
        updated = False
        for mounted in list(self._mounted.values()):
            if mounted.route_id == entry.id:
                logger.debug("Updating view for route %d", entry.id)
                mounted.view.set_data(ROUTE_DATA_KEY, location)
                mounted.view.invoke_hook(ROUTE_HOOK)
                updated = True
            else:
                self._dispose(mounted)

        if updated:
            return

        if entry.view_factory is not None:
            self._create(entry, location)
        elif entry.handler is not None:
            entry.handler(location)
        else:
            logger.debug("Route %d has neither a view nor a handler", entry.id)

    def dispose_all(self) -> None:
        """Dispose every mounted view and empty the registry."""
        for mounted in list(self._mounted.values()):
            self._dispose(mounted)

    def _create(self, entry: RouteEntry, location: Location) -> None:
        view = entry.view_factory()
        view.set_data(ROUTE_DATA_KEY, location)
        view.invoke_hook(ROUTE_HOOK)

        # The hook navigated and a nested dispatch mounted its own view
        if self._mounted:
            logger.debug("Route %d superseded during its route hook", entry.id)
            view.dispose()
            return

        mount_point = (
            self._resolver.resolve(entry.target) if self._resolver is not None else None
        )
        if mount_point is not None:
            view.attach(mount_point)
        else:
            logger.debug(
                "Mount point %r not found, view for route %d left unattached",
                entry.target,
                entry.id,
            )

        self._mounted[entry.id] = MountedView(route_id=entry.id, view=view)
        logger.debug("Created view for route %d", entry.id)

    def _dispose(self, mounted: MountedView) -> None:
        logger.debug("Disposing view for route %d", mounted.route_id)
        mounted.view.dispose()
        self._mounted.pop(mounted.route_id, None)
