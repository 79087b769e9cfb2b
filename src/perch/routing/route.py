"""RouteConfig and RouteEntry frozen dataclasses."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from perch.location import Location
    from perch.routing.pattern import Matcher
    from perch.views.view import ViewFactory

Handler = Callable[["Location"], Any]


@dataclass(frozen=True, slots=True)
class RouteConfig:
    """A route as the caller described it.

    Passed unchanged to every listener alongside the location, so
    ``meta`` is the place for application data (titles, nav keys).
    """

    rule: object
    target: str
    handler: Handler | None = None
    view_factory: "ViewFactory | None" = None
    meta: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """A compiled route in the table.

    Created by ``RouteTable.add()`` and never mutated or removed.
    """

    id: int
    matcher: "Matcher"
    param_names: tuple[str, ...]
    config: RouteConfig

    @property
    def target(self) -> str:
        return self.config.target

    @property
    def handler(self) -> Handler | None:
        return self.config.handler

    @property
    def view_factory(self) -> "ViewFactory | None":
        return self.config.view_factory
