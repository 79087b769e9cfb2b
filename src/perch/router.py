"""Router facade.

Owns the route table, the dispatcher/reconciler pair, the listener
list, and the active locator::

    router = Router(mount_resolver=Document("#main"))
    router.add("/list/:category", view_factory=ListView)
    router.add("/about", handler=show_about)
    router.listen(track_page_view)
    router.start()

    router.navigate("/list/shoes")
"""

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from perch.config import RouterConfig
from perch.dispatch import Dispatcher, Listener, URLParser
from perch.errors import ConfigurationError
from perch.host import Host
from perch.locators import LOCATORS, REDIRECT, Locator
from perch.routing.route import Handler, RouteConfig, RouteEntry
from perch.routing.table import RouteTable
from perch.url import parse_url
from perch.views.mount import Document, MountResolver
from perch.views.reconciler import MountedView, ViewReconciler
from perch.views.view import ViewFactory

logger = logging.getLogger("perch.router")


class Router:
    """Client-side navigation router.

    Collaborators are injected: the *host* the locators observe, the
    *url_parser*, the *mount_resolver* views attach through, and the
    *locators* registry mapping mode names to locator classes. Defaults
    give a self-contained in-memory setup.
    """

    def __init__(
        self,
        config: RouterConfig | None = None,
        *,
        host: Host | None = None,
        url_parser: URLParser = parse_url,
        mount_resolver: MountResolver | None = None,
        locators: Mapping[str, type[Locator]] | None = None,
    ) -> None:
        self.config = config or RouterConfig()
        self.host = host or Host(self.config.initial_url)
        self._locators = dict(locators if locators is not None else LOCATORS)
        self._table = RouteTable()
        self._listeners: list[Listener] = []
        self._reconciler = ViewReconciler(
            mount_resolver if mount_resolver is not None else Document(self.config.default_target)
        )
        self._dispatcher = Dispatcher(
            self._table,
            self._reconciler,
            self._listeners,
            url_parser,
            isolate_listener_errors=self.config.isolate_listener_errors,
        )
        self._started = False
        self._mode = self.config.mode.lower()
        self._locator = self._create_locator(self._mode)

    # -- Route registration --

    def add(
        self,
        rule: object,
        handler: Handler | None = None,
        *,
        target: str | None = None,
        view_factory: ViewFactory | None = None,
        **meta: Any,
    ) -> "Router":
        """Register a route. Returns the router for chaining.

        Args:
            rule: ``"/user/:id"`` style pattern, a compiled ``re.Pattern``,
                or any ``Matcher``.
            handler: Called with the location when the route matches
                and there is no *view_factory*.
            target: Mount point for the view. Defaults to
                ``config.default_target``.
            view_factory: Zero-argument callable producing a view.
                Takes precedence over *handler*.
            **meta: Stored on the route config and passed to listeners.

        Raises ``ConfigurationError`` if *rule* cannot be compiled.
        """
        config = RouteConfig(
            rule=rule,
            target=target or self.config.default_target,
            handler=handler,
            view_factory=view_factory,
            meta=MappingProxyType(dict(meta)),
        )
        self._table.add(config)
        return self

    def route(
        self,
        rule: object,
        *,
        target: str | None = None,
        **meta: Any,
    ) -> Callable[[Handler], Handler]:
        """Register a handler route via decorator."""

        def decorator(func: Handler) -> Handler:
            self.add(rule, func, target=target, **meta)
            return func

        return decorator

    @property
    def routes(self) -> tuple[RouteEntry, ...]:
        return self._table.entries

    def match(self, path: str) -> RouteEntry | None:
        """Return the entry *path* would dispatch to, without dispatching."""
        return self._table.match(path)

    # -- Listeners --

    def listen(self, listener: Listener) -> "Router":
        """Call *listener(location, route_config)* on every matched location."""
        self._listeners.append(listener)
        return self

    def unlisten(self, listener: Listener) -> "Router":
        """Remove every registration of *listener*."""
        self._listeners[:] = [fn for fn in self._listeners if fn != listener]
        return self

    # -- Lifecycle --

    @property
    def mode(self) -> str:
        return self._mode

    @property
    def locator(self) -> Locator:
        return self._locator

    @property
    def is_started(self) -> bool:
        return self._started

    @property
    def mounted(self) -> tuple[MountedView, ...]:
        return self._reconciler.mounted

    def start(self) -> "Router":
        """Subscribe to the locator and dispatch the current location.

        No-op if already started.
        """
        if self._started:
            return self
        self._started = True
        self._locator.on(REDIRECT, self._dispatcher)
        self._locator.start()
        logger.debug("Router started in %s mode", self._mode)
        self._locator.reload()
        return self

    def stop(self) -> "Router":
        """Unsubscribe from and stop the locator. Safe to call twice.

        Mounted views stay mounted.
        """
        self._locator.un(REDIRECT, self._dispatcher)
        self._locator.stop()
        if self._started:
            logger.debug("Router stopped")
        self._started = False
        return self

    def set_mode(self, mode: str) -> "Router":
        """Switch locator implementation (``"hash"`` or ``"html5"``).

        Case-insensitive; a no-op when the mode is unchanged. A started
        router is stopped, switched, and started again, which replays
        the current location through the new locator.

        Raises ``ConfigurationError`` for an unknown mode.
        """
        mode = mode.lower()
        if mode == self._mode:
            return self

        locator = self._create_locator(mode)

        restart = self._started
        if restart:
            self.stop()

        self._mode = mode
        self._locator = locator
        logger.debug("Router mode set to %s", mode)

        if restart:
            self.start()
        return self

    def navigate(self, url: str, *, force: bool = False) -> "Router":
        """Ask the locator to go to *url* (resolved against the current one)."""
        self._locator.redirect(url, force=force)
        return self

    def _create_locator(self, mode: str) -> Locator:
        locator_class = self._locators.get(mode)
        if locator_class is None:
            available = ", ".join(sorted(self._locators))
            msg = f"Unknown router mode {mode!r}. Available modes: {available}."
            raise ConfigurationError(msg)
        return locator_class(self.host)
