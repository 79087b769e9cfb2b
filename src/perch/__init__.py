"""Perch — a client-side navigation router.

Maps a changing location to registered routes, extracts path
parameters, notifies listeners, and keeps one active view mounted per
matched route.

Basic usage::

    from perch import Document, Router, TemplateView

    class ListView(TemplateView):
        source = "<h1>{{ category }}</h1>"

        def context(self):
            return {"category": self.data["route"].query["category"]}

    doc = Document("#main")
    router = Router(mount_resolver=doc)
    router.add("/list/:category", view_factory=ListView)
    router.start()

    router.navigate("/list/shoes")
    doc["#main"].content  # "<h1>shoes</h1>"
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Document",
    "HTML5Locator",
    "HashLocator",
    "Host",
    "Location",
    "MountPoint",
    "PerchError",
    "RedirectEvent",
    "RouteConfig",
    "RouteEntry",
    "Router",
    "RouterConfig",
    "TemplateView",
    "View",
    "parse_url",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` from importing kida until a template view is
    actually used.
    """
    if name == "Router":
        from perch.router import Router

        return Router

    if name == "RouterConfig":
        from perch.config import RouterConfig

        return RouterConfig

    if name in ("RouteConfig", "RouteEntry"):
        from perch.routing import route as _route

        return getattr(_route, name)

    if name in ("Location", "RedirectEvent"):
        from perch import location as _location

        return getattr(_location, name)

    if name in ("HashLocator", "HTML5Locator"):
        from perch import locators as _locators

        return getattr(_locators, name)

    if name == "Host":
        from perch.host import Host

        return Host

    if name in ("Document", "MountPoint"):
        from perch.views import mount as _mount

        return getattr(_mount, name)

    if name == "View":
        from perch.views.view import View

        return View

    if name == "TemplateView":
        from perch.views.template import TemplateView

        return TemplateView

    if name == "parse_url":
        from perch.url import parse_url

        return parse_url

    if name in ("PerchError", "ConfigurationError"):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
