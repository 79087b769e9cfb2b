"""The view capability and a plain base implementation.

Lifecycle as driven by the reconciler::

    view = factory()                  # create
    view.set_data("route", location)
    view.invoke_hook("route")         # -> view.on_route()
    view.attach(mount_point)          # only if the target resolved
    ...                               # same route again: set_data + hook
    view.dispose()                    # route no longer active
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from perch.views.mount import MountPoint


@runtime_checkable
class Mountable(Protocol):
    """What the reconciler needs from a view."""

    def set_data(self, key: str, value: Any) -> None: ...
    def invoke_hook(self, name: str) -> None: ...
    def attach(self, mount_point: Any) -> None: ...
    def dispose(self) -> None: ...


ViewFactory = Callable[[], Mountable]


class View:
    """Base view: a data dict, named hooks, and a mount point.

    Hooks are methods named ``on_<hook>``; a missing method means the
    hook is a no-op. Subclasses override ``render()`` to produce the
    content written into the mount point; any data change re-renders an
    attached view.
    """

    def __init__(self) -> None:
        self.data: dict[str, Any] = {}
        self.mount_point: MountPoint | None = None
        self.disposed = False

    @property
    def attached(self) -> bool:
        return self.mount_point is not None

    def set_data(self, key: str, value: Any) -> None:
        self.data[key] = value
        if self.mount_point is not None:
            self.refresh()

    def invoke_hook(self, name: str) -> None:
        hook = getattr(self, f"on_{name}", None)
        if hook is not None:
            hook()

    def attach(self, mount_point: MountPoint) -> None:
        if self.disposed:
            msg = f"{type(self).__name__} is disposed and cannot be attached."
            raise RuntimeError(msg)
        self.mount_point = mount_point
        mount_point.mount(self)
        self.refresh()
        self.invoke_hook("attached")

    def refresh(self) -> None:
        """Re-render into the mount point."""
        if self.mount_point is not None:
            self.mount_point.content = self.render()

    def render(self) -> str:
        return ""

    def dispose(self) -> None:
        """Detach and release everything. Safe to call more than once."""
        if self.disposed:
            return
        if self.mount_point is not None:
            self.mount_point.unmount(self)
            self.mount_point = None
            self.invoke_hook("detached")
        self.data.clear()
        self.disposed = True
        self.invoke_hook("disposed")
