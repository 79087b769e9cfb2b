"""Test helpers for perch routers.

``RecordingView`` records every call the reconciler makes on it, so
tests can assert on create / update / dispose without a real view.
"""

from typing import Any, ClassVar

from perch.location import Location
from perch.router import Router
from perch.views.view import View


class RecordingView(View):
    """A view that records its lifecycle.

    ``instances`` collects every instance created through the class.
    Call ``RecordingView.reset()`` (or subclass per test) to clear it.
    """

    instances: ClassVar[list["RecordingView"]] = []

    def __init__(self) -> None:
        super().__init__()
        self.hooks: list[str] = []
        self.routes: list[Location] = []
        self.dispose_count = 0
        type(self).instances.append(self)

    @classmethod
    def reset(cls) -> None:
        cls.instances = []

    def invoke_hook(self, name: str) -> None:
        self.hooks.append(name)
        if name == "route":
            self.routes.append(self.data["route"])
        super().invoke_hook(name)

    def dispose(self) -> None:
        self.dispose_count += 1
        super().dispose()

    def render(self) -> str:
        location = self.data.get("route")
        return f"<{type(self).__name__} {location.path}>" if location else ""


def assert_mounted(router: Router, view_type: type[Any] | None = None) -> Any:
    """Assert exactly one view is mounted and return it.

    When *view_type* is given, the mounted view must be an instance of it.
    """
    mounted = router.mounted
    assert len(mounted) == 1, f"Expected one mounted view, got {len(mounted)}: {mounted!r}"
    view = mounted[0].view
    if view_type is not None:
        assert isinstance(view, view_type), (
            f"Expected a {view_type.__name__}, got {type(view).__name__}"
        )
    return view


def assert_nothing_mounted(router: Router) -> None:
    """Assert no view is mounted."""
    mounted = router.mounted
    assert not mounted, f"Expected no mounted views, got {mounted!r}"
