"""HTML5-mode locator: the location is the host path itself."""

from perch.host import POPSTATE
from perch.locators.base import Locator


class HTML5Locator(Locator):
    """``/list/shoes?sort=asc`` routes ``/list/shoes``.

    Writes go through ``push_state``, which fires nothing; history
    traversal arrives as ``popstate``.
    """

    host_event = POPSTATE

    def read(self) -> str:
        return self.host.path or "/"

    def write(self, url: str) -> None:
        self.host.push_state(url)
