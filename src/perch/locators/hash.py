"""Hash-mode locator: the location lives after ``#`` in the host URL."""

from perch.host import HASHCHANGE
from perch.locators.base import Locator


class HashLocator(Locator):
    """``/app#/list/shoes`` routes ``/list/shoes``."""

    host_event = HASHCHANGE

    def read(self) -> str:
        return self.host.hash or "/"

    def write(self, url: str) -> None:
        # Fires hashchange; the handler sees the location already recorded
        self.host.set_hash(url)
