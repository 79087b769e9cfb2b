"""In-memory browsing host.

Stands in for the browser's location and history: a list of visited
URLs with a cursor, and ``hashchange`` / ``popstate`` notifications
fired the way a browser fires them. Locators read and write the host;
tests and embedding applications drive it directly (``back()``,
``set_hash()``) to simulate user navigation.
"""

from collections.abc import Callable
from typing import Any

HostListener = Callable[[], Any]

HASHCHANGE = "hashchange"
POPSTATE = "popstate"


def _split_hash(url: str) -> tuple[str, str]:
    path, _, hash_ = url.partition("#")
    return path, hash_


class Host:
    """Current location plus session history.

    ``push_state`` / ``replace_state`` change the location silently, as
    ``history.pushState`` does. ``set_hash`` fires ``hashchange``;
    ``back`` / ``forward`` fire ``popstate`` and, when the hash differs,
    ``hashchange`` as well.
    """

    __slots__ = ("_entries", "_index", "_listeners")

    def __init__(self, url: str = "/") -> None:
        self._entries: list[str] = [url]
        self._index = 0
        self._listeners: dict[str, list[HostListener]] = {}

    # -- Location --

    @property
    def url(self) -> str:
        """Full current location: path, query, and hash."""
        return self._entries[self._index]

    @property
    def path(self) -> str:
        """Path and query string, without the hash."""
        return _split_hash(self.url)[0]

    @property
    def hash(self) -> str:
        """Hash without the leading ``#``."""
        return _split_hash(self.url)[1]

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def push_state(self, url: str) -> None:
        """Append *url* to history, dropping any forward entries."""
        del self._entries[self._index + 1 :]
        self._entries.append(url)
        self._index += 1

    def replace_state(self, url: str) -> None:
        self._entries[self._index] = url

    def set_hash(self, hash_: str) -> None:
        """Navigate to a new hash. No-op if the hash is unchanged."""
        hash_ = hash_.removeprefix("#")
        if hash_ == self.hash:
            return
        self.push_state(f"{self.path}#{hash_}")
        self._fire(HASHCHANGE)

    def back(self) -> None:
        self.go(-1)

    def forward(self) -> None:
        self.go(1)

    def go(self, delta: int) -> None:
        """Move through history. Out-of-range moves are ignored."""
        index = self._index + delta
        if delta == 0 or not 0 <= index < len(self._entries):
            return
        old_hash = self.hash
        self._index = index
        self._fire(POPSTATE)
        if self.hash != old_hash:
            self._fire(HASHCHANGE)

    # -- Events --

    def add_listener(self, event: str, listener: HostListener) -> None:
        self._listeners.setdefault(event, []).append(listener)

    def remove_listener(self, event: str, listener: HostListener) -> None:
        listeners = self._listeners.get(event)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def _fire(self, event: str) -> None:
        for listener in list(self._listeners.get(event, ())):
            listener()
