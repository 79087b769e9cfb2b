"""Location and redirect event types.

``RedirectEvent`` is what a locator emits. ``Location`` is what the
dispatcher hands to listeners and views: the parsed URL, with path
parameters merged into ``query`` and the referrer attached.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class RedirectEvent:
    """A location change reported by a locator."""

    url: str
    referrer: str | None = None


@dataclass(slots=True)
class Location:
    """A parsed location.

    Deliberately mutable: the dispatcher merges path parameters into
    ``query`` and sets ``referrer`` before any listener sees it.
    """

    url: str
    path: str
    query: dict[str, str] = field(default_factory=dict)
    query_string: str = ""
    hash: str = ""
    referrer: str | None = None
