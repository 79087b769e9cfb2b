"""Mount points and the in-memory document that resolves them."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from perch.views.view import Mountable


@runtime_checkable
class MountResolver(Protocol):
    """Resolves a target identifier (``"#main"``) to something a view
    can attach to, or ``None`` if the host has no such target."""

    def resolve(self, identifier: str) -> object | None: ...


def _key(identifier: str) -> str:
    return identifier.removeprefix("#")


class MountPoint:
    """A named region a view renders into.

    Holds at most one view. ``content`` is whatever the mounted view
    last rendered.
    """

    __slots__ = ("content", "name", "view")

    def __init__(self, name: str) -> None:
        self.name = name
        self.content = ""
        self.view: Mountable | None = None

    def mount(self, view: "Mountable") -> None:
        self.view = view

    def unmount(self, view: "Mountable") -> None:
        """Detach *view* if it is the one mounted here."""
        if self.view is view:
            self.view = None
            self.content = ""

    def __repr__(self) -> str:
        return f"MountPoint(#{self.name})"


class Document:
    """In-memory host document: a set of mount points keyed by id.

    Usage::

        doc = Document("#main", "#sidebar")
        doc.resolve("#main")     # MountPoint(#main)
        doc.resolve("#missing")  # None
    """

    __slots__ = ("_regions",)

    def __init__(self, *identifiers: str) -> None:
        self._regions: dict[str, MountPoint] = {}
        for identifier in identifiers:
            self.add(identifier)

    def add(self, identifier: str) -> MountPoint:
        """Create (or return the existing) mount point for *identifier*."""
        key = _key(identifier)
        if key not in self._regions:
            self._regions[key] = MountPoint(key)
        return self._regions[key]

    def resolve(self, identifier: str) -> MountPoint | None:
        return self._regions.get(_key(identifier))

    def __getitem__(self, identifier: str) -> MountPoint:
        return self._regions[_key(identifier)]

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and _key(identifier) in self._regions
