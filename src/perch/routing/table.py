"""Ordered route table with first-match-wins resolution.

Insertion order is priority order. Overlapping and duplicate rules are
legal; the caller registers the most specific rules first::

    table = RouteTable()
    table.add(RouteConfig("/list/all", target="#main", handler=show_all))
    table.add(RouteConfig("/list/:category", target="#main", handler=show))
    entry, captures = table.resolve("/list/shoes")
"""

import itertools
from collections.abc import Iterator

from perch.routing.pattern import compile_rule
from perch.routing.route import RouteConfig, RouteEntry


class RouteTable:
    """Append-only sequence of compiled routes.

    Matching is a linear scan in insertion order. Tables hold tens of
    entries, and the scan keeps precedence exactly the registration order.
    """

    __slots__ = ("_entries", "_ids")

    def __init__(self) -> None:
        self._entries: list[RouteEntry] = []
        self._ids = itertools.count(1)

    def add(self, config: RouteConfig) -> int:
        """Compile *config.rule* and append the route. Returns its id.

        Raises ``ConfigurationError`` if the rule cannot be compiled; the
        route is not added and no id is consumed.
        """
        matcher, param_names = compile_rule(config.rule)
        entry = RouteEntry(
            id=next(self._ids),
            matcher=matcher,
            param_names=param_names,
            config=config,
        )
        self._entries.append(entry)
        return entry.id

    def resolve(self, path: str) -> tuple[RouteEntry, tuple[str | None, ...]] | None:
        """Return the first entry matching *path* with its captures."""
        for entry in self._entries:
            captures = entry.matcher.test(path)
            if captures is not None:
                return entry, captures
        return None

    def match(self, path: str) -> RouteEntry | None:
        """Return the first entry whose matcher accepts *path*."""
        result = self.resolve(path)
        return result[0] if result is not None else None

    @property
    def entries(self) -> tuple[RouteEntry, ...]:
        """All entries in priority order."""
        return tuple(self._entries)

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
