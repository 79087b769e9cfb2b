"""URL parsing for router locations.

Locations are relative URLs (``/list/shoes?sort=asc#top``). They never
carry a scheme or host, so this is a small splitter rather than a
full ``urllib.parse.urlsplit``.
"""

import posixpath
from urllib.parse import unquote

from perch.location import Location


def parse_url(url: str) -> Location:
    """Split a raw location string into path, query, and hash.

    The hash is split off first, then the query string. Query pairs are
    separated by ``&`` and split on the first ``=`` only, so values may
    contain unescaped ``=``. Keys and values are percent-decoded.
    A repeated key keeps its first value.

    Examples::

        parse_url("/list/shoes?sort=asc")
        # Location(path="/list/shoes", query={"sort": "asc"}, ...)
    """
    path = url
    hash_ = ""
    query_string = ""

    hash_start = path.find("#")
    if hash_start >= 0:
        hash_ = path[hash_start + 1 :]
        path = path[:hash_start]

    query: dict[str, str] = {}
    query_start = path.find("?")
    if query_start >= 0:
        query_string = path[query_start + 1 :]
        path = path[:query_start]
        for segment in query_string.split("&"):
            if not segment:
                continue
            key, _, value = segment.partition("=")
            key = unquote(key)
            query.setdefault(key, unquote(value))

    return Location(
        url=url,
        path=path,
        query=query,
        query_string=query_string,
        hash=hash_,
    )


def resolve_url(url: str, base: str) -> str:
    """Resolve *url* against the location *base*.

    Absolute paths are returned unchanged. A bare query (``"?page=2"``)
    replaces the query of *base*. Anything else is resolved relative to
    the directory of the base path, with ``.`` and ``..`` collapsed.
    """
    if url.startswith("/"):
        return url

    base_path = base.split("#", 1)[0].split("?", 1)[0] or "/"
    if not url:
        return base
    if url.startswith(("?", "#")):
        return base_path + url

    directory = base_path[: base_path.rfind("/") + 1] or "/"
    path, sep, rest = url.partition("?")
    resolved = posixpath.normpath(posixpath.join(directory, path))
    if path.endswith("/") and resolved != "/":
        resolved += "/"
    return resolved + sep + rest
