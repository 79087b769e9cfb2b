"""Rule compilation.

String rules use ``/:name`` segments for path parameters::

    "/user/:id"        -> ^/user/([^/\\s]+)$   names ("", "id")
    "/list/:cat/:page" -> two captures         names ("", "cat", "page")

Anything between parameter segments is regular expression source, so
``"/files/.*"`` is a valid rule. Pre-built ``re.Pattern`` objects and
custom ``Matcher`` implementations are accepted as-is.
"""

import re
from typing import Protocol, runtime_checkable

from perch.errors import ConfigurationError

# A `/:name` segment, only where the segment ends (next `/` or end of rule)
PARAM_SEGMENT = re.compile(r"/:([a-z0-9_-]+)(?=/|$)", re.IGNORECASE)

# What a parameter segment matches: one or more non-space, non-slash chars
PARAM_CAPTURE = r"/([^/\s]+)"


@runtime_checkable
class Matcher(Protocol):
    """Anything that can test a path.

    ``test`` returns the captured groups in order (group 1 first), or
    ``None`` when the path does not match. A capture that did not
    participate in the match is ``None``.
    """

    def test(self, path: str) -> tuple[str | None, ...] | None: ...


class RegexMatcher:
    """A ``Matcher`` backed by a compiled regular expression.

    Uses ``search``: a pre-built pattern without anchors matches
    anywhere in the path. Compiled string rules are anchored at both
    ends.
    """

    __slots__ = ("pattern",)

    def __init__(self, pattern: re.Pattern[str]) -> None:
        self.pattern = pattern

    def test(self, path: str) -> tuple[str | None, ...] | None:
        m = self.pattern.search(path)
        if m is None:
            return None
        return m.groups()

    def __repr__(self) -> str:
        return f"RegexMatcher({self.pattern.pattern!r})"


def compile_rule(rule: object) -> tuple[Matcher, tuple[str, ...]]:
    """Compile a route rule into a matcher and its parameter names.

    ``param_names[0]`` is always ``""`` (the whole match is not a
    parameter), so ``param_names[i]`` names capture ``i``. An empty
    name means the capture is exposed under its 1-based index.

    Raises ``ConfigurationError`` if *rule* is not a string, a compiled
    pattern, or a ``Matcher``.
    """
    if isinstance(rule, str):
        names: list[str] = [""]

        def _replace(m: re.Match[str]) -> str:
            names.append(m.group(1))
            return PARAM_CAPTURE

        source = PARAM_SEGMENT.sub(_replace, rule)
        try:
            pattern = re.compile(f"^{source}$", re.IGNORECASE)
        except re.error as exc:
            msg = f"Invalid route rule {rule!r}: {exc}"
            raise ConfigurationError(msg) from exc
        return RegexMatcher(pattern), tuple(names)

    if isinstance(rule, re.Pattern):
        names = [""] * (rule.groups + 1)
        for name, index in rule.groupindex.items():
            names[index] = name
        return RegexMatcher(rule), tuple(names)

    if isinstance(rule, Matcher):
        return rule, ("",)

    msg = (
        f"Route rule must be a string, a compiled pattern, or a Matcher, "
        f"got {type(rule).__name__}."
    )
    raise ConfigurationError(msg)
