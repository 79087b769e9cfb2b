"""``perch routes`` and ``perch match`` — route table inspection.

Neither command starts the router or creates views; ``match`` resolves
a location exactly as a dispatch would, then prints the result.
"""

import argparse
import sys

from perch.cli._resolve import resolve_router
from perch.dispatch import merge_params
from perch.routing.route import RouteEntry
from perch.router import Router
from perch.url import parse_url


def _load(import_string: str) -> Router:
    try:
        return resolve_router(import_string)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def describe_rule(entry: RouteEntry) -> str:
    rule = entry.config.rule
    if isinstance(rule, str):
        return rule
    pattern = getattr(rule, "pattern", None)
    if isinstance(pattern, str):
        return f"re:{pattern}"
    return repr(rule)


def describe_action(entry: RouteEntry) -> str:
    if entry.view_factory is not None:
        name = getattr(entry.view_factory, "__name__", repr(entry.view_factory))
        return f"{name} -> {entry.target}"
    if entry.handler is not None:
        return getattr(entry.handler, "__name__", repr(entry.handler))
    return "-"


def run_routes(args: argparse.Namespace) -> None:
    """Print the route table in priority order."""
    router = _load(args.router)
    entries = router.routes
    if not entries:
        print("No routes registered.")
        return

    rows = [(str(e.id), describe_rule(e), describe_action(e)) for e in entries]
    max_id = max(2, *(len(r[0]) for r in rows))
    max_rule = max(4, *(len(r[1]) for r in rows))

    fmt = f"{{:<{max_id}}}  {{:<{max_rule}}}  {{}}"
    print(fmt.format("ID", "RULE", "ACTION"))
    sep_len = max_id + max_rule + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))


def run_match(args: argparse.Namespace) -> None:
    """Resolve ``args.url`` against the route table and print the result.

    Exits with status 1 when no route matches.
    """
    router = _load(args.router)
    location = parse_url(args.url)
    result = router._table.resolve(location.path)
    if result is None:
        print(f"No route matches {location.path!r}", file=sys.stderr)
        raise SystemExit(1)

    entry, captures = result
    merge_params(location, entry.param_names, captures)
    print(f"route:  {entry.id} {describe_rule(entry)}")
    print(f"action: {describe_action(entry)}")
    for key, value in location.query.items():
        print(f"  {key} = {value}")
