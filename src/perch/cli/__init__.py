"""Perch CLI — route table inspection.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    parser = argparse.ArgumentParser(
        prog="perch",
        description="Perch — a client-side navigation router.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log routing decisions to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- perch routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "router",
        help="Import string (e.g. myapp:router)",
    )

    # -- perch match ------------------------------------------------------
    match_parser = subparsers.add_parser(
        "match", help="Show which route a location resolves to"
    )
    match_parser.add_argument(
        "router",
        help="Import string (e.g. myapp:router)",
    )
    match_parser.add_argument("url", help="Location to resolve (e.g. /list/shoes?page=2)")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from perch.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from perch.cli._routes import run_match

        run_match(args)
