"""Dispatching CLI — inspect a dispatcher's route table and try URLs against it.

Entry point registered as ``dispatching`` in ``pyproject.toml``::

    [project.scripts]
    dispatching = "dispatching.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``dispatching`` command."""
    parser = argparse.ArgumentParser(
        prog="dispatching",
        description="Dispatching — first-match-wins URL dispatch for path and hash routes.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- dispatching routes -----------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "dispatcher",
        help="Import string (e.g. myapp.urls:dispatcher)",
    )
    routes_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the compiled route table as JSON",
    )

    # -- dispatching match ------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show which route a URL matches")
    match_parser.add_argument(
        "dispatcher",
        help="Import string (e.g. myapp.urls:dispatcher)",
    )
    match_parser.add_argument("url", help="URL or path to match (e.g. /users/42#edit)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from dispatching.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from dispatching.cli._match import run_match

        run_match(args)
