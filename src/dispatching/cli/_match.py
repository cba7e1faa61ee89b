"""``dispatching match`` — show which route a URL resolves to.

Exits with status 1 when no route matches or the URL cannot be parsed.
"""

import argparse
import sys

from dispatching.cli._resolve import load_dispatcher
from dispatching.dispatcher import handler_name
from dispatching.errors import InvalidUrlError


def run_match(args: argparse.Namespace) -> None:
    """Match ``args.url`` against the dispatcher and print the outcome."""
    dispatcher = load_dispatcher(args.dispatcher)

    try:
        found = dispatcher.match(args.url)
    except InvalidUrlError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if found is None:
        print(f"No route matches {args.url!r}", file=sys.stderr)
        raise SystemExit(1)

    print(f"handler: {handler_name(found.handler)}")
    if not found.params:
        print("params:  (none)")
        return
    width = max(len(name) for name in found.params)
    print("params:")
    for name, value in found.params.items():
        print(f"  {name:<{width}}  {value}")
