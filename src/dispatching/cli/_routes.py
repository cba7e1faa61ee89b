"""``dispatching routes`` — list registered routes.

Resolves an import string to a Dispatcher and prints every route in
match order with its pattern, required suffix, and handler.
"""

import argparse
import json

from dispatching.cli._resolve import load_dispatcher
from dispatching.dispatcher import handler_name


def run_routes(args: argparse.Namespace) -> None:
    """List registered routes for a dispatcher.

    Prints a table of #, PATTERN, SUFFIX, and HANDLER, or the
    ``to_dict()`` snapshot when ``--json`` is given.
    """
    dispatcher = load_dispatcher(args.dispatcher)

    if args.json:
        print(json.dumps(dispatcher.to_dict(), indent=2))
        return

    if not len(dispatcher):
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str, str]] = [
        (str(i), route.pattern, route.url_suffix or "-", handler_name(route.handler))
        for i, route in enumerate(dispatcher.routes)
    ]

    max_index = max(max(len(r[0]) for r in rows), 1)  # "#" header
    max_pattern = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header
    max_suffix = max(max(len(r[2]) for r in rows), 6)  # "SUFFIX" header

    fmt = f"{{:>{max_index}}}  {{:<{max_pattern}}}  {{:<{max_suffix}}}  {{}}"
    print(fmt.format("#", "PATTERN", "SUFFIX", "HANDLER"))
    sep_len = max_index + max_pattern + max_suffix + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
