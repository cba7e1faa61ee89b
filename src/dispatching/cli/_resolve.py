"""Locate the Dispatcher a CLI command operates on.

``dispatching routes`` and ``dispatching match`` both take a target such
as ``myapp.urls`` or ``myapp.urls:build_dispatcher``.
"""

import pkgutil
import sys

from dispatching.dispatcher import Dispatcher

DEFAULT_ATTRIBUTE = "dispatcher"


def resolve_dispatcher(target: str) -> Dispatcher:
    """Import *target* and return the :class:`Dispatcher` it names.

    A bare module path means ``module:dispatcher``. A zero-argument
    callable found at *target* is treated as a factory and called once.

    Raises ``ModuleNotFoundError`` or ``AttributeError`` when the target
    cannot be imported, ``ValueError`` when it is malformed, and
    ``TypeError`` when it does not produce a Dispatcher.
    """
    if ":" not in target:
        target = f"{target}:{DEFAULT_ATTRIBUTE}"

    found = pkgutil.resolve_name(target)
    if isinstance(found, Dispatcher):
        return found

    if callable(found):
        try:
            found = found()
        except Exception as exc:
            msg = f"Calling {target!r} to build a dispatcher failed: {exc}"
            raise TypeError(msg) from exc
        if isinstance(found, Dispatcher):
            return found

    msg = f"{target!r} gave {type(found).__name__}, expected a dispatching.Dispatcher"
    raise TypeError(msg)


def load_dispatcher(target: str) -> Dispatcher:
    """:func:`resolve_dispatcher` for CLI commands: report failures and exit 1."""
    try:
        return resolve_dispatcher(target)
    except (ImportError, AttributeError, ValueError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
