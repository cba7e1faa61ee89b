"""Dispatch-scoped context via ContextVar.

Handlers always take a single argument, the parameter mapping. Whatever
context the caller passed to ``dispatch()`` (the dispatcher itself by
default) is reachable from inside the handler through
:func:`current_context`::

    from dispatching.context import current_context

    def show(params):
        app = current_context()
        ...

The variable is set just before the handler runs and reset right after,
so nested dispatches each see their own context.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local otherwise.
    No locks needed.
"""

from contextvars import ContextVar

context_var: ContextVar[object] = ContextVar("dispatching_context")
"""The receiving context of the handler currently being dispatched."""


def current_context() -> object:
    """Return the context of the dispatch in progress.

    Raises ``LookupError`` if called outside a handler.
    """
    return context_var.get()
