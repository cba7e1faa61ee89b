"""Invoke helpers — call sync or async handlers uniformly.

Handlers can be ``def`` or ``async def``. ``Dispatcher.dispatch_async``
awaits whatever the handler returns when it is awaitable, so both kinds
can share one route table.

Usage::

    from dispatching._internal.invoke import invoke

    result = await invoke(handler, params)
"""

import inspect
from typing import Any

from dispatching._internal.types import Handler


async def invoke(handler: Handler, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's a coroutine."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
