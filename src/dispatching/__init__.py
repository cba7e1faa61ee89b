"""Dispatching — first-match-wins URL dispatch for path and hash routes.

Patterns are literal text with ``<name>`` or ``<name:regex>`` placeholders.
The part before ``#`` matches the URL path; the part after matches the
URL hash.

Basic usage::

    from dispatching import Dispatcher

    dispatcher = Dispatcher([
        ("/", home),
        ("/<controller>/<action>", action),
        ("#<tab>", tab),
    ])

    dispatcher.match("/users/list")
    # RouteMatch(params={'controller': 'users', 'action': 'list'}, handler=action)

    dispatcher.dispatch("https://example.com/users/list?page=2")
    # action({'controller': 'users', 'action': 'list'})
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Dispatcher",
    "DispatcherConfig",
    "DispatchingError",
    "InvalidRouteError",
    "InvalidUrlError",
    "ParsedUrl",
    "PatternError",
    "Route",
    "RouteMatch",
    "RouteSpec",
    "current_context",
    "normalize_url",
]

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "dispatching.errors",
    "Dispatcher": "dispatching.dispatcher",
    "DispatcherConfig": "dispatching.config",
    "DispatchingError": "dispatching.errors",
    "InvalidRouteError": "dispatching.errors",
    "InvalidUrlError": "dispatching.errors",
    "ParsedUrl": "dispatching.url",
    "PatternError": "dispatching.errors",
    "Route": "dispatching.routing.route",
    "RouteMatch": "dispatching.routing.route",
    "RouteSpec": "dispatching.routing.route",
    "current_context": "dispatching.context",
    "normalize_url": "dispatching.url",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import dispatching`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
