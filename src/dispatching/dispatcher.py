"""Dispatcher — ordered route table with first-match-wins dispatch.

Usage::

    dispatcher = Dispatcher([
        ("/", index),
        ("/<controller>/<action>", action),
    ])
    dispatcher.add("/<page>", page)
    dispatcher.dispatch("https://example.com/users/list")

Thread safety:
    None built in. Register routes during setup; mutating the table while
    other threads dispatch needs external locking.
"""

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import Any

from dispatching._internal.invoke import invoke
from dispatching._internal.types import Handler
from dispatching.config import DispatcherConfig
from dispatching.context import context_var
from dispatching.errors import ConfigurationError, InvalidRouteError
from dispatching.routing.matcher import normalize_suffix, process_pattern
from dispatching.routing.route import Route, RouteMatch, RouteSpec

logger = logging.getLogger("dispatching.dispatcher")


class Dispatcher:
    """Match URLs against an ordered route table and call the winning handler.

    Routes are compiled when they are registered (constructor,
    ``configure()``, ``set_routes()``, ``add()``) and tried in registration
    order at dispatch time. The first route that matches wins.
    """

    __slots__ = ("_routes", "strict")

    def __init__(self, config: Any = None, *, strict: bool = True) -> None:
        self._routes: list[Route] = []
        self.strict = strict
        if config is not None:
            self.configure(config)

    # -- Configuration --------------------------------------------------

    def configure(self, config: Any) -> None:
        """Replace the route table from *config*.

        Accepts a sequence of route specs, a mapping with a ``routes`` key,
        or a :class:`DispatcherConfig`. Anything else raises
        ``ConfigurationError`` when ``strict`` is set and is ignored
        otherwise.
        """
        if isinstance(config, DispatcherConfig):
            self.strict = config.strict
            self.set_routes(config.routes)
        elif isinstance(config, Mapping) and config.get("routes") is not None:
            self.set_routes(config["routes"])
        elif _is_route_sequence(config):
            self.set_routes(config)
        elif self.strict:
            msg = (
                f"Cannot configure dispatcher from {type(config).__name__}. "
                "Pass a list of routes, a mapping with a 'routes' key, or a DispatcherConfig."
            )
            raise ConfigurationError(msg)
        else:
            logger.debug("Ignoring unrecognized configuration: %r", config)

    def normalize_route(self, spec: Any) -> Route:
        """Compile one route specification into a :class:`Route`.

        Accepts a ``(pattern, handler)`` pair, a :class:`RouteSpec`, or a
        mapping with ``pattern``, ``fn`` (or ``handler``) and an optional
        ``urlSuffix`` (or ``url_suffix``).

        Raises ``InvalidRouteError`` for anything else.
        """
        if isinstance(spec, RouteSpec):
            pattern, handler, url_suffix = spec.pattern, spec.handler, spec.url_suffix
        elif isinstance(spec, Mapping):
            pattern = spec.get("pattern")
            handler = spec.get("fn", spec.get("handler"))
            url_suffix = spec.get("urlSuffix", spec.get("url_suffix"))
        elif isinstance(spec, (tuple, list)) and len(spec) == 2:
            pattern, handler = spec
            url_suffix = None
        else:
            msg = f"Cannot normalize route {spec!r}: expected a (pattern, handler) pair or a route mapping"
            raise InvalidRouteError(msg)

        if not isinstance(pattern, str):
            msg = f"Route pattern must be a string, got {type(pattern).__name__}: {spec!r}"
            raise InvalidRouteError(msg)
        if not callable(handler):
            msg = f"Route handler for {pattern!r} must be callable, got {type(handler).__name__}"
            raise InvalidRouteError(msg)
        if url_suffix is not None and not isinstance(url_suffix, str):
            msg = f"Route urlSuffix for {pattern!r} must be a string, got {type(url_suffix).__name__}"
            raise InvalidRouteError(msg)

        return Route(
            matcher=process_pattern(pattern, url_suffix),
            handler=handler,
            pattern=pattern,
            url_suffix=normalize_suffix(url_suffix),
        )

    # -- Route table ----------------------------------------------------

    @property
    def routes(self) -> tuple[Route, ...]:
        """The compiled route table, in match order. Read-only."""
        return tuple(self._routes)

    def get_routes(self) -> tuple[Route, ...]:
        return self.routes

    def set_routes(self, specs: Sequence[Any]) -> None:
        """Replace the whole route table.

        Every spec is compiled before the table is swapped, so an invalid
        entry leaves the previous table in place.
        """
        routes = [self.normalize_route(spec) for spec in specs]
        self._routes = routes
        logger.debug("Route table replaced with %d routes", len(routes))

    def add(self, pattern: str | Any, handler: Handler | None = None) -> "Dispatcher":
        """Append a route and return the dispatcher for chaining.

        *pattern* is either a pattern string (with *handler*) or a full
        route spec; a *handler* given alongside a spec replaces the spec's
        own handler.
        """
        if isinstance(pattern, str):
            spec: Any = RouteSpec(pattern=pattern, handler=handler)  # type: ignore[arg-type]
        elif handler is not None:
            spec = _with_handler(pattern, handler)
        else:
            spec = pattern

        route = self.normalize_route(spec)
        self._routes.append(route)
        logger.debug("Added route #%d %r", len(self._routes) - 1, route.pattern)
        return self

    def route(self, pattern: str, url_suffix: str | None = None) -> Callable[[Handler], Handler]:
        """Decorator form of :meth:`add`.

        ::

            @dispatcher.route("/<slug>", url_suffix=".html")
            def page(params):
                ...
        """

        def decorator(func: Handler) -> Handler:
            self.add(RouteSpec(pattern=pattern, handler=func, url_suffix=url_suffix))
            return func

        return decorator

    # -- Matching -------------------------------------------------------

    def match(self, url: Any) -> RouteMatch | None:
        """Return the first route match for *url*, or ``None``.

        Raises ``InvalidUrlError`` if *url* is a string without a path.
        """
        for route in self._routes:
            params = route.matcher(url)
            if params is not None:
                logger.debug("Matched %r -> %r %r", url, route.pattern, params)
                return RouteMatch(params=params, handler=route.handler)
        logger.debug("No route matches %r", url)
        return None

    def dispatch(self, url: Any, context: object | None = None) -> Any:
        """Match *url* and call the handler with the extracted params.

        The handler is called as ``handler(params)``. While it runs,
        :func:`~dispatching.context.current_context` returns *context*, or
        this dispatcher when no context is given. Returns the handler's
        result, or ``None`` when no route matches.
        """
        found = self.match(url)
        if found is None:
            return None
        token = context_var.set(self if context is None else context)
        try:
            return found.handler(found.params)
        finally:
            context_var.reset(token)

    async def dispatch_async(self, url: Any, context: object | None = None) -> Any:
        """Like :meth:`dispatch`, awaiting the handler's result if needed."""
        found = self.match(url)
        if found is None:
            return None
        token = context_var.set(self if context is None else context)
        try:
            return await invoke(found.handler, found.params)
        finally:
            context_var.reset(token)

    # -- Introspection --------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Plain-data snapshot of the route table, for diagnostics only."""
        return {
            "strict": self.strict,
            "routes": [_describe(route) for route in self._routes],
        }

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(tuple(self._routes))

    def __repr__(self) -> str:
        patterns = ", ".join(repr(route.pattern) for route in self._routes)
        return f"Dispatcher([{patterns}])"


def _is_route_sequence(config: Any) -> bool:
    return isinstance(config, Sequence) and not isinstance(config, (str, bytes))


def _with_handler(spec: Any, handler: Handler) -> Any:
    """Return a copy of *spec* carrying *handler* instead of its own."""
    if isinstance(spec, RouteSpec):
        return RouteSpec(pattern=spec.pattern, handler=handler, url_suffix=spec.url_suffix)
    if isinstance(spec, Mapping):
        return {**spec, "fn": handler, "handler": handler}
    msg = f"Cannot attach a handler to route {spec!r}: expected a RouteSpec or route mapping"
    raise InvalidRouteError(msg)


def handler_name(handler: Handler) -> str:
    """Best-effort dotted name for a handler."""
    module = getattr(handler, "__module__", None)
    name = getattr(handler, "__qualname__", None) or getattr(handler, "__name__", None)
    if name is None:
        return repr(handler)
    return f"{module}.{name}" if module else name


def _describe(route: Route) -> dict[str, Any]:
    matcher = route.matcher
    return {
        "pattern": route.pattern,
        "url_suffix": route.url_suffix,
        "pathname": (
            {"regex": matcher.pathname.regex.pattern, "names": list(matcher.pathname.names)}
            if matcher.pathname is not None
            else None
        ),
        "hash": (
            {"regex": matcher.hash.regex.pattern, "names": list(matcher.hash.names)}
            if matcher.hash is not None
            else None
        ),
        "handler": handler_name(route.handler),
    }
