"""Route, RouteSpec, and RouteMatch frozen dataclasses."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from dispatching._internal.types import Handler, Params
from dispatching.routing.matcher import UrlMatcher


@dataclass(frozen=True, slots=True)
class RouteSpec:
    """A route as written by the caller, before compilation.

    Either of the explicit constructors reads better than the bare
    dataclass at call sites::

        RouteSpec.pair("/<id>", show)
        RouteSpec.full("/<page>", render, url_suffix=".html")
    """

    pattern: str
    handler: Handler
    url_suffix: str | None = None  # compared verbatim, dot included

    @classmethod
    def pair(cls, pattern: str, handler: Handler) -> "RouteSpec":
        return cls(pattern=pattern, handler=handler)

    @classmethod
    def full(cls, pattern: str, handler: Handler, url_suffix: str | None = None) -> "RouteSpec":
        return cls(pattern=pattern, handler=handler, url_suffix=url_suffix)


@dataclass(frozen=True, slots=True)
class Route:
    """A compiled route. Immutable; re-register to change it."""

    matcher: UrlMatcher
    handler: Handler
    pattern: str
    url_suffix: str | None = None  # compared verbatim, dot included

    def __call__(self, url: Any) -> Params | None:
        return self.matcher(url)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful match.

    Unpacks like a pair: ``params, handler = dispatcher.match(url)``.
    """

    params: Params
    handler: Handler

    def __iter__(self) -> Iterator[Any]:
        yield self.params
        yield self.handler
