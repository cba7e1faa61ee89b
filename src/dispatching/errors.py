"""Dispatching exception hierarchy.

Shared across the URL normalizer, pattern compiler, and dispatcher so
every module raises and catches the same types.

A URL that matches no route is not an error: ``match()`` and
``dispatch()`` return ``None`` for that case.
"""


class DispatchingError(Exception):
    """Base for all dispatching-specific errors."""


class InvalidUrlError(DispatchingError, ValueError):
    """Raised when a URL does not fit ``[scheme://host]/path[?query][#hash]``."""

    def __init__(self, url: object) -> None:
        self.url = url
        super().__init__(f"Cannot normalize invalid URL: {url!r}")


class InvalidRouteError(DispatchingError, TypeError):
    """Raised when a route specification cannot be normalized.

    Raised at registration time, so the route table never holds an
    unusable entry.
    """


class PatternError(DispatchingError, ValueError):
    """Raised when a route pattern compiles to misaligned capture groups.

    Each placeholder records exactly one parameter name, so a custom
    subpattern such as ``<x:(a)(b)>`` cannot be bound and is rejected.
    """


class ConfigurationError(DispatchingError):
    """Raised when ``configure()`` receives a shape it does not understand."""
