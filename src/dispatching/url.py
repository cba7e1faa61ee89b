"""URL normalization — split a URL string into pathname, search, and hash.

Accepts absolute URLs (``https://example.com/a?b#c``) and root-relative
ones (``/a?b#c``). The scheme and host are tolerated and discarded;
routing only ever looks at the path and the fragment.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from dispatching.errors import InvalidUrlError

_URL_RE = re.compile(
    r"""
    (?:[A-Za-z][A-Za-z0-9+.\-]*://[^/]+)?  # optional scheme://host
    (?P<pathname>/[^?\#]*)
    (?P<search>\?[^\#]*)?
    (?P<hash>\#.*)?
    """,
    re.VERBOSE | re.DOTALL,
)


@runtime_checkable
class UrlLike(Protocol):
    """Anything already split into the three components routing needs."""

    pathname: str
    search: str
    hash: str


@dataclass(frozen=True, slots=True)
class ParsedUrl:
    """A URL split into routable components.

    ``search`` keeps its leading ``?`` and ``hash`` its leading ``#``;
    both are empty strings when absent.
    """

    pathname: str
    search: str = ""
    hash: str = ""


def normalize_url(url: Any) -> UrlLike:
    """Parse *url* into a :class:`ParsedUrl`.

    A mapping with a ``pathname`` key (and optional ``search`` and
    ``hash``) is converted to a ``ParsedUrl``. Any other non-string input
    is assumed to be pre-parsed and is returned unchanged, so callers can
    hand in a ``ParsedUrl`` (or any object with ``pathname``, ``search``
    and ``hash`` attributes) to skip parsing.

    Examples::

        >>> normalize_url("https://example.com/a/b?x=1#top")
        ParsedUrl(pathname='/a/b', search='?x=1', hash='#top')
        >>> normalize_url({"pathname": "/", "hash": "#top"})
        ParsedUrl(pathname='/', search='', hash='#top')

    Raises ``InvalidUrlError`` if the path does not start with ``/``, or
    if a mapping has no ``pathname``.
    """
    if isinstance(url, Mapping):
        pathname = url.get("pathname")
        if not isinstance(pathname, str):
            raise InvalidUrlError(url)
        return ParsedUrl(
            pathname=pathname,
            search=url.get("search") or "",
            hash=url.get("hash") or "",
        )
    if not isinstance(url, str):
        return url

    match = _URL_RE.fullmatch(url)
    if match is None:
        raise InvalidUrlError(url)
    return ParsedUrl(
        pathname=match["pathname"],
        search=match["search"] or "",
        hash=match["hash"] or "",
    )
