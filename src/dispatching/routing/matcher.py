"""Route compiler — combine path, hash, and suffix rules into one matcher.

A pattern is split on its first ``#``: the part before is matched
against the URL pathname, the part after against the URL hash. Both must
match when both are present.
"""

import re
from dataclasses import dataclass
from typing import Any

from dispatching._internal.types import Params
from dispatching.routing.pattern import CompiledPattern, extract_pattern_references
from dispatching.url import normalize_url

# ".html", ".json", ".-" at the very end of the pathname
_SUFFIX_RE = re.compile(r"\.(\w+|-)\Z", re.ASCII)


@dataclass(frozen=True, slots=True)
class UrlMatcher:
    """Compiled matcher for a single route.

    Calling it with a URL returns the extracted parameters, or ``None``
    when the URL does not match. ``{}`` is a successful match.
    """

    pathname: CompiledPattern | None = None
    hash: CompiledPattern | None = None
    url_suffix: str | None = None

    def __call__(self, url: Any) -> Params | None:
        parsed = normalize_url(url)
        pathname = parsed.pathname
        suffix = None

        m = _SUFFIX_RE.search(pathname)
        if m is not None:
            suffix = pathname[m.start() :]
            pathname = pathname[: m.start()]

        if self.url_suffix and suffix != self.url_suffix:
            return None

        params: Params = {}

        if self.pathname is not None:
            found = self.pathname.match(pathname)
            if found is None:
                return None
            params.update(found)

        if self.hash is not None:
            found = self.hash.match(parsed.hash)
            if found is None:
                return None
            params.update(found)

        return params


def split_pattern(pattern: str) -> tuple[str, str]:
    """Split *pattern* on its first ``#`` into ``(path, hash)``."""
    path, _, hash_part = pattern.partition("#")
    return path, hash_part


def normalize_suffix(url_suffix: str | None) -> str | None:
    """Return *url_suffix* unchanged, or ``None`` when unset.

    The suffix is compared verbatim with the one stripped from the URL,
    dot included, so ``"html"`` never matches; write ``".html"``.
    """
    return url_suffix or None


def process_pattern(pattern: str, url_suffix: str | None = None) -> UrlMatcher:
    """Compile a route pattern into a :class:`UrlMatcher`.

    *url_suffix*, when given, must equal the URL's trailing suffix
    exactly, leading dot included (``".html"``, not ``"html"``).

    Examples::

        >>> matcher = process_pattern("/<controller>/<action>")
        >>> matcher("https://example.com/users/list?page=2")
        {'controller': 'users', 'action': 'list'}
        >>> matcher("/users") is None
        True
        >>> process_pattern("/<page>", url_suffix=".html")("/about.html")
        {'page': 'about'}
    """
    path, hash_part = split_pattern(pattern)
    return UrlMatcher(
        pathname=extract_pattern_references(path, "/") if path else None,
        hash=extract_pattern_references(hash_part, "#") if hash_part else None,
        url_suffix=normalize_suffix(url_suffix),
    )
