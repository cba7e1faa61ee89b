r"""Pattern compiler — turn a route pattern fragment into an anchored regex.

A fragment is literal text interspersed with placeholders::

    /users/<id>              -> ^/users/([^\/]+)[/]?$        names=("id",)
    /posts/<slug:[a-z-]+>    -> ^/posts/([a-z-]+)[/]?$       names=("slug",)
    #<tab:(\w+)>             -> ^#(\w+)[/]?$                 names=("tab",)

Every placeholder contributes exactly one capture group, so group *n*
always binds to ``names[n - 1]``.
"""

import logging
import re
from dataclasses import dataclass

from dispatching.errors import PatternError

logger = logging.getLogger("dispatching.routing")

# prefix literal, name, optional ":subpattern", trailing literal
_REFERENCE_RE = re.compile(r"([^<]+)?<(\w+)(:([^>]+))?>([^<]+)?", re.ASCII)

# Characters that are special in regex syntax, plus whitespace
_ESCAPER_RE = re.compile(r"[-\[\]{}()*+?.,\\^$|#\s]")

DEFAULT_GROUP = r"([^\/]+)"


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """An anchored regex plus the parameter name of each capture group."""

    regex: re.Pattern[str]
    names: tuple[str, ...]

    def match(self, value: str) -> dict[str, str] | None:
        """Apply the regex to the whole of *value* and bind groups to names."""
        m = self.regex.fullmatch(value)
        if m is None:
            return None
        return dict(zip(self.names, m.groups(), strict=True))


def escape_literal(text: str) -> str:
    """Backslash-escape every regex-special character in *text*."""
    return _ESCAPER_RE.sub(r"\\\g<0>", text)


def trim(text: str, chars: str = " ") -> str:
    """Strip any of *chars* from both ends of *text*."""
    return text.strip(chars)


def is_wrapped(subpattern: str) -> bool:
    """Return True if *subpattern* is one capturing group from end to end.

    ``(\\w+)`` is wrapped; ``(a)(b)``, ``(a)|(b)`` and ``(?:a)`` are not.
    """
    if not (subpattern.startswith("(") and subpattern.endswith(")")):
        return False
    if subpattern.startswith("(?"):
        return False

    depth = 0
    in_class = False
    i = 0
    last = len(subpattern) - 1
    while i <= last:
        char = subpattern[i]
        if char == "\\":
            i += 2
            continue
        if in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            in_class = True
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0 and i != last:
                return False
        i += 1
    return depth == 0


def _group_for(name: str, subpattern: str | None) -> str:
    """Build the single capture group for one placeholder."""
    if subpattern is None:
        return DEFAULT_GROUP

    if is_wrapped(subpattern):
        group = subpattern
    else:
        group = f"({subpattern})"

    groups = re.compile(group).groups
    if groups != 1:
        msg = (
            f"Placeholder <{name}:{subpattern}> compiles to {groups} capture groups. "
            "Use non-capturing groups (?:...) inside custom subpatterns."
        )
        raise PatternError(msg)
    return group


def extract_pattern_references(pattern: str, character: str) -> CompiledPattern:
    """Compile one pattern fragment into a :class:`CompiledPattern`.

    *character* is the delimiter the fragment belongs to: ``"/"`` for the
    path, ``"#"`` for the hash. It is trimmed from both ends of the
    fragment and then required at the start of the matched component.
    The compiled regex always matches the whole component and tolerates
    one trailing ``/``.

    Raises ``PatternError`` if a custom subpattern would add more than
    one capture group. Invalid subpattern syntax raises ``re.error``.
    """
    fragment = trim(pattern, character)
    parts: list[str] = []
    names: list[str] = []

    for m in _REFERENCE_RE.finditer(fragment):
        prefix, name, _, subpattern, suffix = m.groups()
        parts.append(escape_literal(prefix or ""))
        parts.append(_group_for(name, subpattern))
        parts.append(escape_literal(suffix or ""))
        names.append(name)

    if not names:
        parts.append(escape_literal(fragment))

    regex = re.compile("^" + character + "".join(parts) + "[/]?$")
    if regex.groups != len(names):
        msg = f"Pattern {pattern!r} has {regex.groups} capture groups for {len(names)} names"
        raise PatternError(msg)

    logger.debug("Compiled %r -> %s %r", pattern, regex.pattern, names)
    return CompiledPattern(regex=regex, names=tuple(names))
