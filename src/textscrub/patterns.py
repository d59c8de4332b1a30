"""Pattern matchers for structured text: links, IPs, emails, custom.

The built-in expressions are compiled once at import and shared by every
request.  None of them can match a run of mask characters, so masking
twice with a built-in matcher changes nothing the second time.  Custom
patterns carry no such guarantee.
"""

from __future__ import annotations
import re

from .errors import InvalidPatternError, MissingArgumentError
from .types import MatchKind

# Link — http(s) URLs with an optional path/query tail
LINK_PATTERN = re.compile(
    r"https?:\/\/(www\.)?[-a-zA-Z0-9@:%._\+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b"
    r"([-a-zA-Z0-9()!@:%_\+.~#?&\/\/=]*)"
)

# IPv4 dotted quad
IP_PATTERN = re.compile(
    r"(\b25[0-5]|\b2[0-4][0-9]|\b[01]?[0-9][0-9]?)"
    r"(\.(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)){3}"
)

# Email — anything@anything.anything without whitespace
EMAIL_PATTERN = re.compile(
    r"[^@ \t\r\n]+@[^@ \t\r\n]+\.[^@ \t\r\n]+"
)

_BUILTIN: dict[MatchKind, re.Pattern[str]] = {
    MatchKind.LINK: LINK_PATTERN,
    MatchKind.IP: IP_PATTERN,
    MatchKind.EMAIL: EMAIL_PATTERN,
}


def compile_custom(pattern: str) -> re.Pattern[str]:
    """Compile a caller-supplied expression, raising InvalidPatternError."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from None


def get_matcher(kind: MatchKind, custom: re.Pattern[str] | str | None = None) -> re.Pattern[str]:
    """Return the matcher for ``kind``.

    ``custom`` is only consulted for MatchKind.CUSTOM and may be either a
    source string or an already compiled pattern.
    """
    if kind is not MatchKind.CUSTOM:
        return _BUILTIN[kind]
    if custom is None:
        raise MissingArgumentError()
    if isinstance(custom, re.Pattern):
        return custom
    return compile_custom(custom)


def match_spans(matcher: re.Pattern[str], text: str) -> list[tuple[int, int]]:
    """Non-empty, non-overlapping match spans, left to right."""
    return [m.span() for m in matcher.finditer(text) if m.end() > m.start()]
