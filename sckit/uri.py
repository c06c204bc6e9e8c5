"""Splitting URIs into their RFC 3986 components."""

from __future__ import annotations

import re
from dataclasses import dataclass

_MAX_PORT = 65536
_PORT_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)(\d+)")


class UriError(ValueError):
    """Raised when a string cannot be parsed as a URI."""


@dataclass(frozen=True)
class Uri:
    """A parsed URI; absent parts are empty strings."""

    text: str
    scheme: str
    userinfo: str
    host: str
    port: str
    path: str
    query: str
    fragment: str

    def __str__(self) -> str:
        return self.text


def _find_any(text: str, chars: str, start: int) -> int:
    """Index of the first character of ``chars`` at or after ``start``."""
    hits = (text.find(c, start) for c in chars)
    return min((i for i in hits if i != -1), default=len(text))


def _parse_port(text: str, start: int) -> int:
    """Validate the port number at ``start`` and return where it ends."""
    match = _PORT_NUMBER.match(text, start)
    if match is None:
        return start
    sign, digits = match.groups()
    value = int(digits)
    if (sign == "-" and value != 0) or value > _MAX_PORT:
        raise UriError(f"invalid port in {text!r}")
    return match.end()


def parse(text: str | None) -> Uri:
    """Parse ``text`` into a :class:`Uri`, raising :class:`UriError`."""
    if text is None:
        raise UriError("no URI given")
    colon = text.find(":")
    if colon == -1:
        raise UriError(f"missing scheme in {text!r}")

    scheme = text[:colon]
    pos = colon + 1
    has_authority = text.startswith("//", pos)
    userinfo = host = port = query = fragment = ""
    has_userinfo = has_port = has_query = False

    if has_authority:
        pos += 2
        at = text.find("@", pos)
        if at != -1:
            userinfo = text[pos:at]
            has_userinfo = True
            pos = at + 1

        if text.startswith("[", pos):
            close = text.find("]", pos)
            if close == -1:
                raise UriError(f"unterminated IP literal in {text!r}")
            end = close + 1
        else:
            end = _find_any(text, ":/?#", pos)
        host = text[pos:end]
        pos = end

        port_colon = text.find(":", pos)
        if port_colon != -1:
            if port_colon + 1 == len(text):
                raise UriError(f"empty port in {text!r}")
            port_end = _parse_port(text, port_colon + 1)
            port = text[port_colon + 1 : port_end]
            has_port = True
            pos = port_end

    path_end = _find_any(text, "?#", pos)
    path = text[pos:path_end]
    pos = path_end

    question = text.find("?", pos)
    if question != -1:
        query_end = _find_any(text, "#", question)
        query = text[question + 1 : query_end]
        has_query = True
        pos = query_end

    has_fragment = text.startswith("#", pos)
    if has_fragment:
        fragment = text[pos + 1 :]

    full = "".join(
        [
            scheme,
            ":",
            "//" if has_authority else "",
            userinfo + "@" if has_userinfo else "",
            host,
            ":" + port if has_port else "",
            path,
            "?" + query if has_query else "",
            "#" + fragment if has_fragment else "",
        ]
    )
    return Uri(
        text=full,
        scheme=scheme,
        userinfo=userinfo,
        host=host,
        port=port,
        path=path,
        query=query,
        fragment=fragment,
    )