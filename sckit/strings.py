"""String helpers with a fixed length limit and tokenising."""

from __future__ import annotations

import re
from collections.abc import Iterator

MAX_LEN = 2**32 - 1 - 4 - 1
"""Longest string the helpers will produce."""


class StringLimitError(ValueError):
    """Raised when a result would be longer than ``MAX_LEN``."""


def _check_length(length: int) -> None:
    if length > MAX_LEN:
        raise StringLimitError(
            f"string of length {length} exceeds the limit of {MAX_LEN}"
        )


def create(text: str | None) -> str | None:
    """Return ``text`` after checking it against the length limit.

    ``None`` is passed through unchanged.
    """
    if text is None:
        return None
    _check_length(len(text))
    return text


def create_len(text: str | None, length: int) -> str | None:
    """Return the first ``length`` characters of ``text``."""
    if text is None:
        return None
    if length < 0 or length > len(text):
        raise ValueError(
            f"length {length} is out of range for a string of {len(text)}"
        )
    return text[:length]


def create_fmt(fmt: str, *args: object) -> str:
    """Build a string with printf-style formatting."""
    result = fmt % args
    _check_length(len(result))
    return result


def append(text: str | None, suffix: str) -> str:
    """Return ``text`` followed by ``suffix``; ``None`` acts as empty."""
    if text is None:
        result = create(suffix)
        assert result is not None
        return result
    if len(suffix) > MAX_LEN - len(text):
        raise StringLimitError(
            f"appending {len(suffix)} characters exceeds the limit of {MAX_LEN}"
        )
    return text + suffix


def trim(text: str | None, chars: str) -> str | None:
    """Strip any of ``chars`` from both ends of ``text``."""
    if text is None:
        return None
    return text.strip(chars)


def substring(text: str | None, start: int, end: int) -> str:
    """Return ``text[start:end]``, rejecting bounds outside the string."""
    if text is None:
        raise ValueError("cannot take a substring of None")
    if not 0 <= start <= end <= len(text):
        raise ValueError(
            f"range [{start}, {end}) is invalid for a string of {len(text)}"
        )
    return text[start:end]


def replace(text: str | None, old: str, new: str) -> str | None:
    """Replace every non-overlapping occurrence of ``old`` with ``new``."""
    if text is None:
        return None
    if not old:
        raise ValueError("the string to replace must not be empty")
    count = text.count(old)
    if count == 0:
        return text
    _check_length(len(text) + count * (len(new) - len(old)))
    return text.replace(old, new)


def tokens(text: str | None, delim: str) -> Iterator[str]:
    """Yield the pieces of ``text`` split at any character of ``delim``.

    Adjacent delimiters produce empty tokens; ``None`` yields nothing.
    """
    if text is None:
        return
    if not delim:
        yield text
        return
    yield from re.split(f"[{re.escape(delim)}]", text)