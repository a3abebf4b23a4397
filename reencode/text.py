"""String, list and regular-expression helpers."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable

_ELLIPSIS = "... "
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def join(items: Iterable[str], delim: str = "") -> str:
    """Join strings with a delimiter placed between consecutive items."""
    return delim.join(items)


def splitv(text: str, delim: str = "") -> list[str]:
    """Split ``text`` on every occurrence of ``delim``.

    The last piece is always included, so an input without the delimiter
    gives a one-element list.
    """
    if not delim:
        raise ValueError("delimiter must not be empty")
    return text.split(delim)


def is_match(text: str, pattern: str | re.Pattern[str], flags: int = 0) -> bool:
    """Return True if ``pattern`` is found anywhere in ``text``."""
    return _compile(pattern, flags).search(text) is not None


def first_match(
    text: str, pattern: str | re.Pattern[str], flags: int = 0
) -> str:
    """Return the first capture group of the first match, or an empty string."""
    match = _compile(pattern, flags).search(text)
    if match is None or match.re.groups < 1:
        return ""
    return match.group(1) or ""


def all_matches(text: str, pattern: str | re.Pattern[str]) -> list[str]:
    """Return the whole text of every non-overlapping match."""
    return [match.group(0) for match in _compile(pattern, 0).finditer(text)]


def all_groups(
    text: str, pattern: str | re.Pattern[str], flags: int = 0
) -> list[str]:
    """Return every capture group of every match, in order.

    Groups that did not take part in a match are given as empty strings.
    """
    return [
        group or ""
        for match in _compile(pattern, flags).finditer(text)
        for group in match.groups()
    ]


def truncate(text: str, length: int = 25) -> str:
    """Shorten ``text`` to ``length`` characters by cutting out its middle."""
    if len(text) <= length:
        return text
    if length < len(_ELLIPSIS):
        raise ValueError(f"length must be at least {len(_ELLIPSIS)}")
    room = (length - len(_ELLIPSIS)) / 2.0
    left = math.ceil(room)
    right = math.floor(room)
    return text[:left] + _ELLIPSIS + text[len(text) - right:]


def replace_all(text: str, old: str, new: str) -> str:
    """Replace every occurrence of the literal ``old`` with ``new``."""
    if not old:
        raise ValueError("text to replace must not be empty")
    return text.replace(old, new)


def replace_pattern(text: str, pattern: str | re.Pattern[str], new: str) -> str:
    """Replace every match of ``pattern`` with the literal string ``new``."""
    return _compile(pattern, 0).sub(lambda _match: new, text)


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters of ``text``, leaving other characters."""
    return text.translate(_ASCII_LOWER)


def format_number(number: float, digits: int) -> str:
    """Format ``number`` in fixed notation with ``digits`` decimals."""
    if digits < 0:
        raise ValueError("digits must not be negative")
    return f"{number:.{digits}f}"


def _compile(pattern: str | re.Pattern[str], flags: int) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        if flags:
            return re.compile(pattern.pattern, pattern.flags | flags)
        return pattern
    return re.compile(pattern, flags)