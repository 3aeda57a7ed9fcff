"""Small string helpers used when reading XPM text."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[ \t]+")


def str_to_wordtab(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs only."""
    return [word for word in _SEPARATORS.split(text) if word]


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("search string must not be empty")


def find(text: str, needle: str) -> int:
    """Return the position of the first ``needle`` in ``text``, or -1."""
    _check_needle(needle)
    return text.find(needle)


def find_outside_quotes(text: str, needle: str) -> int:
    """Return the first position of ``needle`` not inside double quotes, or -1.

    Each double quote seen toggles the quoted state; a match may start on
    the quote that closes a quoted run.
    """
    _check_needle(needle)
    inside = False
    for pos, char in enumerate(text[: len(text) - len(needle) + 1]):
        if char == '"':
            inside = not inside
        if not inside and text.startswith(needle, pos):
            return pos
    return -1