"""Helpers for splitting strings and copying string lists."""

from __future__ import annotations

from collections.abc import Iterable


def split_string(string: str, delim: str) -> list[str]:
    """Split ``string`` on every occurrence of ``delim``.

    The text after the last delimiter is always kept, even when empty.
    Raises ``ValueError`` for an empty delimiter or a string shorter than it.
    """
    if not delim:
        raise ValueError("delimiter must not be empty")
    if len(string) < len(delim):
        raise ValueError("string is shorter than the delimiter")
    return string.split(delim)


def copy_strings(array: Iterable[str], limit: int = 0) -> list[str]:
    """Return a copy of ``array``.

    With a positive ``limit`` the copy stops once ``limit + 1`` items
    have been taken.
    """
    items = list(array)
    if limit > 0:
        return items[: limit + 1]
    return items