"""Portable string helpers: bounded copies, case-insensitive search and tokenising."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO, Union

__all__ = [
    "strlcpy",
    "strlcat",
    "strldup",
    "strcasestr",
    "strcasecmp",
    "isblank",
    "strtok",
    "fopen_utf8",
]


def _ascii_lower(ch: str) -> str:
    """Lower-case a single character the way the C locale does (ASCII only)."""
    if "A" <= ch <= "Z":
        return chr(ord(ch) + 32)
    return ch


def strlcpy(source: str, size: int) -> tuple[str, int]:
    """Copy ``source`` into a buffer of ``size`` characters.

    Returns the copy (at most ``size - 1`` characters, leaving room for the
    terminator) and the full length of ``source``, which lets callers detect
    truncation.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(source)
    return source[: size - 1], len(source)


def strlcat(dest: str, source: str, size: int) -> tuple[str, int]:
    """Append ``source`` to ``dest`` within a buffer of ``size`` characters.

    Returns the combined string and the length the result would have had
    without truncation (``len(dest) + len(source)``).
    """
    if size < 0:
        raise ValueError("size must not be negative")
    length = len(dest)
    remaining = 0 if length > size else size - length
    tail, tail_len = strlcpy(source, remaining)
    return dest + tail, length + tail_len


def strldup(s: str, n: int) -> str:
    """Duplicate ``s`` into a buffer bounded by ``n``, keeping at most ``n - 1`` characters."""
    copy, _ = strlcpy(s, n)
    return copy


def strcasestr(haystack: str, needle: str) -> int | None:
    """Return the index of the first case-insensitive match of ``needle``, or None."""
    needle_len = len(needle)
    hay_len = len(haystack)
    if needle_len > hay_len:
        return None
    folded_needle = "".join(_ascii_lower(c) for c in needle)
    folded_hay = "".join(_ascii_lower(c) for c in haystack)
    for start in range(hay_len - needle_len + 1):
        if folded_hay[start : start + needle_len] == folded_needle:
            return start
    return None


def strcasecmp(a: str, b: str) -> int:
    """Compare two strings ignoring ASCII case.

    Returns the difference of the first pair of differing (lower-cased)
    character codes, or zero when the strings are equal.
    """
    for ca, cb in zip(a, b):
        la, lb = ord(_ascii_lower(ca)), ord(_ascii_lower(cb))
        if la != lb:
            return la - lb
    tail_a = ord(_ascii_lower(a[len(b)])) if len(a) > len(b) else 0
    tail_b = ord(_ascii_lower(b[len(a)])) if len(b) > len(a) else 0
    return tail_a - tail_b


def isblank(c: Union[str, int]) -> bool:
    """True for a space or a horizontal tab; accepts a character or a code point."""
    if isinstance(c, int):
        return c in (ord(" "), ord("\t"))
    return c in (" ", "\t")


def strtok(text: str, delim: str) -> Iterator[str]:
    """Yield the non-empty tokens of ``text`` separated by any character in ``delim``."""
    if delim is None:
        raise ValueError("delimiter set must be given")
    token: list[str] = []
    for ch in text:
        if ch in delim:
            if token:
                yield "".join(token)
                token = []
        else:
            token.append(ch)
    if token:
        yield "".join(token)


def fopen_utf8(filename: Union[str, bytes, os.PathLike], mode: str) -> IO:
    """Open a file whose name is given in UTF-8.

    Byte names are decoded as UTF-8; text modes read and write UTF-8.
    Raises OSError when the file cannot be opened.
    """
    if isinstance(filename, bytes):
        filename = filename.decode("utf-8")
    if "b" in mode:
        return open(filename, mode)
    return open(filename, mode, encoding="utf-8")