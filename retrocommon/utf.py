"""UTF-8, UTF-16 and UTF-32 conversion helpers working on raw code units."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional, Union

__all__ = [
    "utf8_conv_utf32",
    "utf16_conv_utf8",
    "utf8cpy",
    "utf8skip",
    "utf8len",
    "utf8_walk",
    "utf16_to_char_string",
    "utf8_to_local_string",
    "local_to_utf8_string",
    "utf8_to_utf16_string",
    "utf16_to_utf8_string",
]

BytesLike = Union[bytes, bytearray, memoryview]

_UTF8_LIMITS = (0xC0, 0xE0, 0xF0, 0xF8, 0xFC)


def _cstr(data: Optional[BytesLike]) -> bytes:
    """Return ``data`` as bytes, cut at the first NUL byte."""
    if data is None:
        return b""
    raw = bytes(data)
    end = raw.find(b"\0")
    return raw if end < 0 else raw[:end]


def _is_continuation(byte: int) -> bool:
    return (byte & 0xC0) == 0x80


def _leading_ones(byte: int) -> int:
    ones = 0
    while byte & 0x80:
        ones += 1
        byte = (byte << 1) & 0xFF
    return ones


def utf8_conv_utf32(data: BytesLike, max_chars: int) -> list[int]:
    """Decode up to ``max_chars`` code points from UTF-8 ``data``.

    Decoding stops quietly at an invalid lead byte or at a sequence that
    runs past the end of the input; the code points decoded so far are
    returned.
    """
    raw = bytes(data)
    result: list[int] = []
    pos = 0
    while pos < len(raw) and len(result) < max_chars:
        first = raw[pos]
        ones = _leading_ones(first)
        if ones > 6 or ones == 1:
            break
        extra = ones - 1 if ones else 0
        if 1 + extra > len(raw) - pos:
            break
        code = (first & ((1 << (7 - ones)) - 1)) << (6 * extra)
        for index, byte in enumerate(raw[pos + 1 : pos + 1 + extra]):
            code |= (byte & 0x3F) << ((extra - 1 - index) * 6)
        result.append(code)
        pos += 1 + extra
    return result


def utf16_conv_utf8(units: Iterable[int]) -> bytes:
    """Encode a sequence of UTF-16 code units as UTF-8.

    Raises ValueError on an unpaired surrogate or a unit outside 0..0xFFFF.
    """
    out = bytearray()
    stream = iter(units)
    for value in stream:
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"invalid UTF-16 code unit {value:#x}")
        if value < 0x80:
            out.append(value)
            continue
        if 0xD800 <= value < 0xE000:
            if value >= 0xDC00:
                raise ValueError(f"unexpected low surrogate {value:#x}")
            low = next(stream, None)
            if low is None:
                raise ValueError("high surrogate at end of input")
            if not 0xDC00 <= low < 0xE000:
                raise ValueError(f"high surrogate followed by {low:#x}")
            value = (((value - 0xD800) << 10) | (low - 0xDC00)) + 0x10000
        num_adds = next(
            (n for n in range(1, 5) if value < (1 << (n * 5 + 6))), 5
        )
        out.append((_UTF8_LIMITS[num_adds - 1] + (value >> (6 * num_adds))) & 0xFF)
        for shift in range(num_adds - 1, -1, -1):
            out.append(0x80 + ((value >> (6 * shift)) & 0x3F))
    return bytes(out)


def utf8cpy(data: Optional[BytesLike], d_len: int, chars: int) -> bytes:
    """Copy at most ``chars`` UTF-8 characters into a buffer of ``d_len`` bytes.

    The copy never exceeds ``d_len - 1`` bytes (room for the terminator) and
    never ends in the middle of a character.
    """
    if d_len < 1:
        raise ValueError("destination size must be at least 1")
    raw = _cstr(data)
    if not raw:
        return b""

    def byte_at(index: int) -> int:
        return raw[index] if index < len(raw) else 0

    pos = 0
    while byte_at(pos) and chars > 0:
        chars -= 1
        pos += 1
        while _is_continuation(byte_at(pos)):
            pos += 1

    if pos > d_len - 1:
        pos = d_len - 1
        while pos > 0 and _is_continuation(byte_at(pos)):
            pos -= 1
    return raw[:pos]


def utf8skip(data: BytesLike, chars: int) -> int:
    """Return the byte offset reached after skipping ``chars`` characters."""
    raw = _cstr(data)
    pos = 0
    for _ in range(chars):
        if pos >= len(raw):
            raise IndexError("cannot skip past the end of the string")
        pos += 1
        while pos < len(raw) and _is_continuation(raw[pos]):
            pos += 1
    return pos


def utf8len(data: Optional[BytesLike]) -> int:
    """Count the UTF-8 characters in ``data`` up to the first NUL byte."""
    return sum(1 for byte in _cstr(data) if not _is_continuation(byte))


def utf8_walk(data: BytesLike, pos: int) -> tuple[int, int]:
    """Decode the character starting at ``pos``.

    Returns the code point and the offset of the next character. The bytes
    are not validated beyond their count.
    """
    raw = bytes(data)
    if not 0 <= pos < len(raw):
        raise IndexError("position outside the data")
    first = raw[pos]
    pos += 1
    if first < 0x80:
        return first, pos

    if first >= 0xF0:
        needed = 3
    elif first >= 0xE0:
        needed = 2
    else:
        needed = 1
    if pos + needed > len(raw):
        raise ValueError("truncated UTF-8 sequence")

    code = 0
    for byte in raw[pos : pos + needed]:
        code = (code << 6) | (byte & 0x3F)
    pos += needed
    if needed == 3:
        return code | (first & 7) << 18, pos
    if needed == 2:
        return code | (first & 15) << 12, pos
    return code | (first & 31) << 6, pos


def _until_nul(units: Iterable[int]) -> list[int]:
    result: list[int] = []
    for unit in units:
        if unit == 0:
            break
        result.append(unit)
    return result


def utf16_to_char_string(units: Iterable[int], size: int) -> bytes:
    """Convert NUL-terminated UTF-16 units to UTF-8 bounded by ``size`` bytes.

    The result holds at most ``size - 1`` bytes. Raises ValueError when the
    input is not valid UTF-16.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    encoded = utf16_conv_utf8(_until_nul(units))
    if size == 0:
        return b""
    return encoded[: size - 1]


def utf8_to_local_string(text: Optional[str]) -> Optional[str]:
    """Return a copy of ``text`` in the local encoding, or None when empty."""
    if not text:
        return None
    return str(text)


def local_to_utf8_string(text: Optional[str]) -> Optional[str]:
    """Return a copy of ``text`` as UTF-8 text, or None when empty."""
    if not text:
        return None
    return str(text)


def utf8_to_utf16_string(text: Union[str, BytesLike, None]) -> Optional[list[int]]:
    """Convert UTF-8 text to a list of UTF-16 code units.

    Returns None for empty input. Raises ValueError (UnicodeDecodeError) when
    byte input is not valid UTF-8.
    """
    if text is None:
        return None
    if not isinstance(text, str):
        text = _cstr(text).decode("utf-8")
    if not text:
        return None
    encoded = text.encode("utf-16-le")
    return [
        int.from_bytes(encoded[i : i + 2], "little") for i in range(0, len(encoded), 2)
    ]


def utf16_to_utf8_string(text: Union[str, Sequence[int], None]) -> Optional[bytes]:
    """Convert UTF-16 code units (or a str) to UTF-8 bytes.

    Returns None for empty input. Raises ValueError on invalid input.
    """
    if text is None:
        return None
    if isinstance(text, str):
        if not text:
            return None
        return text.encode("utf-8")
    units = _until_nul(text)
    if not units:
        return None
    return utf16_conv_utf8(units)