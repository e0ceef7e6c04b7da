"""Fixed-width bit sets stored as 32-bit words."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["RetroBits", "bits_or_bits", "bits_clear_bits", "bits_any_set"]

_WORD_MASK = 0xFFFFFFFF


class RetroBits:
    """A set of booleans packed into 32-bit words (256 bits by default)."""

    def __init__(self, width: int = 256) -> None:
        if width <= 0 or width % 32:
            raise ValueError("width must be a positive multiple of 32")
        self.width = width
        self.data = [0] * (width // 32)

    def _locate(self, bit: int) -> tuple[int, int]:
        if not 0 <= bit < self.width:
            raise IndexError(f"bit {bit} out of range for {self.width}-bit set")
        return bit >> 5, 1 << (bit & 31)

    def set(self, bit: int) -> None:
        """Set ``bit``."""
        word, mask = self._locate(bit)
        self.data[word] |= mask

    def clear(self, bit: int) -> None:
        """Clear ``bit``."""
        word, mask = self._locate(bit)
        self.data[word] &= ~mask & _WORD_MASK

    def get(self, bit: int) -> int:
        """Return ``bit`` as 0 or 1."""
        word, mask = self._locate(bit)
        return 1 if self.data[word] & mask else 0

    def clear_all(self) -> None:
        """Clear every bit."""
        self.data = [0] * len(self.data)

    def copy16(self, bits: int) -> None:
        """Replace the contents with the low 16 bits of ``bits``."""
        self.clear_all()
        self.data[0] = bits & 0xFFFF

    def copy32(self, bits: int) -> None:
        """Replace the contents with the low 32 bits of ``bits``."""
        self.clear_all()
        self.data[0] = bits & _WORD_MASK

    def copy64(self, bits: int) -> None:
        """Replace the contents with the low 64 bits of ``bits``."""
        if len(self.data) < 2:
            raise ValueError("set is too narrow to hold 64 bits")
        self.clear_all()
        self.data[0] = bits & _WORD_MASK
        self.data[1] = (bits >> 32) & _WORD_MASK

    def any_set(self) -> bool:
        """True if at least one bit is set."""
        return bits_any_set(self.data, len(self.data))


def _check_count(count: int, *sequences: Sequence[int]) -> None:
    if count < 0 or any(count > len(seq) for seq in sequences):
        raise IndexError("count exceeds the number of words")


def bits_or_bits(a: Sequence[int], b: Sequence[int], count: int) -> list[int]:
    """Return ``a`` with its first ``count`` words OR-ed with those of ``b``."""
    _check_count(count, a, b)
    merged = [(x | y) & _WORD_MASK for x, y in zip(a[:count], b[:count])]
    return merged + list(a[count:])


def bits_clear_bits(a: Sequence[int], b: Sequence[int], count: int) -> list[int]:
    """Return ``a`` with the bits set in ``b`` cleared from its first ``count`` words."""
    _check_count(count, a, b)
    cleared = [x & ~y & _WORD_MASK for x, y in zip(a[:count], b[:count])]
    return cleared + list(a[count:])


def bits_any_set(words: Sequence[int], count: int) -> bool:
    """True if any of the first ``count`` words is non-zero."""
    _check_count(count, words)
    return any(words[:count])