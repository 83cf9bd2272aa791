"""A growable set of bits stored in 64-bit words."""

from __future__ import annotations

from gpbot.errors import InvalidArgsError

_WORD_BITS = 64
_WORD_MASK = (1 << _WORD_BITS) - 1


class Bitset:
    """Bit n lives in word n // 64 at bit position n % 64."""

    def __init__(self, words: list[int] | None = None) -> None:
        self.words = [w & _WORD_MASK for w in words] if words else []

    def get(self, n: int) -> bool:
        """Return bit n; bits past the stored words are False."""
        if n < 0:
            raise InvalidArgsError(f"bit index {n} is negative")
        index, bit = divmod(n, _WORD_BITS)
        if index >= len(self.words):
            return False
        return bool(self.words[index] >> bit & 1)

    def set(self, n: int, value: bool = True) -> None:
        """Set or clear bit n, growing the word list as needed."""
        if n < 0:
            raise InvalidArgsError(f"bit index {n} is negative")
        index, bit = divmod(n, _WORD_BITS)
        if index >= len(self.words):
            self.words.extend([0] * (index + 1 - len(self.words)))
        if value:
            self.words[index] |= 1 << bit
        else:
            self.words[index] &= ~(1 << bit) & _WORD_MASK