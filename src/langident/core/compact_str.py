"""Fixed-capacity ASCII strings packed into a single integer word.

A compact string holds 1-N non-NUL 7-bit ASCII characters (N = 4 or 8).
Byte 0 of the text occupies the lowest-order byte of the word and unused
trailing bytes are zero, so the length is recovered from the bit length of
the word without scanning.

Case conversion and character classification work on the whole word at
once (SWAR): a per-byte bias is added so that the high bit of each byte
flags whether it lies inside a range, the flags are combined with AND/NOT
and then shifted onto the ASCII case bit (0x20) or compared with the mask
of used bytes. No byte ever carries into its neighbour because every
stored byte is below 0x80 and every bias is at most 0x7F.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar

from .errors import CompactStrError, ErrorKind


def _repeat(byte: int, width: int) -> int:
    """Return ``byte`` replicated into every byte of a ``width``-byte word."""
    return int.from_bytes(bytes([byte]) * width, "little")


@total_ordering
@dataclass(frozen=True, repr=False)
class CompactStr:
    """Immutable packed ASCII string. Use CompactStr4 or CompactStr8."""

    word: int

    CAPACITY: ClassVar[int] = 8

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str):
        """Validate ``text`` and pack it.

        Raises CompactStrError with kind INVALID_SIZE, NON_ASCII or
        INVALID_NULL, checked in that order.
        """
        raw = text.encode("utf-8", "surrogatepass")
        length = len(raw)
        if not 1 <= length <= cls.CAPACITY:
            raise CompactStrError(
                ErrorKind.INVALID_SIZE,
                f"Compact string must be 1-{cls.CAPACITY} bytes, got {length}")

        word = int.from_bytes(raw, "little")
        mask = _repeat(0x80, length)
        if word & mask:
            raise CompactStrError(
                ErrorKind.NON_ASCII, f"Non-ASCII byte in {text!r}")
        # 0x80 - b keeps the high bit only where b == 0
        if (mask - word) & mask:
            raise CompactStrError(
                ErrorKind.INVALID_NULL, f"NUL byte in {text!r}")
        return cls(word)

    @classmethod
    def new_unchecked(cls, word: int):
        """Wrap a raw little-endian word without validation.

        The caller guarantees that ``word`` came from ``int()`` of a value
        of the same capacity. Anything else breaks every other method.
        """
        return cls(word)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return (self.word.bit_length() + 7) // 8

    def as_str(self) -> str:
        return self.word.to_bytes(len(self), "little").decode("ascii")

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.as_str()!r})"

    def __int__(self) -> int:
        return self.word

    def __lt__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self._big_endian() < other._big_endian()

    def _big_endian(self) -> int:
        # Reversing the byte order makes numeric order byte-lexicographic
        return int.from_bytes(self.word.to_bytes(self.CAPACITY, "little"), "big")

    # ------------------------------------------------------------------
    # Case conversion
    # ------------------------------------------------------------------

    def _lower_flags(self, word: int) -> int:
        """High bit set in every byte of ``word`` that is in 'a'..'z'."""
        width = self.CAPACITY
        return ((word + _repeat(0x1F, width))
                & ~(word + _repeat(0x05, width))
                & _repeat(0x80, width))

    def _upper_flags(self, word: int) -> int:
        """High bit set in every byte of ``word`` that is in 'A'..'Z'."""
        width = self.CAPACITY
        return ((word + _repeat(0x3F, width))
                & ~(word + _repeat(0x25, width))
                & _repeat(0x80, width))

    def to_ascii_uppercase(self):
        word = self.word
        return type(self)(word & ~(self._lower_flags(word) >> 2))

    def to_ascii_lowercase(self):
        word = self.word
        return type(self)(word | (self._upper_flags(word) >> 2))

    def to_ascii_titlecase(self):
        """Uppercase the first byte, lowercase the rest."""
        word = self.to_ascii_lowercase().word
        return type(self)(word & ~((self._lower_flags(word) >> 2) & 0xFF))

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def _used_mask(self) -> int:
        """High bit set in every non-zero byte."""
        width = self.CAPACITY
        return (self.word + _repeat(0x7F, width)) & _repeat(0x80, width)

    def _alpha_flags(self) -> int:
        # Setting 0x20 folds 'A'..'Z' onto 'a'..'z'
        return self._lower_flags(self.word | _repeat(0x20, self.CAPACITY))

    def _digit_flags(self) -> int:
        width = self.CAPACITY
        return ((self.word + _repeat(0x50, width))
                & ~(self.word + _repeat(0x46, width))
                & _repeat(0x80, width))

    def is_ascii_alphabetic(self) -> bool:
        mask = self._used_mask()
        return self._alpha_flags() & mask == mask

    def is_ascii_numeric(self) -> bool:
        mask = self._used_mask()
        return self._digit_flags() & mask == mask

    def is_ascii_alphanumeric(self) -> bool:
        mask = self._used_mask()
        return (self._alpha_flags() | self._digit_flags()) & mask == mask


class CompactStr4(CompactStr):
    """1-4 ASCII characters packed into 32 bits (scripts, regions)."""

    CAPACITY: ClassVar[int] = 4


class CompactStr8(CompactStr):
    """1-8 ASCII characters packed into 64 bits (languages, variants)."""

    CAPACITY: ClassVar[int] = 8
